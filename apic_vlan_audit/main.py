import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import load_settings
from .logging_config import configure_logging, is_known_log_level
from .parsers import parse_attachment_output, parse_endpoint_output
from .report import generate_csv, resolve_epg, summarize
from .storage import read_input_text, write_report
from .vlan_validator import validate_allowances

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_ENDPOINT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apic-vlan-audit",
        description="Report VPC paths where an endpoint's VLAN has no static path attachment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--endpoint-file", help="Saved endpoint lookup output (vlan-<n> and vpc paths)")
    parser.add_argument("--attachment-file", help="Saved 'moquery -c fvRsPathAtt' output")
    parser.add_argument("--output", dest="output_file", help="CSV report path (default: vlan_audit.csv)")
    parser.add_argument("--epg", help="EPG name for the report (default: EPG of the first matching attachment)")
    parser.add_argument("--fallback-pod", help="Pod used when no attachment names the path (default: pod-2)")
    parser.add_argument("--log-dir", help="Also write a timestamped log file to this directory")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    return parser


def _early_log_level(debug: bool) -> str:
    if debug:
        return "DEBUG"
    level = os.getenv("LOG_LEVEL", "INFO")
    # An unknown level is reported by load_settings(); log at INFO until then.
    return level if is_known_log_level(level) else "INFO"


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    # Configure logging early so load_settings() errors are visible.
    configure_logging(_early_log_level(args.debug))

    try:
        settings = load_settings(
            {
                "endpoint_file": args.endpoint_file,
                "attachment_file": args.attachment_file,
                "output_file": args.output_file,
                "epg": args.epg,
                "fallback_pod": args.fallback_pod,
                "log_dir": args.log_dir,
                "log_level": "DEBUG" if args.debug else None,
            }
        )
    except RuntimeError as exc:
        logger.error("%s", exc)
        return EXIT_ERROR

    configure_logging(settings.log_level, settings.log_dir)

    try:
        endpoint_text = read_input_text(settings.endpoint_file)
        attachment_text = read_input_text(settings.attachment_file)
    except RuntimeError as exc:
        logger.error("%s", exc)
        return EXIT_ERROR

    endpoint_data = parse_endpoint_output(endpoint_text)
    if endpoint_data is None:
        logger.error(
            "No VLAN or no VPC path found in %s; cannot validate.",
            settings.endpoint_file,
        )
        return EXIT_NO_ENDPOINT

    attachments = parse_attachment_output(attachment_text)
    logger.info(
        "Endpoint VLAN %s with %s path(s); %s path attachment(s) parsed",
        endpoint_data.vlan,
        len(endpoint_data.paths),
        len(attachments),
    )

    results = validate_allowances(endpoint_data, attachments)

    epg = settings.epg or resolve_epg(endpoint_data.vlan, attachments)
    if not epg:
        logger.warning("No EPG name given and none found for VLAN %s; EPG column will be empty.", endpoint_data.vlan)

    csv_text = generate_csv(
        endpoint_data.vlan,
        epg,
        results,
        endpoint_data,
        attachments,
        fallback_pod=settings.fallback_pod,
    )

    try:
        write_report(settings.output_file, csv_text)
    except RuntimeError as exc:
        logger.error("%s", exc)
        return EXIT_ERROR

    counts = summarize(results)
    logger.info(
        "Done: %s path(s) checked, %s allowed, %s not allowed",
        counts["total"],
        counts["allowed"],
        counts["not_allowed"],
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
