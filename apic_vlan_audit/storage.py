import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_input_text(path: Path) -> str:
    """
    Read a saved CLI capture (endpoint lookup or moquery dump).

    Undecodable bytes are replaced rather than rejected, since captures are
    often copied out of terminal sessions.
    """
    path = Path(path)
    if not path.is_file():
        raise RuntimeError(f"Input file not found: {path}")

    logger.info("Reading %s", path)
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise RuntimeError(f"Failed to read input file: {path}") from exc


def write_report(output_path: Path, csv_text: str) -> Path:
    """
    Persist the CSV report, creating parent directories as needed.

    A trailing newline is added so the file ends cleanly.
    """
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(csv_text)
            f.write("\n")
    except OSError as exc:
        raise RuntimeError(f"Failed to write report: {output_path}") from exc

    logger.info("Saved report to %s", output_path)
    return output_path
