import logging
from typing import Dict, List, Optional, Sequence

from .models import STATUS_NOT_ALLOWED, EndpointData, PathAttachment, ValidationResult
from .patterns import build_full_path, normalize_path_name

logger = logging.getLogger(__name__)

CSV_HEADER = "VLAN,EPG,PATH"
DEFAULT_FALLBACK_POD = "pod-2"
UNKNOWN_NODE_SEGMENT = "paths-XXX"


def _find_pod(path: str, attachments: Sequence[PathAttachment], fallback_pod: str) -> str:
    key = normalize_path_name(path)
    for att in attachments:
        if normalize_path_name(att.path) == key:
            return att.pod
    return fallback_pod


def generate_csv(
    vlan: str,
    epg: str,
    results: Sequence[ValidationResult],
    endpoint_data: Optional[EndpointData] = None,
    attachments: Sequence[PathAttachment] = (),
    fallback_pod: str = DEFAULT_FALLBACK_POD,
) -> str:
    """Render the not-allowed paths as 'VLAN,EPG,PATH' CSV.

    The pod comes from any attachment (whatever its VLAN) that has the same
    path; otherwise fallback_pod is used. Values are written as-is, without
    quoting. With nothing to report, only the header line is returned.
    """
    if endpoint_data is not None and endpoint_data.vlan != vlan:
        logger.debug("Report VLAN %s differs from endpoint VLAN %s", vlan, endpoint_data.vlan)

    lines: List[str] = [CSV_HEADER]
    for result in results:
        if result.status != STATUS_NOT_ALLOWED:
            continue
        pod = _find_pod(result.path, attachments, fallback_pod)
        full_path = build_full_path(pod, result.path, fallback=UNKNOWN_NODE_SEGMENT)
        lines.append(f"{vlan},{epg},{full_path}")

    return "\n".join(lines)


def summarize(results: Sequence[ValidationResult]) -> Dict[str, int]:
    not_allowed = sum(1 for r in results if r.status == STATUS_NOT_ALLOWED)
    return {
        "total": len(results),
        "allowed": len(results) - not_allowed,
        "not_allowed": not_allowed,
    }


def resolve_epg(vlan: str, attachments: Sequence[PathAttachment]) -> str:
    """EPG name of the first attachment on this VLAN, or '' if there is none."""
    for att in attachments:
        if att.vlan == vlan:
            return att.epg
    return ""
