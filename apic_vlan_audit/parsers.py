import logging
from typing import Dict, List, Optional

from .models import EndpointData, PathAttachment
from .patterns import (
    build_full_path,
    extract_vlan_from_epg,
    match_attachment_dn,
    match_endpoint_path,
    match_vlan_token,
)

logger = logging.getLogger(__name__)


def parse_endpoint_output(text: str) -> Optional[EndpointData]:
    """Parse endpoint lookup output (e.g. 'show endpoint' / EP tracker text).

    Returns:
        EndpointData with the VLAN and the distinct VPC paths, or None when
        either the VLAN or every path is missing.

    Notes:
      - When several lines carry a 'vlan-<n>' token, the last one wins.
      - At most one path is taken per line; the 'vpc <path>' form is preferred
        over a bare path token.
    """
    vlan = ""
    paths: Dict[str, None] = {}

    for line in text.strip().splitlines():
        line_vlan = match_vlan_token(line)
        if line_vlan:
            vlan = line_vlan

        path = match_endpoint_path(line)
        if path:
            paths.setdefault(path, None)

    if not vlan or not paths:
        logger.debug("Endpoint output incomplete: vlan=%r, paths=%s", vlan, len(paths))
        return None

    return EndpointData(vlan=vlan, paths=tuple(paths))


def parse_attachment_output(text: str) -> List[PathAttachment]:
    """Parse 'moquery -c fvRsPathAtt' output into path attachments.

    Only the 'dn:' lines are used. Lines whose EPG name carries no VLAN, or
    which match neither the protpaths (VPC) nor the paths (single node) DN
    form, are skipped.
    """
    attachments: List[PathAttachment] = []

    for line in text.strip().splitlines():
        if not line.strip():
            continue

        capture = match_attachment_dn(line)
        if capture is None:
            continue

        vlan = extract_vlan_from_epg(capture.epg)
        if not vlan or not capture.path_name:
            logger.debug("Skipping attachment without VLAN in EPG name: %s", capture.epg)
            continue

        logger.debug(
            "%s attachment %s on %s (EPG %s)",
            "VPC" if capture.is_vpc else "Single-node",
            capture.path_name,
            capture.pod,
            capture.epg,
        )
        attachments.append(
            PathAttachment(
                vlan=vlan,
                epg=capture.epg,
                path=capture.path_name,
                pod=capture.pod,
                full_path=build_full_path(capture.pod, capture.path_name),
            )
        )

    logger.debug("Parsed %s path attachment(s)", len(attachments))
    return attachments
