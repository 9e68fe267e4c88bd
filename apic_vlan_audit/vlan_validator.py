import logging
from typing import List, Sequence, Set

from .models import STATUS_ALLOWED, STATUS_NOT_ALLOWED, EndpointData, PathAttachment, ValidationResult
from .patterns import normalize_path_name

logger = logging.getLogger(__name__)


def _allowed_path_keys(vlan: str, attachments: Sequence[PathAttachment]) -> Set[str]:
    """Normalized path names of the attachments deployed on exactly this VLAN."""
    return {normalize_path_name(att.path) for att in attachments if att.vlan == vlan}


def validate_allowances(endpoint_data: EndpointData, attachments: Sequence[PathAttachment]) -> List[ValidationResult]:
    """Check each endpoint path against the static path attachments of its VLAN.

    A path is allowed only if some attachment with the same VLAN carries the
    same path name (compared case-insensitively, brackets ignored). Attachments
    on other VLANs never allow a path.

    Returns:
        One ValidationResult per endpoint path, in endpoint order.
    """
    allowed_keys = _allowed_path_keys(endpoint_data.vlan, attachments)
    results: List[ValidationResult] = []

    for path in endpoint_data.paths:
        is_allowed = normalize_path_name(path) in allowed_keys

        if is_allowed:
            logger.info("VLAN %s allowed on path %s", endpoint_data.vlan, path)
        else:
            logger.warning("VLAN %s not allowed on path %s (no matching path attachment)", endpoint_data.vlan, path)

        results.append(
            ValidationResult(
                path=path,
                is_allowed=is_allowed,
                status=STATUS_ALLOWED if is_allowed else STATUS_NOT_ALLOWED,
            )
        )

    logger.info(
        "Validated %s path(s) for VLAN %s: %s not allowed",
        len(results),
        endpoint_data.vlan,
        sum(1 for r in results if not r.is_allowed),
    )
    return results
