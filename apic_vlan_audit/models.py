from dataclasses import dataclass
from typing import Tuple

STATUS_ALLOWED = "allowed"
STATUS_NOT_ALLOWED = "not_allowed"


@dataclass(frozen=True)
class EndpointData:
    """
    Result of a fabric endpoint lookup.

    - vlan: VLAN id as found in the text (digits only, e.g. "100")
    - paths: declared VPC path names, deduplicated, in first-seen order
    """

    vlan: str
    paths: Tuple[str, ...]


@dataclass(frozen=True)
class PathAttachment:
    """One static path attachment (fvRsPathAtt) parsed from a moquery dump."""

    vlan: str
    epg: str
    path: str
    pod: str
    full_path: str  # e.g. "pod-1/protpaths-101-102/pathep-[101-102-VPC-5-6-PG]", or "" if unknown


@dataclass(frozen=True)
class ValidationResult:
    path: str
    is_allowed: bool
    status: str  # STATUS_ALLOWED | STATUS_NOT_ALLOWED
    has_active_endpoint: bool = True
