"""
Named matchers for APIC diagnostic text.

Every pattern lives behind a small function that returns an optional capture,
so each output format variant can be tested on its own.
"""

import re
from dataclasses import dataclass
from typing import Optional

# Endpoint lookup text
_VLAN_TOKEN_RE = re.compile(r"vlan-(\d+)", re.IGNORECASE)
_VPC_KEYWORD_PATH_RE = re.compile(r"vpc\s+([\d-]+-VPC-[\d-]+-PG)", re.IGNORECASE)
_BARE_VPC_PATH_RE = re.compile(r"\b([\d-]+-[\d-]+-VPC-[\d-]+-[\d-]+-PG)\b", re.IGNORECASE)

# moquery -c fvRsPathAtt dumps
_DN_PREFIX = r"dn\s*:\s*uni/tn-[^/]+/ap-[^/]+/epg-([^/]+)/rspathAtt-\[topology/(pod-\d+)/"
_VPC_DN_RE = re.compile(_DN_PREFIX + r"protpaths-[\d-]+/pathep-\[([^\]]+)\]\]", re.IGNORECASE)
_SINGLE_DN_RE = re.compile(_DN_PREFIX + r"paths-\d+/pathep-\[([^\]]+)\]\]", re.IGNORECASE)

_EPG_VLAN_RE = re.compile(r"VLAN(\d+)", re.IGNORECASE)

# Path names
_VPC_PATH_NODES_RE = re.compile(r"^(\d+)-(\d+)-VPC")
_SINGLE_PATH_NODE_RE = re.compile(r"^(\d+)[-/]")

_BRACKETS_RE = re.compile(r"[\[\]]")


@dataclass(frozen=True)
class DnCapture:
    epg: str
    pod: str
    path_name: str
    is_vpc: bool


def normalize_path_name(path: str) -> str:
    """Comparison key for path names: no brackets, trimmed, lowercase."""
    return _BRACKETS_RE.sub("", path).strip().lower()


def match_vlan_token(line: str) -> Optional[str]:
    """Return the digits of a 'vlan-<n>' token, e.g. 'vlan-100' -> '100'."""
    m = _VLAN_TOKEN_RE.search(line)
    if m:
        return m.group(1)
    return None


def match_endpoint_path(line: str) -> Optional[str]:
    """
    Extract a VPC path name from an endpoint lookup line.

    'vpc 101-102-VPC-5-6-PG' is tried first; a bare '101-102-VPC-5-6-PG'
    token only when that fails.
    """
    m = _VPC_KEYWORD_PATH_RE.search(line)
    if not m:
        m = _BARE_VPC_PATH_RE.search(line)
    if m:
        return m.group(1)
    return None


def match_attachment_dn(line: str) -> Optional[DnCapture]:
    m = _VPC_DN_RE.search(line)
    is_vpc = True
    if not m:
        m = _SINGLE_DN_RE.search(line)
        is_vpc = False
    if not m:
        return None
    return DnCapture(epg=m.group(1), pod=m.group(2), path_name=m.group(3), is_vpc=is_vpc)


def extract_vlan_from_epg(epg_name: str) -> str:
    """EPG names carry their VLAN, e.g. 'VLAN100_APP' -> '100'. Empty string if absent."""
    m = _EPG_VLAN_RE.search(epg_name)
    return m.group(1) if m else ""


def build_full_path(pod: str, path_name: str, fallback: Optional[str] = None) -> str:
    """
    Rebuild the topology path of a path name.

    - '101-102-VPC-...' -> '<pod>/protpaths-101-102/pathep-[<path_name>]'
    - '101-...' or '101/...' -> '<pod>/paths-101/pathep-[<path_name>]'
    - anything else -> '<pod>/<fallback>/pathep-[<path_name>]', or '' without fallback
    """
    m = _VPC_PATH_NODES_RE.match(path_name)
    if m:
        return f"{pod}/protpaths-{m.group(1)}-{m.group(2)}/pathep-[{path_name}]"

    m = _SINGLE_PATH_NODE_RE.match(path_name)
    if m:
        return f"{pod}/paths-{m.group(1)}/pathep-[{path_name}]"

    if fallback is None:
        return ""
    return f"{pod}/{fallback}/pathep-[{path_name}]"
