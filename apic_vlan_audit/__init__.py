"""
APIC VLAN path audit.

This package provides:
- Parsers for endpoint lookup output and 'moquery -c fvRsPathAtt' dumps
- VLAN allowance validation of endpoint paths against static path attachments
- CSV reporting of the paths missing a VLAN attachment
"""

from .models import EndpointData, PathAttachment, ValidationResult
from .parsers import parse_attachment_output, parse_endpoint_output
from .report import generate_csv
from .vlan_validator import validate_allowances

__all__ = [
    "EndpointData",
    "PathAttachment",
    "ValidationResult",
    "generate_csv",
    "parse_attachment_output",
    "parse_endpoint_output",
    "validate_allowances",
]
