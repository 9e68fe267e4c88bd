"""Tests for VLAN allowance validation."""

from __future__ import annotations

from apic_vlan_audit.models import EndpointData, PathAttachment
from apic_vlan_audit.parsers import parse_attachment_output, parse_endpoint_output
from apic_vlan_audit.vlan_validator import validate_allowances


def _att(vlan: str, path: str, pod: str = "pod-1") -> PathAttachment:
    return PathAttachment(vlan=vlan, epg=f"VLAN{vlan}_APP", path=path, pod=pod, full_path="")


def test_same_vlan_match_is_allowed() -> None:
    ep = EndpointData(vlan="100", paths=("101-102-VPC-5-6-PG",))
    results = validate_allowances(ep, [_att("100", "101-102-VPC-5-6-PG")])
    assert len(results) == 1
    assert results[0].is_allowed
    assert results[0].status == "allowed"
    assert results[0].path == "101-102-VPC-5-6-PG"
    assert results[0].has_active_endpoint


def test_no_attachment_is_not_allowed() -> None:
    ep = EndpointData(vlan="100", paths=("101-102-VPC-5-6-PG",))
    results = validate_allowances(ep, [])
    assert not results[0].is_allowed
    assert results[0].status == "not_allowed"


def test_other_vlan_attachment_does_not_allow() -> None:
    ep = EndpointData(vlan="100", paths=("101-102-VPC-5-6-PG",))
    results = validate_allowances(ep, [_att("200", "101-102-VPC-5-6-PG")])
    assert results[0].status == "not_allowed"


def test_vlan_compared_as_exact_string() -> None:
    ep = EndpointData(vlan="100", paths=("101-102-VPC-5-6-PG",))
    results = validate_allowances(ep, [_att("0100", "101-102-VPC-5-6-PG")])
    assert results[0].status == "not_allowed"


def test_path_comparison_is_normalized_but_original_kept() -> None:
    ep = EndpointData(vlan="100", paths=("101-102-VPC-5-6-PG",))
    results = validate_allowances(ep, [_att("100", " [101-102-vpc-5-6-pg] ")])
    assert results[0].status == "allowed"
    assert results[0].path == "101-102-VPC-5-6-PG"


def test_results_follow_endpoint_order() -> None:
    ep = EndpointData(vlan="100", paths=("3-4-VPC-1-1-PG", "1-2-VPC-1-1-PG", "5-6-VPC-1-1-PG"))
    results = validate_allowances(ep, [_att("100", "1-2-VPC-1-1-PG")])
    assert [r.path for r in results] == ["3-4-VPC-1-1-PG", "1-2-VPC-1-1-PG", "5-6-VPC-1-1-PG"]
    assert [r.status for r in results] == ["not_allowed", "allowed", "not_allowed"]


def test_parsed_inputs_end_to_end() -> None:
    ep = parse_endpoint_output("vlan-100, vpc 101-102-VPC-5-6-PG")
    attachments = parse_attachment_output(
        "dn: uni/tn-X/ap-Y/epg-VLAN100_APP/rspathAtt-"
        "[topology/pod-1/protpaths-101-102/pathep-[101-102-VPC-5-6-PG]]"
    )
    assert ep is not None
    assert [r.status for r in validate_allowances(ep, attachments)] == ["allowed"]
    assert [r.status for r in validate_allowances(ep, [])] == ["not_allowed"]
