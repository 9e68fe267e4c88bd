import logging
import os
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .logging_config import normalize_log_level
from .report import DEFAULT_FALLBACK_POD

logger = logging.getLogger(__name__)

_POD_RE = re.compile(r"^pod-\d+$")


@dataclass
class Settings:
    endpoint_file: Optional[Path]
    attachment_file: Optional[Path]
    output_file: Path
    epg: Optional[str] = None
    fallback_pod: str = DEFAULT_FALLBACK_POD
    log_level: str = "INFO"
    log_dir: Optional[Path] = None


def _optional_str(section: Dict[str, Any], key: str, where: str) -> Optional[str]:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise RuntimeError(f"{where}.{key} must be a string or null")
    value = value.strip()
    return value or None


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise RuntimeError(f"{name} must be a mapping/object")
    return section


def _optional_path(value: Optional[str]) -> Optional[Path]:
    return Path(value) if value else None


def _validate_pod(pod: str) -> str:
    pod = pod.strip()
    if not _POD_RE.match(pod):
        raise RuntimeError(f"Invalid fallback pod {pod!r} (expected e.g. 'pod-2').")
    return pod


def _load_settings_from_yaml(path: str) -> Settings:
    """Load settings from a single YAML config file."""
    p = Path(path)
    if not p.is_file():
        raise RuntimeError(f"APP_CONFIG_FILE not found: {path}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except Exception as exc:
        raise RuntimeError(f"Failed to read YAML config: {path}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise RuntimeError("YAML config root must be a mapping/object")

    inputs = _section(raw, "inputs")
    report = _section(raw, "report")
    runtime = _section(raw, "runtime")

    log_level = runtime.get("log_level", "INFO")
    if not isinstance(log_level, str):
        raise RuntimeError("runtime.log_level must be a string")

    return Settings(
        endpoint_file=_optional_path(_optional_str(inputs, "endpoint_file", "inputs")),
        attachment_file=_optional_path(_optional_str(inputs, "attachment_file", "inputs")),
        output_file=Path(_optional_str(report, "output_file", "report") or "vlan_audit.csv"),
        epg=_optional_str(report, "epg", "report"),
        fallback_pod=_optional_str(report, "fallback_pod", "report") or DEFAULT_FALLBACK_POD,
        log_level=log_level,
        log_dir=_optional_path(_optional_str(runtime, "log_dir", "runtime")),
    )


def _load_settings_from_env() -> Settings:
    return Settings(
        endpoint_file=_optional_path(os.getenv("ENDPOINT_FILE")),
        attachment_file=_optional_path(os.getenv("ATTACHMENT_FILE")),
        output_file=Path(os.getenv("OUTPUT_FILE") or "vlan_audit.csv"),
        epg=os.getenv("EPG_NAME") or None,
        fallback_pod=os.getenv("FALLBACK_POD") or DEFAULT_FALLBACK_POD,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_dir=_optional_path(os.getenv("LOG_DIR")),
    )


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> Settings:
    """Load settings from YAML (APP_CONFIG_FILE) or environment variables.

    Non-None values in overrides (typically command-line flags) replace the
    loaded ones. Both input files must be known after overrides are applied.
    """
    app_config_file = os.getenv("APP_CONFIG_FILE")
    if app_config_file:
        settings = _load_settings_from_yaml(app_config_file)
    else:
        settings = _load_settings_from_env()

    if overrides:
        changes = {k: v for k, v in overrides.items() if v is not None}
        for key in ("endpoint_file", "attachment_file", "output_file", "log_dir"):
            if key in changes:
                changes[key] = Path(changes[key])
        settings = replace(settings, **changes)

    try:
        log_level = normalize_log_level(settings.log_level)
    except RuntimeError as exc:
        raise RuntimeError(f"Invalid runtime.log_level / LOG_LEVEL: {exc}") from exc
    settings = replace(settings, fallback_pod=_validate_pod(settings.fallback_pod), log_level=log_level)

    if settings.endpoint_file is None:
        raise RuntimeError("Endpoint file not configured. Set ENDPOINT_FILE, inputs.endpoint_file or --endpoint-file.")
    if settings.attachment_file is None:
        raise RuntimeError(
            "Attachment file not configured. Set ATTACHMENT_FILE, inputs.attachment_file or --attachment-file."
        )

    logger.debug("Loaded settings: %s", settings)
    return settings
