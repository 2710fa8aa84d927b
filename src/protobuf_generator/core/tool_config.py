"""
Tool Configuration (protobuf-generator.yaml)
============================================

Resolves where the external `protogen` executable lives and how its output is
labelled. Values come from, in increasing precedence:

- Built-in defaults (the `resources/` directory shipped with the package)
- An optional per-project `protobuf-generator.yaml`
- `PROTOBUF_GENERATOR_*` environment variables
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "protobuf-generator.yaml"

RESOURCES_DIR = Path(__file__).resolve().parents[1] / "resources"

DEFAULT_LANGUAGE = "csharp"
DEFAULT_EXTENSION = ".cs"
DEFAULT_REFERENCE_NAME = "protobuf-net"


@dataclass(frozen=True)
class ToolConfig:
    protogen_path: Path = RESOURCES_DIR / "protogen.exe"
    target_language: str = DEFAULT_LANGUAGE
    file_extension: str = DEFAULT_EXTENSION
    reference_name: str = DEFAULT_REFERENCE_NAME
    reference_path: Path = RESOURCES_DIR / "protobuf-net.dll"

    @property
    def working_directory(self) -> Path:
        return self.protogen_path.parent


def _as_str(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s if s else None


def _as_path(value: object, base_dir: Path) -> Path | None:
    s = _as_str(value)
    if s is None:
        return None
    p = Path(s).expanduser()
    if not p.is_absolute():
        p = base_dir / p
    return p


def _normalize_extension(ext: str) -> str:
    return ext if ext.startswith(".") else f".{ext}"


def _read_yaml(path: Path) -> Mapping[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable %s: %s", path, e)
        return {}
    if not isinstance(data, Mapping):
        return {}
    return data


def load_tool_config(project_dir: Path | None = None) -> ToolConfig:
    """
    Load `protobuf-generator.yaml` from `project_dir` (if present) over the defaults.

    Relative paths in the file are resolved against `project_dir`. Unknown keys and
    values of the wrong type are ignored.
    """
    cfg = ToolConfig()
    if project_dir is None:
        return cfg

    project_dir = Path(project_dir).resolve()
    path = project_dir / CONFIG_FILE_NAME
    if not path.exists():
        return cfg

    data = _read_yaml(path)
    changes: dict[str, Any] = {}

    protogen = _as_path(data.get("protogen"), project_dir)
    if protogen is not None:
        changes["protogen_path"] = protogen

    language = _as_str(data.get("language"))
    if language is not None:
        changes["target_language"] = language

    extension = _as_str(data.get("extension"))
    if extension is not None:
        changes["file_extension"] = _normalize_extension(extension)

    reference = data.get("reference")
    if isinstance(reference, Mapping):
        ref_name = _as_str(reference.get("name"))
        if ref_name is not None:
            changes["reference_name"] = ref_name
        ref_path = _as_path(reference.get("path"), project_dir)
        if ref_path is not None:
            changes["reference_path"] = ref_path

    return replace(cfg, **changes)


def _env_str(name: str) -> str | None:
    raw = os.environ.get(name)
    if raw is None:
        return None
    s = raw.strip()
    return s if s else None


def apply_env_overrides(cfg: ToolConfig) -> ToolConfig:
    """
    Apply env var overrides to a ToolConfig.

    Env vars (when set and non-empty) take precedence over project config.
    """
    changes: dict[str, Any] = {}

    protogen = _env_str("PROTOBUF_GENERATOR_PROTOGEN")
    if protogen is not None:
        changes["protogen_path"] = Path(protogen).expanduser().resolve()

    language = _env_str("PROTOBUF_GENERATOR_LANGUAGE")
    if language is not None:
        changes["target_language"] = language

    extension = _env_str("PROTOBUF_GENERATOR_EXTENSION")
    if extension is not None:
        changes["file_extension"] = _normalize_extension(extension)

    ref_name = _env_str("PROTOBUF_GENERATOR_REFERENCE_NAME")
    if ref_name is not None:
        changes["reference_name"] = ref_name

    ref_path = _env_str("PROTOBUF_GENERATOR_REFERENCE_PATH")
    if ref_path is not None:
        changes["reference_path"] = Path(ref_path).expanduser().resolve()

    return replace(cfg, **changes) if changes else cfg


def resolve_tool_config(project_dir: Path | None = None) -> ToolConfig:
    return apply_env_overrides(load_tool_config(project_dir))
