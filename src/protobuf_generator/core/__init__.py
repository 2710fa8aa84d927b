"""Core building blocks: temp files, process execution and tool configuration."""

from .process import execute
from .temp_file import TempFile
from .tool_config import ToolConfig, apply_env_overrides, load_tool_config, resolve_tool_config

__all__ = [
    "TempFile",
    "ToolConfig",
    "apply_env_overrides",
    "execute",
    "load_tool_config",
    "resolve_tool_config",
]
