"""
Pytest Configuration and Fixtures
=================================

Shared fixtures for all tests. The external protogen tool is replaced by a
small executable Python script that records each invocation and behaves as
each test asks.
"""

import json
import os
import stat
import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

# Add src/ to path for imports
SRC_DIR = Path(__file__).parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from protobuf_generator.core.tool_config import ToolConfig  # noqa: E402


_STUB_TEMPLATE = '''#!{python}
import json
import sys

args = sys.argv[1:]
with open({calls!r}, "a", encoding="utf-8") as f:
    f.write(json.dumps(args) + "\\n")

out = next((a[3:] for a in args if a.startswith("-o:")), None)
text = {text!r}
if out is not None and text is not None:
    with open(out, "w", encoding="utf-8", newline="") as f:
        f.write(text)
sys.exit({exit_code})
'''


class StubTool:
    """Handle to a generated stand-in for protogen."""

    def __init__(self, path: Path, calls_file: Path):
        self.path = path
        self.calls_file = calls_file

    @property
    def calls(self) -> list[list[str]]:
        if not self.calls_file.exists():
            return []
        return [json.loads(line) for line in self.calls_file.read_text(encoding="utf-8").splitlines() if line]

    def output_paths(self) -> list[str]:
        return [a[3:] for call in self.calls for a in call if a.startswith("-o:")]


# =============================================================================
# Stub Tool Fixtures
# =============================================================================


@pytest.fixture
def make_stub_tool(tmp_path: Path) -> Callable[..., StubTool]:
    """Create an executable protogen stand-in.

    Usage:
        def test_x(make_stub_tool):
            tool = make_stub_tool(exit_code=0, text="hello")
    """
    tool_dir = tmp_path / "tool"
    tool_dir.mkdir()

    def _make(exit_code: int = 0, text: Optional[str] = None) -> StubTool:
        calls_file = tool_dir / "calls.jsonl"
        path = tool_dir / "protogen"
        path.write_text(
            _STUB_TEMPLATE.format(
                python=sys.executable,
                calls=str(calls_file),
                text=text,
                exit_code=int(exit_code),
            ),
            encoding="utf-8",
        )
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return StubTool(path, calls_file)

    return _make


@pytest.fixture
def proto_file(tmp_path: Path) -> Path:
    """A minimal .proto file inside a project directory."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    path = project_dir / "Person.proto"
    path.write_text(
        'syntax = "proto2";\n\nmessage Person {\n  required string name = 1;\n}\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def tool_config_for() -> Callable[[StubTool], ToolConfig]:
    def _cfg(tool: StubTool) -> ToolConfig:
        return ToolConfig(protogen_path=tool.path)

    return _cfg


@pytest.fixture(autouse=True)
def clean_generator_env(monkeypatch):
    """Keep developer PROTOBUF_GENERATOR_* settings out of the tests."""
    for key in list(os.environ):
        if key.startswith("PROTOBUF_GENERATOR_"):
            monkeypatch.delenv(key, raising=False)
