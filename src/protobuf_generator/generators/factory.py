from __future__ import annotations

from pathlib import Path
from typing import Callable

from ..core.tool_config import ToolConfig
from .base import CodeGenerator
from .protogen import ProtogenGenerator


GeneratorFactory = Callable[[ToolConfig], CodeGenerator]

_GENERATORS: dict[str, GeneratorFactory] = {
    "protogen": ProtogenGenerator,
}

# Input extension (lowercase) -> generator kind.
_EXTENSIONS: dict[str, str] = {
    ".proto": "protogen",
}


def register_generator(kind: str, factory: GeneratorFactory, *, extensions: tuple[str, ...] = ()) -> None:
    _GENERATORS[kind] = factory
    for ext in extensions:
        _EXTENSIONS[ext.lower()] = kind


def available_generators() -> list[str]:
    return sorted(_GENERATORS)


def get_generator(kind: str, cfg: ToolConfig | None = None) -> CodeGenerator:
    factory = _GENERATORS.get(kind)
    if factory is None:
        raise ValueError(f"Unknown generator kind: {kind!r} (available: {', '.join(available_generators())})")
    return factory(cfg or ToolConfig())


def generator_for_path(path: str | Path, cfg: ToolConfig | None = None) -> CodeGenerator | None:
    kind = _EXTENSIONS.get(Path(path).suffix.lower())
    if kind is None:
        return None
    return get_generator(kind, cfg)
