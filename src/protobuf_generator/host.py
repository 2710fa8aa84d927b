"""
Generator Host Adapter
======================

Bridges a `CodeGenerator` and whatever is driving it (an IDE integration, the
CLI, a build step). The host supplies the input file and namespace, receives
diagnostics through `report()`, and is asked to make sure the generated code's
support library is referenced via `ensure_reference()`.

`FileSystemHost` is the stand-alone host used by the CLI: it writes the
generated file next to its input and keeps diagnostics in memory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .core.tool_config import ToolConfig
from .generators.base import CodeGenerator, Diagnostic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationContext:
    input_path: str
    input_content: str | None
    namespace_spec: str | None = None

    @staticmethod
    def from_file(path: str | Path, namespace_spec: str | None = None) -> GenerationContext:
        p = Path(path).resolve()
        return GenerationContext(
            input_path=str(p),
            input_content=p.read_text(encoding="utf-8", errors="replace"),
            namespace_spec=namespace_spec,
        )


class GeneratorHost:
    """Default host: diagnostics and reference requests go to the log."""

    def report(self, diagnostic: Diagnostic) -> None:
        log = logger.warning if diagnostic.severity == "warning" else logger.error
        log("%s(%d,%d): %s", diagnostic.severity, diagnostic.line, diagnostic.column, diagnostic.message)

    def ensure_reference(self, name: str, path: Path) -> None:
        logger.info("Project should reference %s (%s)", name, path)


def run_generator(
    generator: CodeGenerator,
    context: GenerationContext,
    host: GeneratorHost,
    cfg: ToolConfig,
) -> bytes | None:
    """
    Run `generator` for `context`, reporting through `host`.

    Returns the generated bytes, or None when generation failed (every failure
    diagnostic has then been reported).
    """
    result = generator.generate(context.input_content, context.input_path, context.namespace_spec)
    if not result.ok:
        for diagnostic in result.diagnostics:
            host.report(diagnostic)
        return None

    # Reference failures are warnings; the generated output is still returned.
    try:
        host.ensure_reference(cfg.reference_name, cfg.reference_path)
    except Exception as e:
        host.report(
            Diagnostic(
                message=f"Failed to add reference to {cfg.reference_path}: {e}",
                severity="warning",
            )
        )

    return result.output


@dataclass
class FileSystemHost(GeneratorHost):
    diagnostics: list[Diagnostic] = field(default_factory=list)
    references: list[tuple[str, Path]] = field(default_factory=list)

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        super().report(diagnostic)

    def ensure_reference(self, name: str, path: Path) -> None:
        if (name, path) not in self.references:
            self.references.append((name, path))
        super().ensure_reference(name, path)

    @property
    def has_errors(self) -> bool:
        return any(d.severity == "error" for d in self.diagnostics)

    def generate_file(
        self,
        generator: CodeGenerator,
        input_path: str | Path,
        cfg: ToolConfig,
        *,
        namespace_spec: str | None = None,
    ) -> Path | None:
        """
        Generate `<stem><default_extension>` beside `input_path`.

        Nothing is written when generation fails, so a previous output stays as it was.
        """
        context = GenerationContext.from_file(input_path, namespace_spec)
        output = run_generator(generator, context, self, cfg)
        if output is None:
            return None

        source = Path(context.input_path)
        out_path = source.with_name(source.stem + generator.default_extension())
        out_path.write_bytes(output)
        logger.info("Wrote %s (%d bytes)", out_path, len(output))
        return out_path
