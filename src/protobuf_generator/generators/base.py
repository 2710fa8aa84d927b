from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union


Severity = Literal["error", "warning"]
FailureKind = Literal["missing_dependency", "external_tool", "unexpected"]

# Task-list level used for every generator diagnostic.
DEFAULT_LEVEL = 4


@dataclass(frozen=True)
class GenerationRequest:
    input_path: str
    output_path: str
    namespace_spec: str | None = None

    @property
    def segments(self) -> list[str]:
        if not self.namespace_spec:
            return []
        return self.namespace_spec.split(";")

    @property
    def namespace(self) -> str | None:
        segments = self.segments
        return segments[0] if segments else None

    @property
    def packages(self) -> list[str]:
        return self.segments[1:]


@dataclass(frozen=True)
class Diagnostic:
    message: str
    severity: Severity = "error"
    level: int = DEFAULT_LEVEL
    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class GenerationSuccess:
    output: bytes

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class GenerationFailure:
    kind: FailureKind
    diagnostics: list[Diagnostic] = field(default_factory=list)
    exit_code: int | None = None

    @property
    def ok(self) -> bool:
        return False


GenerationResult = Union[GenerationSuccess, GenerationFailure]


class CodeGenerator:
    """A single-file generator: one input file in, one generated file out."""

    def default_extension(self) -> str:
        raise NotImplementedError

    def generate(
        self,
        input_content: str | None,
        input_path: str,
        namespace_spec: str | None,
    ) -> GenerationResult:
        raise NotImplementedError
