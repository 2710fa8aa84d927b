from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from ..core.process import execute
from ..core.temp_file import TempFile
from ..core.tool_config import ToolConfig
from .base import (
    CodeGenerator,
    Diagnostic,
    GenerationFailure,
    GenerationRequest,
    GenerationResult,
    GenerationSuccess,
)

logger = logging.getLogger(__name__)


def build_protogen_args(request: GenerationRequest, *, language: str = "csharp") -> list[str]:
    """
    Build the protogen argv (without the executable) for a request.

    The order is fixed: protogen's own parser expects it.
    """
    args = [
        # Write errors into the output file instead of stderr.
        "-writeErrors",
        f"-i:{request.input_path}",
        f"-w:{os.path.dirname(request.input_path)}",
        f"-t:{language}",
        f"-o:{request.output_path}",
        "-q",
    ]
    if request.namespace is not None:
        args.append(f"-ns:{request.namespace}")
    for package in request.packages:
        args.append(f"-p:{package}")
    return args


def read_error_listing(temp: TempFile, exit_code: int) -> list[Diagnostic]:
    diagnostics = [Diagnostic(message=line) for line in temp.read_lines() if line]
    if not diagnostics:
        # protogen failed without saying why.
        diagnostics.append(Diagnostic(message=f"Code generation failed with exit-code {exit_code}"))
    return diagnostics


@dataclass(frozen=True)
class ProtogenGenerator(CodeGenerator):
    cfg: ToolConfig = field(default_factory=ToolConfig)

    def default_extension(self) -> str:
        return self.cfg.file_extension

    def generate(
        self,
        input_content: str | None,
        input_path: str,
        namespace_spec: str | None,
    ) -> GenerationResult:
        if input_content is None:
            raise ValueError("input_content must not be None")

        try:
            with TempFile() as temp:
                protogen = self.cfg.protogen_path
                if not protogen.is_file():
                    logger.warning("protogen not found at %s", protogen)
                    return GenerationFailure(
                        kind="missing_dependency",
                        diagnostics=[Diagnostic(message=f"Missing: {protogen}")],
                    )

                request = GenerationRequest(
                    input_path=str(input_path),
                    output_path=str(temp.path),
                    namespace_spec=namespace_spec,
                )
                args = build_protogen_args(request, language=self.cfg.target_language)
                logger.info("Generating %s from %s", self.cfg.target_language, input_path)
                exit_code = execute(protogen, args, self.cfg.working_directory)

                if exit_code != 0:
                    diagnostics = read_error_listing(temp, exit_code)
                    logger.warning(
                        "protogen failed for %s (exit %d, %d diagnostic(s))",
                        input_path,
                        exit_code,
                        len(diagnostics),
                    )
                    return GenerationFailure(kind="external_tool", diagnostics=diagnostics, exit_code=exit_code)

                return GenerationSuccess(output=temp.read_bytes())
        except Exception as e:
            logger.warning("Code generation for %s raised: %s", input_path, e, exc_info=True)
            return GenerationFailure(
                kind="unexpected",
                diagnostics=[Diagnostic(message=f"{type(e).__name__}: {e}")],
            )
