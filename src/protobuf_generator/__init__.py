"""
protobuf-generator - design-time code generation for .proto files

Runs the external `protogen` tool on a .proto file and hands the generated
source back to the caller, with structured diagnostics when it fails.
"""

__version__ = "0.1.0"

from protobuf_generator.core.temp_file import TempFile
from protobuf_generator.core.tool_config import ToolConfig, resolve_tool_config
from protobuf_generator.generators import (
    CodeGenerator,
    Diagnostic,
    GenerationFailure,
    GenerationRequest,
    GenerationResult,
    GenerationSuccess,
    ProtogenGenerator,
    generator_for_path,
    get_generator,
)
from protobuf_generator.host import FileSystemHost, GenerationContext, GeneratorHost, run_generator

__all__ = [
    # Generators
    "CodeGenerator",
    "ProtogenGenerator",
    "get_generator",
    "generator_for_path",
    # Results
    "GenerationRequest",
    "GenerationResult",
    "GenerationSuccess",
    "GenerationFailure",
    "Diagnostic",
    # Host
    "GenerationContext",
    "GeneratorHost",
    "FileSystemHost",
    "run_generator",
    # Core
    "TempFile",
    "ToolConfig",
    "resolve_tool_config",
]
