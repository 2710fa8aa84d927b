from .base import (
    CodeGenerator,
    Diagnostic,
    GenerationFailure,
    GenerationRequest,
    GenerationResult,
    GenerationSuccess,
)
from .factory import available_generators, generator_for_path, get_generator, register_generator
from .protogen import ProtogenGenerator, build_protogen_args

__all__ = [
    "CodeGenerator",
    "Diagnostic",
    "GenerationFailure",
    "GenerationRequest",
    "GenerationResult",
    "GenerationSuccess",
    "ProtogenGenerator",
    "available_generators",
    "build_protogen_args",
    "generator_for_path",
    "get_generator",
    "register_generator",
]
