"""Application generators."""

from .artifact_writer import write_artifacts
from .interop_compiler import CompilationResult, InteropCompiler

__all__ = ["CompilationResult", "InteropCompiler", "write_artifacts"]
