"""Interop Generator - C# binding generation for signature-resolved native structs."""

from .application.generators import CompilationResult, InteropCompiler
from .domain.services.rendering import CompilerOptions
from .infrastructure.config import Config
from .main import main

__all__ = ["CompilationResult", "CompilerOptions", "Config", "InteropCompiler", "main"]
