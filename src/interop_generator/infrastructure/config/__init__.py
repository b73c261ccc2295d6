"""Infrastructure configuration module."""

from .application_config import Config
from .compiler_config import build_compiler_options, get_config

__all__ = ["Config", "build_compiler_options", "get_config"]
