#!/usr/bin/env python3

"""Compiler tuning with environment variable overrides."""

import os
from typing import Any

from ...domain.services.rendering.options import DEFAULT_GENERATOR_NAMESPACE, CompilerOptions

DEFAULT_CONFIG: dict[str, Any] = {
    # Generated code
    "POINTER_SIZE": 8,
    "GENERATOR_NAMESPACE": DEFAULT_GENERATOR_NAMESPACE,
    "STACKALLOC_THRESHOLD": 512,

    # Batch compilation
    "ENABLE_PARALLEL": False,
    "PARALLEL_WORKERS": 0,  # 0 = cpu count
}


def get_config() -> dict[str, Any]:
    """Get configuration with environment variable overrides.

    Each key can be overridden by ``INTEROP_<KEY>``; values are converted to
    the type of the default and ignored when they do not parse.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"INTEROP_{key}")
        if env_value is None:
            continue
        if isinstance(config[key], bool):
            config[key] = env_value.lower() in ("true", "1", "yes", "on")
        elif isinstance(config[key], int):
            try:
                config[key] = int(env_value)
            except ValueError:
                pass
        else:
            config[key] = env_value

    return config


def build_compiler_options(**overrides: Any) -> CompilerOptions:
    """Build ``CompilerOptions`` from the environment, applying non-None overrides.

    Args:
        **overrides: ``pointer_size``, ``generator_namespace`` or ``stackalloc_threshold``

    Returns:
        Compiler options for a batch
    """
    config = get_config()
    values = {
        "pointer_size": config["POINTER_SIZE"],
        "generator_namespace": config["GENERATOR_NAMESPACE"],
        "stackalloc_threshold": config["STACKALLOC_THRESHOLD"],
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    return CompilerOptions(**values)
