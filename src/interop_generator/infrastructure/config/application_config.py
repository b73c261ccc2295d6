"""Run configuration for the interop generator CLI."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_METADATA_PATH = Path("metadata/structs.json")
DEFAULT_OUTPUT_DIR = Path("generated")
DEFAULT_LOG_DIR = Path("logs")

_TRUE_VALUES = ("true", "1", "yes")


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    return Path(value) if value else default


@dataclass
class Config:
    """Where metadata is read from and where bindings and logs are written."""

    metadata_path: Path
    output_dir: Path
    verbose: bool = False
    log_dir: Path = DEFAULT_LOG_DIR

    @classmethod
    def from_env(cls, env_path: Path | None = None) -> "Config":
        """
        Build a configuration from the environment.

        A ``.env`` file is loaded first when present; variables already set in
        the process environment take precedence over it.

        Args:
            env_path: ``.env`` file to load (defaults to ``./.env``)

        Returns:
            Config built from METADATA_PATH, OUTPUT_DIR, LOG_DIR and VERBOSE
        """
        dotenv_file = env_path if env_path is not None else Path.cwd() / ".env"
        if dotenv_file.is_file():
            load_dotenv(dotenv_file)

        return cls(
            metadata_path=_env_path("METADATA_PATH", DEFAULT_METADATA_PATH),
            output_dir=_env_path("OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
            verbose=os.getenv("VERBOSE", "false").lower() in _TRUE_VALUES,
            log_dir=_env_path("LOG_DIR", DEFAULT_LOG_DIR),
        )

    @classmethod
    def from_args(
        cls,
        metadata_path: Path | None = None,
        output_dir: Path | None = None,
        verbose: bool | None = None,
    ) -> "Config":
        """
        Apply command line values on top of ``from_env``; ``None`` keeps the environment value.

        Args:
            metadata_path: Metadata document given on the command line
            output_dir: ``-o/--output`` directory
            verbose: ``-v/--verbose`` flag

        Returns:
            Config object
        """
        config = cls.from_env()
        overrides = {"metadata_path": metadata_path, "output_dir": output_dir, "verbose": verbose}
        for attribute, value in overrides.items():
            if value is not None:
                setattr(config, attribute, value)
        return config

    def validate(self) -> None:
        """
        Check that the metadata document exists and the output path is usable.

        Raises:
            ValueError: If the metadata path is missing or not a file, or the
                output path exists and is not a directory
        """
        if not self.metadata_path.exists():
            raise ValueError(f"Metadata file not found: {self.metadata_path}")
        if not self.metadata_path.is_file():
            raise ValueError(f"Not a file: {self.metadata_path}")
        if self.output_dir.exists() and not self.output_dir.is_dir():
            raise ValueError(f"Output path is not a directory: {self.output_dir}")

    def ensure_output_dir(self) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
