#!/usr/bin/env python3

"""Writing compiled artifacts to an output directory."""

from pathlib import Path

from ...infrastructure.logging import get_logger
from ...utils.file_utils import write_if_changed
from ...utils.path_utils import create_source_filename
from .interop_compiler import CompilationResult

logger = get_logger(__name__)


def write_artifacts(result: CompilationResult, output_dir: Path, check: bool = False) -> list[Path]:
    """Write every artifact of a batch, skipping files that are already current.

    Args:
        result: Compiled batch
        output_dir: Destination directory
        check: Report out-of-date files instead of writing them

    Returns:
        In check mode, the files whose content differs from the compiled
        artifacts; otherwise an empty list
    """
    drifted: list[Path] = []
    for hint_name, content in result.artifacts.items():
        output_file = output_dir / create_source_filename(hint_name)
        diff = write_if_changed(output_file, content, check=check)
        if diff is not None:
            logger.warning(f"[OUT OF DATE] {output_file}")
            logger.info(diff)
            drifted.append(output_file)
        elif not check:
            logger.debug(f"Wrote {output_file} ({len(content)} bytes)")
    return drifted
