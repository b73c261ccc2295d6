#!/usr/bin/env python3

"""Batch compiler orchestrator (Application Layer).

Compiles a batch of struct descriptors into:
- one binding artifact per struct
- one resolver registration artifact covering every compiled struct
- one artifact declaring the shared fixed size array types

A struct with a malformed signature is reported as a failure and left out of
the batch-level artifacts, so every registered address refers to a record
that was actually generated.
"""

import threading
from collections.abc import Sequence
from dataclasses import dataclass, field
from multiprocessing.pool import ThreadPool

from ...domain.errors import CompilationCancelledError, MalformedSignatureError
from ...domain.models.interop import StructInfo
from ...domain.services.rendering import (
    FIXED_ARRAY_TYPES_HINT_NAME,
    RESOLVER_HINT_NAME,
    CompilerOptions,
    get_address_entries,
    render_fixed_array_types,
    render_resolver_initializer,
    render_struct,
    struct_hint_name,
)
from ...infrastructure.logging import ProgressTracker, get_logger, log_timing

logger = get_logger(__name__)


@dataclass
class CompilationResult:
    """Artifacts and failures of one batch."""

    artifacts: dict[str, str] = field(default_factory=dict)
    failures: list[tuple[str, str]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures


@dataclass(frozen=True)
class _StructOutcome:
    struct_info: StructInfo
    text: str | None = None
    error: str | None = None


class InteropCompiler:
    """Compiles struct descriptors into C# binding sources.

    The per-struct renderers share no state, so structs may be rendered on a
    thread pool. The fixed array size set is created per batch.
    """

    def __init__(
        self,
        options: CompilerOptions | None = None,
        parallel: bool = False,
        workers: int | None = None,
    ):
        """Initialize the compiler.

        Args:
            options: Rendering options (defaults when omitted)
            parallel: Render structs on a thread pool
            workers: Pool size; None or 0 uses the CPU count
        """
        self.options = options or CompilerOptions()
        self.parallel = parallel
        self.workers = workers or None

    def _compile_struct(
        self,
        struct_info: StructInfo,
        tracker: ProgressTracker,
        cancel_event: threading.Event | None,
    ) -> _StructOutcome:
        if cancel_event is not None and cancel_event.is_set():
            raise CompilationCancelledError("Batch compilation was cancelled")

        name = struct_info.fully_qualified_metadata_name
        try:
            with tracker.track_struct(name, len(get_address_entries(struct_info))):
                text = render_struct(struct_info, self.options, cancel_event)
        except MalformedSignatureError as e:
            return _StructOutcome(struct_info, error=str(e))
        return _StructOutcome(struct_info, text=text)

    @log_timing
    def compile(
        self,
        struct_infos: Sequence[StructInfo],
        cancel_event: threading.Event | None = None,
    ) -> CompilationResult:
        """Compile a batch of structs.

        Args:
            struct_infos: Structs to compile, in output order
            cancel_event: Cancellation signal checked between structs and blocks

        Returns:
            Artifacts keyed by hint name, plus per-struct failures

        Raises:
            CompilationCancelledError: If cancel_event is set before the batch completes
        """
        tracker = ProgressTracker(logger)
        result = CompilationResult()

        with tracker.track_operation("compile structs"):
            if self.parallel and len(struct_infos) > 1:
                logger.debug(f"Compiling {len(struct_infos)} structs on a thread pool")
                with ThreadPool(self.workers) as pool:
                    outcomes = pool.map(
                        lambda s: self._compile_struct(s, tracker, cancel_event), struct_infos
                    )
            else:
                outcomes = [self._compile_struct(s, tracker, cancel_event) for s in struct_infos]

        compiled: list[StructInfo] = []
        for outcome in outcomes:
            name = outcome.struct_info.fully_qualified_metadata_name
            if outcome.text is None:
                result.failures.append((name, outcome.error or "unknown error"))
                continue
            result.artifacts[struct_hint_name(outcome.struct_info)] = outcome.text
            compiled.append(outcome.struct_info)

        if cancel_event is not None and cancel_event.is_set():
            raise CompilationCancelledError("Batch compilation was cancelled")

        with tracker.track_operation("render batch artifacts"):
            namespace = self.options.generator_namespace
            result.artifacts[RESOLVER_HINT_NAME] = render_resolver_initializer(compiled, namespace)
            generated_sizes: set[int] = set()
            result.artifacts[FIXED_ARRAY_TYPES_HINT_NAME] = render_fixed_array_types(
                compiled, namespace, generated_sizes
            )
            logger.debug(f"Declared {len(generated_sizes)} fixed size array type(s)")

        tracker.report_summary()
        tracker.log_memory_usage()
        return result
