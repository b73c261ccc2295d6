"""Main entry point for the interop generator."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .application.generators import InteropCompiler, write_artifacts
from .domain.errors import MetadataError
from .infrastructure.config import Config, build_compiler_options, get_config
from .infrastructure.logging import LoggerSetup, get_logger, log_preview, log_timing
from .infrastructure.metadata import load_metadata


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compile native struct metadata into C# interop bindings "
        "resolved from byte signatures at runtime",
        epilog="""
Examples:
  # Generate bindings into ./generated
  interop-generator metadata/structs.json

  # Custom output directory and namespace for the shared artifacts
  interop-generator metadata/structs.json -o Generated/ --namespace MyGame.Interop

  # Verify checked-in bindings are up to date (exit code 1 on drift)
  interop-generator metadata/structs.json -o Generated/ --check

  # Render structs on a thread pool with debug logs
  interop-generator metadata/structs.json --parallel --verbose

  # Using .env file for configuration
  echo 'METADATA_PATH=metadata/structs.json' > .env
  interop-generator
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "metadata",
        type=Path,
        nargs="?",
        help="Path to the JSON metadata document (optional if using .env)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output directory for generated sources (default: ./generated)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--namespace",
        type=str,
        help="Namespace of the resolver registration and fixed size array artifacts",
    )
    parser.add_argument(
        "--pointer-size",
        type=int,
        choices=(4, 8),
        help="Target pointer width in bytes used for virtual table slot offsets (default: 8)",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Render structs on a thread pool",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write files; fail if any generated file is out of date",
    )
    return parser.parse_args(argv)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for metadata-to-C# binding generation."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            metadata_path=args.metadata,
            output_dir=args.output,
            verbose=args.verbose,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    logger.debug(f"Metadata file: {config.metadata_path}")
    logger.debug(f"Output directory: {config.output_dir}")

    try:
        options = build_compiler_options(
            pointer_size=args.pointer_size,
            generator_namespace=args.namespace,
        )
    except ValueError as e:
        logger.error(f"Invalid compiler options: {e}")
        sys.exit(1)

    try:
        structs = load_metadata(config.metadata_path)
    except MetadataError as e:
        logger.error(str(e))
        sys.exit(1)

    if not structs:
        logger.error("No structs found in metadata")
        sys.exit(1)

    compiler_config = get_config()
    compiler = InteropCompiler(
        options,
        parallel=args.parallel or compiler_config["ENABLE_PARALLEL"],
        workers=compiler_config["PARALLEL_WORKERS"],
    )

    logger.info(f"Generating bindings for {len(structs)} struct(s)")
    result = compiler.compile(structs)

    for hint_name, content in result.artifacts.items():
        logger.info(f"[SUCCESS] Generated: {hint_name} ({len(content)} bytes)")
        if config.verbose and len(structs) == 1:
            log_preview(logger, hint_name, content)

    if not args.check:
        config.ensure_output_dir()
    drifted = write_artifacts(result, config.output_dir, check=args.check)

    logger.info("=" * 70)
    logger.info("GENERATION SUMMARY")
    logger.info("=" * 70)
    logger.info(f"Total structs: {len(structs)}")
    logger.info(f"Successfully generated: {len(structs) - len(result.failures)}")
    logger.info(f"Failed: {len(result.failures)}")

    if result.failures:
        logger.info("\nFailed structs:")
        for struct_name, error in result.failures:
            logger.info(f"  - {struct_name}: {error}")

    if args.check:
        logger.info(f"Out of date files: {len(drifted)}")

    sys.exit(0 if result.succeeded and not drifted else 1)


if __name__ == "__main__":
    main()
