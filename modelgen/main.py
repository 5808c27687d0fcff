"""Command line entry point: compile the configured model directory."""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from modelgen.core.config import CONFIG_PATH, load_config
from modelgen.core.errors import ModelGenError
from modelgen.core.logging import configure_logging
from modelgen.core.workflow import CompileStage
from modelgen.generators.data_model_gen import check_data_models, generate_data_models, load_models

log = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="modelgen",
        description="Generate TypeScript data model classes from JSON definitions",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=CONFIG_PATH,
        help=f"Path to the generator config (default: {CONFIG_PATH})",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate and classify models, report every problem, write nothing",
    )
    parser.add_argument(
        "--no-cycles",
        action="store_true",
        help="Treat reference cycles between models as errors",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.config)
        allow_cycles = config.allow_cycles and not args.no_cycles

        if args.check:
            models = load_models(Path(config.in_dir))
            errors = check_data_models(models, allow_cycles=allow_cycles)
            for error in errors:
                log.error("%s", error, extra={"stage": str(CompileStage.CLASSIFY)})
            if errors:
                return 1
            log.info("%d data models OK", len(models))
            return 0

        if allow_cycles != config.allow_cycles:
            config = config.model_copy(update={"allow_cycles": allow_cycles})
        files = generate_data_models(config)
    except FileNotFoundError as e:
        log.error("File not found: %s", e.filename)
        return 1
    except (ModelGenError, OSError) as e:
        log.error("Generation failed: %s", e)
        return 1

    log.info("Generated %d data model files in %s", len(files), config.out_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
