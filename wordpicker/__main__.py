"""Main entry point for wordpicker."""

import locale
import sys
from pathlib import Path

from loguru import logger

from wordpicker.cli import create_parser
from wordpicker.core import SelectionConfig, SelectionResult, WordMetadata, WordPickerError, load_config
from wordpicker.data import load_words
from wordpicker.processing import SelectionPipeline, validate_amount
from wordpicker.reports import write_selection_report
from wordpicker.utils.constants import Constants
from wordpicker.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("wordpicker - Constrained Word Selection")
        logger.info("=" * 60)
        logger.info("")


def _print_config_summary(config: SelectionConfig, count: int, source: str | None) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Words requested: {count}")
        logger.info(f"  Word source: {source or Constants.WORDFREQ_SOURCE}")
        active = config.model_dump(
            exclude_defaults=True, exclude={"verbose", "debug", "debug_words", "history"}
        )
        for name, value in active.items():
            logger.info(f"  {name}: {value}")
        logger.info("")


def _result_words(result: SelectionResult) -> list[str]:
    """Extract the plain words from any result shape."""
    if isinstance(result, str):
        return result.split(Constants.STRING_SEPARATOR) if result else []
    return [item.word if isinstance(item, WordMetadata) else item for item in result]


def _print_result(result: SelectionResult) -> None:
    """Write the selection to stdout."""
    if isinstance(result, str):
        print(result)
        return
    for item in result:
        print(item.model_dump_json() if isinstance(item, WordMetadata) else item)


def _run_selection(config: SelectionConfig, count: int, source: str | None, reports: str | None) -> None:
    """Load words, run the pipeline and print the result."""
    validate_amount(count)
    if count == 0:
        _print_result("" if config.as_string else [])
        return

    words = load_words(source, verbose=config.verbose)
    pipeline = SelectionPipeline(config)
    result = pipeline.run(words, count)
    _print_result(result)

    if reports and pipeline.last_stats is not None:
        report_path = write_selection_report(pipeline.last_stats, _result_words(result), Path(reports))
        if config.verbose:
            logger.info(f"Report written to {report_path}")


def main() -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Sorting collates with the user's locale
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning(f"Could not apply the environment's collation locale: {e}")

    _print_startup_banner(config.verbose)
    _print_config_summary(config, args.count, args.words)

    try:
        _run_selection(config, args.count, args.words, args.reports)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Selection interrupted by user")
        raise
    except WordPickerError as e:
        logger.error(f"✗ {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
