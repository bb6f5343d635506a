"""Word selection pipeline orchestration."""

import math
import random
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from loguru import logger

from wordpicker.core.config import SelectionConfig
from wordpicker.core.errors import ConfigurationError, SourceLoadError
from wordpicker.core.types import SelectionResult
from wordpicker.data import WordSource, load_words
from wordpicker.filtering import build_filter_units, find_inert_options, find_unsupported_options
from wordpicker.processing.stages import (
    PipelineStats,
    deduplicate_phonetically,
    expand_weights,
    filter_words,
    finalize_selection,
    order_words,
)
from wordpicker.utils.helpers import is_number
from wordpicker.utils.random_source import create_random_source

ErrorHandler = Callable[[Exception], Any]


class SelectionPipeline:
    """Runs the five selection stages for one configuration.

    The pipeline holds no state between runs apart from `last_stats`. The
    history set named by the configuration is read by the filter stage and
    updated with every selected word; callers sharing one history between
    threads must synchronize runs themselves.

    Attributes:
        config: Selection configuration
        random_source: Random source for the default shuffle; when None a
            fresh source is built from `config.seed` on every run
        last_stats: Statistics of the most recent run
    """

    def __init__(
        self,
        config: SelectionConfig | None = None,
        random_source: random.Random | None = None,
    ) -> None:
        self.config = config or SelectionConfig()
        self.random_source = random_source
        self.last_stats: PipelineStats | None = None

    def _random_source(self) -> random.Random:
        if self.random_source is not None:
            return self.random_source
        return create_random_source(self.config.seed)

    def run(self, words: Sequence[str], amount: float) -> SelectionResult:
        """Select up to `amount` words from `words`.

        Args:
            words: Candidate words in source order
            amount: Number of words requested

        Returns:
            Selected words, metadata records or a joined string
        """
        start_time = time.time()
        config = self.config
        history = config.history if config.history is not None else set()
        verbose = config.verbose

        stats = PipelineStats(
            input_words=len(words),
            seeded=config.seed is not None,
            unsupported_options=find_unsupported_options(config),
            inert_options=find_inert_options(config),
        )
        if stats.inert_options:
            logger.warning(
                f"Options {', '.join(stats.inert_options)} are accepted but have no effect"
            )

        # Stage 1: predicate filters
        if verbose:
            logger.info("Stage 1: Filtering words...")
        units = build_filter_units(config, history)
        pool, stats.rejections = filter_words(words, units, config.debug_words, verbose)
        stats.after_filters = len(pool)

        # Stage 2: phonetic deduplication
        if config.phonetic_distinct:
            if verbose:
                logger.info("Stage 2: Removing phonetic duplicates...")
            pool = deduplicate_phonetically(pool, config.debug_words)
        stats.after_dedup = len(pool)
        stats.phonetic_duplicates = stats.after_filters - stats.after_dedup

        # Stage 3: weighting
        pool = expand_weights(pool, config.weighted_selection)
        stats.weighted_pool = len(pool)

        # Stage 4: ordering
        if verbose:
            logger.info("Stage 4: Ordering words...")
        pool = order_words(pool, self._random_source(), config.sort, config.custom_shuffle)

        # Stage 5: selection and post-processing
        selected, result = finalize_selection(pool, amount, config, history)
        stats.selected = len(selected)
        stats.elapsed_time = time.time() - start_time
        self.last_stats = stats

        if verbose:
            logger.info(
                f"Selected {stats.selected} of {stats.after_dedup} candidates "
                f"({stats.input_words} input words)"
            )

        return result


def validate_amount(amount_of_words: Any) -> None:
    """Check the requested word count.

    Raises:
        ConfigurationError: If the amount is not a number, is NaN or negative
    """
    if not is_number(amount_of_words) or math.isnan(amount_of_words) or amount_of_words < 0:
        raise ConfigurationError("'amount_of_words' must be a non-negative number.")


def select_words(
    config: SelectionConfig | Mapping[str, Any] | None,
    amount_of_words: float,
    word_source: WordSource = None,
    error_handler: ErrorHandler | None = None,
    random_source: random.Random | None = None,
) -> SelectionResult:
    """Select words from a word source according to a configuration.

    Args:
        config: SelectionConfig, or a mapping of option names (snake_case or
            camelCase) to values
        amount_of_words: Number of words to select; 0 returns an empty result
            without loading any words
        word_source: Words to choose from (see load_words)
        error_handler: Called with the SourceLoadError if the source cannot
            be loaded; the selection then runs on an empty list
        random_source: Optional random source overriding `seed`

    Returns:
        List of words, list of WordMetadata, or a ", "-joined string

    Raises:
        ConfigurationError: If the amount or the configuration is invalid
        SourceLoadError: If the word source cannot be loaded and no
            error_handler is given
    """
    validate_amount(amount_of_words)
    selection_config = SelectionConfig.from_options(config)

    if amount_of_words == 0:
        return "" if selection_config.as_string else []

    try:
        words = load_words(word_source, verbose=selection_config.verbose)
    except SourceLoadError as e:
        if error_handler is None:
            logger.error(f"Error loading words: {e}")
            raise
        error_handler(e)
        words = []

    pipeline = SelectionPipeline(selection_config, random_source)
    return pipeline.run(words, amount_of_words)
