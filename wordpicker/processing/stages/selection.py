"""Stage 5: Selection and post-processing."""

from wordpicker.core.config import CaseOption, SelectionConfig
from wordpicker.core.types import SelectionResult, WordMetadata
from wordpicker.scoring import resolve_entropy_calculator
from wordpicker.utils.constants import Constants


def take_words(words: list[str], amount: float) -> list[str]:
    """Take distinct words from the front of the pool.

    Repeats from weighted expansion are skipped, so weights only bias the
    order. Stops before the selection would exceed `amount`, or after
    Constants.MAX_SELECTION_ATTEMPTS iterations, whichever comes first.
    """
    selected = []
    seen: set[str] = set()
    attempts = 0
    for word in words:
        if len(selected) + 1 > amount:
            break
        if word not in seen:
            seen.add(word)
            selected.append(word)
        attempts += 1
        if attempts >= Constants.MAX_SELECTION_ATTEMPTS:
            break
    return selected


def apply_case(words: list[str], case_option: CaseOption | None) -> list[str]:
    """Apply the configured case transform."""
    if case_option == CaseOption.UPPER:
        return [word.upper() for word in words]
    if case_option == CaseOption.LOWER:
        return [word.lower() for word in words]
    if case_option == CaseOption.CAPITALIZE:
        # str.capitalize() would lowercase the rest of the word
        return [word[:1].upper() + word[1:] for word in words]
    return words


def record_history(words: list[str], history: set[str]) -> None:
    """Add the lowercase form of every selected word to the history."""
    history.update(word.lower() for word in words)


def shape_result(words: list[str], config: SelectionConfig) -> SelectionResult:
    """Build the result in the configured shape.

    Returns:
        Joined string if as_string, metadata records if include_metadata,
        otherwise the word list
    """
    if config.as_string:
        return Constants.STRING_SEPARATOR.join(words)

    if config.include_metadata:
        calculate_entropy = resolve_entropy_calculator(config.custom_entropy_calculator)
        return [
            WordMetadata(word=word, length=len(word), entropy=calculate_entropy(word))
            for word in words
        ]

    return words


def finalize_selection(
    pool: list[str],
    amount: float,
    config: SelectionConfig,
    history: set[str],
) -> tuple[list[str], SelectionResult]:
    """Run the selection and post-processing steps in order.

    Args:
        pool: Ordered pool from the ordering stage
        amount: Number of words requested
        config: Selection configuration
        history: History set updated with the selected words

    Returns:
        Tuple of (selected words after transforms, shaped result)
    """
    selected = take_words(pool, amount)
    if config.reverse:
        selected.reverse()
    selected = apply_case(selected, config.case_option)
    record_history(selected, history)
    return selected, shape_result(selected, config)
