"""Soundex-style phonetic codes for detecting words that sound alike."""

from wordpicker.utils.constants import Constants

# Digit class for each consonant; vowels, h, w, y and anything else are dropped
_CONSONANT_CLASSES = {
    **dict.fromkeys("bfpv", "1"),
    **dict.fromkeys("cgjkqsxz", "2"),
    **dict.fromkeys("dt", "3"),
    "l": "4",
    **dict.fromkeys("mn", "5"),
    "r": "6",
}


def phonetic_code(word: str) -> str:
    """Compute a 4-character phonetic code for a word.

    The first character is kept (uppercased). Each following character is
    mapped to its consonant class; a class equal to the last emitted class is
    skipped. Dropped characters do not reset the last emitted class, and the
    first character's own class is never emitted. The result is padded with
    '0' or truncated to 4 characters.

    e.g., 'Robert' -> 'R163', 'bob' -> 'B100', 'apple' -> 'A140'

    Args:
        word: Word to encode

    Returns:
        Phonetic code, '0000' for an empty word
    """
    lowered = word.lower()
    code = [lowered[:1].upper()] if lowered else []
    previous = ""

    for char in lowered[1:]:
        digit = _CONSONANT_CLASSES.get(char)
        if digit and digit != previous:
            code.append(digit)
            previous = digit

    code.extend("0" * (Constants.PHONETIC_CODE_LENGTH - len(code)))
    return "".join(code[: Constants.PHONETIC_CODE_LENGTH])
