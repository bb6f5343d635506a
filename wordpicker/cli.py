"""Command-line interface."""

import argparse

from wordpicker.core.config import CaseOption, SortOrder

DEFAULT_COUNT = 4


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordpicker",
        description="Pick memorable words from a word list under a set of constraints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Four random words from wordfreq's most common English words
  %(prog)s

  # Six 4-7 letter words from a custom list, reproducibly
  %(prog)s -n 6 -w words.txt --length-min 4 --length-max 7 --seed 42

  # Using a JSON or YAML config (CLI overrides file values)
  %(prog)s --config picker.yaml -n 5 --as-string

  # Trace why particular words were dropped
  %(prog)s -w words.txt --debug --debug-words apple,pear

Word sources (-w):
- a .txt file with one word per line (quotes and trailing commas are stripped)
- a .json file containing an array of words
- "wordfreq" (default) or "english-words"

Example config.json:
{
  "lengthMin": 4,
  "lengthMax": 8,
  "excludeAmbiguous": true,
  "filterStartsWith": ["b", "c"],
  "caseOption": "capitalize",
  "seed": 7
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON or YAML configuration file (CLI args override file values)",
    )
    parser.add_argument(
        "-n", "--count", type=int, default=DEFAULT_COUNT, help="Number of words to pick"
    )
    parser.add_argument(
        "-w", "--words", type=str, help="Word source: file path, 'wordfreq' or 'english-words'"
    )
    parser.add_argument(
        "--reports",
        type=str,
        help="Directory to write a selection report to",
    )

    # Length
    parser.add_argument("--length-min", type=int, help="Minimum word length")
    parser.add_argument("--length-max", type=int, help="Maximum word length")
    parser.add_argument("--fix-length", type=int, help="Exact word length")

    # Content filters
    parser.add_argument(
        "--starts-with", dest="filter_starts_with", type=str, help="Comma-separated prefixes"
    )
    parser.add_argument(
        "--ends-with", dest="filter_ends_with", type=str, help="Comma-separated suffixes"
    )
    parser.add_argument(
        "--exclude", dest="exclude_substrings", type=str, help="Comma-separated substrings to avoid"
    )
    parser.add_argument("--blacklist", type=str, help="Comma-separated words to reject")
    parser.add_argument("--whitelist", type=str, help="Comma-separated words to allow exclusively")
    parser.add_argument("--pattern", type=str, help="Regular expression words must match")
    parser.add_argument("--rhymes-with", dest="include_rhyme_with", type=str)
    parser.add_argument(
        "--exclude-ambiguous",
        action="store_true",
        default=None,
        help="Reject words containing l, 1, I, 0 or O",
    )
    parser.add_argument(
        "--unique-characters",
        action="store_true",
        default=None,
        help="Reject words with a repeated character",
    )
    parser.add_argument(
        "--no-phonetic-distinct",
        dest="phonetic_distinct",
        action="store_false",
        default=None,
        help="Keep words that sound alike",
    )

    # Ordering and output
    parser.add_argument("--sort", choices=[order.value for order in SortOrder])
    parser.add_argument("--case", dest="case_option", choices=[case.value for case in CaseOption])
    parser.add_argument("--reverse", action="store_true", default=None)
    parser.add_argument(
        "--as-string", action="store_true", default=None, help="Print words joined by ', '"
    )
    parser.add_argument(
        "--metadata",
        dest="include_metadata",
        action="store_true",
        default=None,
        help="Print JSON lines with length and entropy",
    )
    parser.add_argument("--seed", type=int, help="Seed for a reproducible shuffle")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", default=None, help="Verbose output")
    parser.add_argument("--debug", action="store_true", default=None, help="Debug output")
    parser.add_argument(
        "--debug-words", type=str, help="Comma-separated words to trace through the stages"
    )

    return parser
