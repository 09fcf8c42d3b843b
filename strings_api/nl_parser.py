"""
Rule-based translation of short English phrases into FilterCriteria.

The phrase is split on whitespace and scanned left to right. At each
position the lower-cased token is looked up in RULES; the matching rule
inspects the tokens it needs, may set a filter field, and returns how many
tokens it consumed. The cursor never moves backwards and unknown tokens are
skipped, so parsing never fails.

Supported phrases:

    all                                 no-op
    single word                         word_count = 1
    palindrome | palindromic            is_palindrome = True (not after "non")
    longer than <N>                     min_length = N + 1
    contain(ing) the letter <X>         contains_character = X
    first vowel                         contains_character = "a"
"""
import logging
import re

from .models import FilterCriteria

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"\+?[0-9]+")


def _token(tokens, index):
    """Lower-cased token at ``index``, or None when out of range."""
    if 0 <= index < len(tokens):
        return tokens[index].lower()
    return None


def _match_all(tokens, i, parsed):
    return 1


def _match_single_word(tokens, i, parsed):
    if _token(tokens, i + 1) == "word":
        parsed["word_count"] = 1
        return 2
    return 1


def _match_palindrome(tokens, i, parsed):
    # "non palindromic" leaves the filter open on palindrome-ness; it is not
    # turned into is_palindrome=False.
    if _token(tokens, i - 1) != "non":
        parsed["is_palindrome"] = True
    return 1


def _match_longer_than(tokens, i, parsed):
    if _token(tokens, i + 1) == "than" and i + 2 < len(tokens):
        number = tokens[i + 2]
        if _NUMBER_RE.fullmatch(number):
            parsed["min_length"] = int(number) + 1
            return 3
    return 1


def _match_containing_letter(tokens, i, parsed):
    if (
        _token(tokens, i + 1) == "the"
        and _token(tokens, i + 2) == "letter"
        and i + 3 < len(tokens)
    ):
        letter = tokens[i + 3]
        if len(letter) == 1:
            parsed["contains_character"] = letter
            return 4
    return 1


def _match_first_vowel(tokens, i, parsed):
    if _token(tokens, i + 1) == "vowel":
        # stand-in until real vowel detection exists
        parsed["contains_character"] = "a"
        return 2
    return 1


RULES = {
    "all": _match_all,
    "single": _match_single_word,
    "palindrome": _match_palindrome,
    "palindromic": _match_palindrome,
    "longer": _match_longer_than,
    "containing": _match_containing_letter,
    "contain": _match_containing_letter,
    "first": _match_first_vowel,
}


def parse_natural_language_query(query: str) -> FilterCriteria:
    tokens = query.split()
    parsed = {}

    i = 0
    while i < len(tokens):
        rule = RULES.get(tokens[i].lower())
        i += rule(tokens, i, parsed) if rule else 1

    logger.debug("Parsed query %r into %s", query, parsed)
    return FilterCriteria(**parsed)
