from .exceptions import InvalidFilterError


def validate_criteria(criteria):
    """Reject criteria that can never be evaluated.

    Runs once per request, before any record is scanned, so an invalid
    filter is reported even when the store is empty.
    """
    ch = criteria.contains_character
    if ch is not None and len(ch) != 1:
        raise InvalidFilterError("contains_character must be a single character.")


def matches(record, criteria) -> bool:
    """Return True when ``record`` satisfies every present clause of ``criteria``."""
    props = record.properties

    if criteria.is_palindrome is not None and props.is_palindrome != criteria.is_palindrome:
        return False
    if criteria.min_length is not None and props.length < criteria.min_length:
        return False
    if criteria.max_length is not None and props.length > criteria.max_length:
        return False
    if criteria.word_count is not None and props.word_count != criteria.word_count:
        return False
    # any character of the value counts here, not only letters
    if criteria.contains_character is not None and criteria.contains_character not in record.value:
        return False
    return True


def filter_records(records, criteria):
    validate_criteria(criteria)
    return [record for record in records if matches(record, criteria)]
