import hashlib
from collections import Counter

from django.utils import timezone

from .models import StringProperties, StringRecord


def compute_sha256(value: str) -> str:
    """Compute SHA-256 hash for the string."""
    return hashlib.sha256(value.encode('utf-8')).hexdigest()


def is_palindrome(value: str) -> bool:
    """Check if the lower-cased string reads the same forward and backward.

    Nothing is stripped: spaces and punctuation take part in the comparison.
    """
    normalized = value.lower()
    return normalized == normalized[::-1]


def analyze_string(value: str) -> StringProperties:
    """Compute all required string properties."""
    letters = [ch for ch in value if ch.isalpha()]

    return StringProperties(
        length=len(value.encode('utf-8')),
        is_palindrome=is_palindrome(value),
        unique_characters=len(set(letters)),
        word_count=len(value.split()),
        sha256_hash=compute_sha256(value),
        character_frequency_map=dict(Counter(letters)),
    )


def build_record(value: str, now=None) -> StringRecord:
    """Analyze ``value`` and wrap it in a record stamped with ``now``."""
    props = analyze_string(value)
    return StringRecord(
        id=props.sha256_hash,
        value=value,
        properties=props,
        created_at=now if now is not None else timezone.now(),
    )
