from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Dict, Optional


# Records live in an in-memory store (see store.py), so these are plain
# value objects rather than ORM models.


@dataclass(frozen=True)
class StringProperties:
    length: int  # bytes, not characters
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str  # sha256 hex length = 64
    character_frequency_map: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class StringRecord:
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    def __str__(self):
        return f"{self.value} - {self.id[:50]}"


@dataclass(frozen=True)
class FilterCriteria:
    """Structured filter. Absent (None) fields impose no constraint."""
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
