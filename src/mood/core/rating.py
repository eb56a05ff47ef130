"""Mood rating scale."""

from enum import IntEnum


class Rating(IntEnum):
    """Five-point ordinal mood scale, worst to best."""

    AWFUL = 1
    BAD = 2
    NEUTRAL = 3
    GOOD = 4
    GREAT = 5

    @property
    def label(self) -> str:
        """Symbolic name as stored on disk, e.g. "Good"."""
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> "Rating":
        """Parse a symbolic name, ignoring case."""
        if not isinstance(label, str):
            raise ValueError(f"Rating must be text, got {type(label).__name__}")
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown rating: {label!r}") from None

    @classmethod
    def labels(cls) -> list[str]:
        return [r.label for r in cls]
