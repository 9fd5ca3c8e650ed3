"""Groups of text labels positioned on the unit interval."""
from __future__ import annotations
import hashlib
import struct
from typing import Iterable, Sequence

from core.normal import Normal


class TextMarkGroup:
    """Immutable list of ``(Normal, label)`` pairs with a stable hash."""

    __slots__ = ("_marks", "_hashed")

    def __init__(self, marks: Iterable[tuple[Normal | float, str]] = ()) -> None:
        self._marks = tuple((Normal.coerce(n), str(label)) for n, label in marks)
        hasher = hashlib.blake2b(digest_size=8)
        hasher.update(struct.pack("<Q", len(self._marks)))
        for normal, label in self._marks:
            hasher.update(label.encode("utf-8"))
            hasher.update(struct.pack("<q", int(normal.value * 10_000_000.0)))
        self._hashed = int.from_bytes(hasher.digest(), "little")

    @classmethod
    def from_normalized(cls, marks: Iterable[tuple[Normal | float, str]]) -> TextMarkGroup:
        return cls(marks)

    @classmethod
    def center(cls, text: str) -> TextMarkGroup:
        return cls([(Normal.CENTER, text)])

    @classmethod
    def min_max(cls, min_text: str, max_text: str) -> TextMarkGroup:
        return cls([(Normal.MIN, min_text), (Normal.MAX, max_text)])

    @classmethod
    def min_max_and_center(cls, min_text: str, max_text: str, center_text: str) -> TextMarkGroup:
        return cls([
            (Normal.MIN, min_text),
            (Normal.CENTER, center_text),
            (Normal.MAX, max_text),
        ])

    @classmethod
    def subdivided(
        cls, labels: Sequence[str], min_text: str | None = None, max_text: str | None = None
    ) -> TextMarkGroup:
        """Space ``labels`` at ``k / (len + 1)``, leaving the ends for min/max."""
        span = 1.0 / (len(labels) + 1)
        marks: list[tuple[Normal, str]] = [
            (Normal(i * span + span), label) for i, label in enumerate(labels)
        ]
        if min_text is not None:
            marks.append((Normal.MIN, min_text))
        if max_text is not None:
            marks.append((Normal.MAX, max_text))
        return cls(marks)

    @classmethod
    def evenly_spaced(cls, labels: Sequence[str]) -> TextMarkGroup:
        if not labels:
            return cls()
        if len(labels) == 1:
            return cls([(Normal.MIN, labels[0])])
        span = 1.0 / (len(labels) - 1)
        marks = [(Normal(i * span), label) for i, label in enumerate(labels[:-1])]
        marks.append((Normal.MAX, labels[-1]))
        return cls(marks)

    @property
    def marks(self) -> tuple[tuple[Normal, str], ...]:
        return self._marks

    def hashed(self) -> int:
        return self._hashed

    def is_empty(self) -> bool:
        return not self._marks

    def __iter__(self):
        return iter(self._marks)

    def __len__(self) -> int:
        return len(self._marks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextMarkGroup):
            return NotImplemented
        return self._marks == other._marks

    def __hash__(self) -> int:
        return self._hashed

    def __repr__(self) -> str:
        return f"TextMarkGroup({[label for _, label in self._marks]!r})"
