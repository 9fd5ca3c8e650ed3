from __future__ import annotations
from dataclasses import dataclass, field
from typing import Hashable

from core.normal import Normal


@dataclass
class Param:
    """State of one user-controlled value: the current and default Normal.

    ``id`` is an optional payload a host uses to tell its params apart; the
    widgets never read it.
    """

    normal: Normal = field(default_factory=lambda: Normal.MIN)
    default: Normal = field(default_factory=lambda: Normal.MIN)
    id: Hashable | None = None

    def __post_init__(self) -> None:
        self.normal = Normal.coerce(self.normal)
        self.default = Normal.coerce(self.default)

    def update(self, normal: Normal | float) -> None:
        self.normal = Normal.coerce(normal)

    def reset(self) -> None:
        self.normal = self.default

    @property
    def is_default(self) -> bool:
        return self.normal == self.default
