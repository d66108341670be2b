"""Abstract key events consumed by the editor session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class KeyKind(Enum):
    TERMINATE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    CHAR = auto()
    OTHER = auto()


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Decoded key press; ``char`` is set only for ``KeyKind.CHAR``."""

    kind: KeyKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is KeyKind.CHAR:
            if self.char is None or len(self.char) != 1:
                raise ValueError("CHAR events carry exactly one character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.name} events carry no character")

    @classmethod
    def character(cls, char: str) -> "KeyEvent":
        return cls(KeyKind.CHAR, char)


TERMINATE = KeyEvent(KeyKind.TERMINATE)
UP = KeyEvent(KeyKind.UP)
DOWN = KeyEvent(KeyKind.DOWN)
LEFT = KeyEvent(KeyKind.LEFT)
RIGHT = KeyEvent(KeyKind.RIGHT)
OTHER = KeyEvent(KeyKind.OTHER)
NEWLINE = KeyEvent.character("\n")


def typed(text: str) -> list[KeyEvent]:
    """Expand ``text`` into one CHAR event per character."""

    return [KeyEvent.character(char) for char in text]
