from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from .config import CountConfig

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .surfaces import Surface


@dataclass(slots=True, frozen=True)
class CountResult:
    """Paragraph, word and character statistics for one piece of text."""

    paragraphs: int = 0
    words: int = 0
    characters: int = 0
    characters_and_spaces: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "paragraphs": self.paragraphs,
            "words": self.words,
            "characters": self.characters,
            "characters_and_spaces": self.characters_and_spaces,
        }


@dataclass(slots=True, frozen=True, eq=False)
class Binding:
    """A live counting handler attached to a surface."""

    surface: "Surface"
    handler: Callable[..., None]
    config: CountConfig
