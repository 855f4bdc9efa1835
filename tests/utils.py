from __future__ import annotations

from typing import Any, List, Tuple

from countable.models import CountResult
from countable.surfaces import SelectorMap, TextSurface


class RecordingCallback:
    """Callable that remembers every (surface, result) pair it receives."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, CountResult]] = []

    def __call__(self, surface: Any, result: CountResult) -> None:
        self.calls.append((surface, result))

    @property
    def results(self) -> List[CountResult]:
        return [result for _, result in self.calls]


class WarningSink:
    def __init__(self) -> None:
        self.messages: List[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


def make_selector_map(**texts: str) -> Tuple[SelectorMap, dict[str, TextSurface]]:
    """Build a SelectorMap with one TextSurface per keyword argument."""
    surfaces = {name: TextSurface(text, name=name) for name, text in texts.items()}
    return SelectorMap(surfaces), surfaces
