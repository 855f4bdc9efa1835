from __future__ import annotations

from typing import Any, Callable, Iterable

from .counter import count
from .models import CountResult
from .registry import BindingRegistry, Callback, Options
from .surfaces import Surface, SurfaceResolver
from .validation import Diagnostics


class Countable:
    """
    Public namespace bundling the counter with a binding registry.

    ``live``, ``die`` and ``once`` return the namespace itself so calls can be
    chained; ``enabled`` answers whether a surface is bound.
    """

    def __init__(self, registry: BindingRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> BindingRegistry:
        return self._registry

    def live(self, selector: str, callback: Callback, options: Options = None) -> "Countable":
        self._registry.enable_live(selector, callback, options)
        return self

    def die(self, selector: str) -> "Countable":
        self._registry.disable_live(selector)
        return self

    def once(self, selector: str, callback: Callback, options: Options = None) -> "Countable":
        self._registry.once(selector, callback, options)
        return self

    def enabled(self, surface: Any) -> bool:
        return self._registry.is_enabled(surface)

    def count(self, text: Any, options: Options = None) -> CountResult:
        return count(text, options)


def create(
    resolver: SurfaceResolver | Callable[[str], Iterable[Surface] | None],
    diagnostics: Diagnostics | None = None,
) -> Countable:
    """Build a Countable namespace backed by a fresh registry."""
    return Countable(BindingRegistry(resolver, diagnostics=diagnostics))
