from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence, Tuple

logger = logging.getLogger(__name__)

Handler = Callable[[], None]


class Surface(ABC):
    """An editable piece of text that announces when its value changes."""

    @property
    @abstractmethod
    def text(self) -> str:
        """Return the current text value."""
        raise NotImplementedError

    @abstractmethod
    def connect(self, handler: Handler) -> None:
        """Call handler whenever the value changes."""
        raise NotImplementedError

    @abstractmethod
    def disconnect(self, handler: Handler) -> None:
        """Stop calling handler; unknown handlers are ignored."""
        raise NotImplementedError


class TextSurface(Surface):
    """In-memory surface that notifies handlers synchronously on every edit."""

    def __init__(self, text: str = "", name: str | None = None) -> None:
        self._text = text
        self.name = name
        self._handlers: List[Handler] = []

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self.set_text(value)

    def set_text(self, value: str) -> None:
        self._text = value
        self.notify()

    def notify(self) -> None:
        """Deliver a change signal to every connected handler, in connect order."""
        # Snapshot so handlers may disconnect themselves (or others) mid-dispatch.
        for handler in list(self._handlers):
            handler()

    def connect(self, handler: Handler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Handler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        label = self.name if self.name is not None else hex(id(self))
        return f"TextSurface({label!r}, {len(self._text)} chars)"


class SurfaceResolver(ABC):
    """Turns a selector string into the surfaces it names."""

    @abstractmethod
    def resolve(self, selector: str) -> Sequence[Surface]:
        """Return the matching surfaces in order; invalid selectors match nothing."""
        raise NotImplementedError


class SelectorMap(SurfaceResolver):
    """
    Resolve selectors against surfaces registered under names.

    A selector is a comma-separated list of names; ``*`` selects every
    registered surface. Several surfaces may share a name. Each surface is
    returned once, in the order it was first matched.
    """

    WILDCARD = "*"

    def __init__(
        self, surfaces: Mapping[str, Surface | Iterable[Surface]] | None = None
    ) -> None:
        self._named: Dict[str, List[Surface]] = {}
        for name, value in (surfaces or {}).items():
            if isinstance(value, Surface):
                self.register(name, value)
            else:
                for surface in value:
                    self.register(name, surface)

    def register(self, name: str, surface: Surface) -> None:
        bucket = self._named.setdefault(name, [])
        if not any(existing is surface for existing in bucket):
            bucket.append(surface)

    def unregister(self, name: str) -> None:
        self._named.pop(name, None)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._named)

    def resolve(self, selector: str) -> Sequence[Surface]:
        if not isinstance(selector, str):
            return ()
        matched: List[Surface] = []
        for part in selector.split(","):
            name = part.strip()
            if not name:
                continue
            if name == self.WILDCARD:
                candidates = [s for bucket in self._named.values() for s in bucket]
            else:
                candidates = self._named.get(name, [])
            for surface in candidates:
                if not any(existing is surface for existing in matched):
                    matched.append(surface)
        return tuple(matched)


class CallableResolver(SurfaceResolver):
    """Adapt an arbitrary callable into the SurfaceResolver interface."""

    def __init__(self, func: Callable[[str], Iterable[Surface] | None]) -> None:
        self._func = func

    def resolve(self, selector: str) -> Sequence[Surface]:
        try:
            result: Any = self._func(selector)
        except Exception as exc:
            logger.warning("Resolving selector %r failed: %s", selector, exc)
            return ()
        if result is None:
            return ()
        if isinstance(result, Surface):
            return (result,)
        return tuple(result)
