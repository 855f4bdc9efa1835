from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Iterable, List, Mapping, Sequence, Tuple

from .config import CountConfig, resolve_config
from .counter import count
from .models import Binding, CountResult
from .surfaces import CallableResolver, Surface, SurfaceResolver
from .validation import (
    Diagnostics,
    ValidationResult,
    is_valid_selector,
    validate_arguments,
)

logger = logging.getLogger(__name__)

Callback = Callable[[Surface, CountResult], Any]
Options = CountConfig | Mapping[Any, Any] | None


def _log_warning(message: str) -> None:
    logger.warning("Countable: %s", message)


def _noop(*_args: Any) -> None:
    return None


class BindingRegistry:
    """
    Tracks which surfaces have live counting enabled.

    Every operation validates its arguments first. Invalid arguments are
    reported through the diagnostics callable and turn the call into a no-op;
    nothing here raises for bad input, and every mutator returns the registry
    so calls can be chained.
    """

    def __init__(
        self,
        resolver: SurfaceResolver | Callable[[str], Iterable[Surface] | None],
        diagnostics: Diagnostics | None = None,
    ) -> None:
        if not isinstance(resolver, SurfaceResolver):
            resolver = CallableResolver(resolver)
        self._resolver = resolver
        self._warn: Diagnostics = diagnostics or _log_warning
        self._bindings: List[Binding] = []
        # Reentrant so callbacks fired during enable_live may call back in.
        self._lock = threading.RLock()
        self.last_validation = ValidationResult()

    @property
    def resolver(self) -> SurfaceResolver:
        return self._resolver

    @property
    def bindings(self) -> Tuple[Binding, ...]:
        with self._lock:
            return tuple(self._bindings)

    def enable_live(
        self, selector: str, callback: Callback, config: Options = None
    ) -> "BindingRegistry":
        """Count every matching surface now and again on each change."""
        surfaces = self._resolve(selector)
        if not self._validate(selector, surfaces, callback):
            return self

        effective = resolve_config(config)
        for surface in surfaces:
            handler = _make_handler(surface, callback, effective)
            with self._lock:
                self._detach(surface)
                self._bindings.append(Binding(surface, handler, effective))
                surface.connect(handler)
            logger.debug("Enabled live counting on %r", surface)
            handler()
        return self

    def disable_live(self, selector: str) -> "BindingRegistry":
        """Remove live counting from every matching surface that has it."""
        surfaces = self._resolve(selector)
        if not self._validate(selector, surfaces, _noop):
            return self

        with self._lock:
            for surface in surfaces:
                if self._detach(surface):
                    logger.debug("Disabled live counting on %r", surface)
        return self

    def once(
        self, selector: str, callback: Callback, config: Options = None
    ) -> "BindingRegistry":
        """Count every matching surface a single time without binding."""
        surfaces = self._resolve(selector)
        if not self._validate(selector, surfaces, callback):
            return self

        effective = resolve_config(config)
        for surface in surfaces:
            callback(surface, count(surface.text, effective))
        return self

    def is_enabled(self, surface: Any) -> bool:
        if surface is None:
            return False
        return self.binding_for(surface) is not None

    def binding_for(self, surface: Any) -> Binding | None:
        with self._lock:
            index = self._index_of(surface)
            return None if index is None else self._bindings[index]

    def clear(self) -> None:
        """Detach every handler and forget all bindings."""
        with self._lock:
            for binding in self._bindings:
                binding.surface.disconnect(binding.handler)
            self._bindings.clear()

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, surface: object) -> bool:
        return self.is_enabled(surface)

    def _resolve(self, selector: Any) -> Sequence[Surface]:
        if not is_valid_selector(selector):
            return ()
        return tuple(self._resolver.resolve(selector))

    def _validate(
        self, selector: Any, surfaces: Sequence[Surface], callback: Any
    ) -> bool:
        result = validate_arguments(selector, surfaces, callback)
        self.last_validation = result
        for issue in result.issues:
            self._warn(issue)
        return result.ok

    def _index_of(self, surface: Any) -> int | None:
        for index, binding in enumerate(self._bindings):
            if binding.surface is surface:
                return index
        return None

    def _detach(self, surface: Surface) -> bool:
        """Drop the binding for surface, if any. Caller must hold the lock."""
        index = self._index_of(surface)
        if index is None:
            return False
        binding = self._bindings.pop(index)
        surface.disconnect(binding.handler)
        return True


def _make_handler(
    surface: Surface, callback: Callback, config: CountConfig
) -> Callable[..., None]:
    def handler(*_event: Any) -> None:
        callback(surface, count(surface.text, config))

    return handler
