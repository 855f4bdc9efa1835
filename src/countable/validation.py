from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence, Tuple

Diagnostics = Callable[[str], None]


@dataclass(slots=True, frozen=True)
class ValidationResult:
    """Outcome of checking the arguments of a registry operation."""

    issues: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.issues


def is_valid_selector(selector: Any) -> bool:
    return isinstance(selector, str) and bool(selector.strip())


def validate_arguments(
    selector: Any,
    surfaces: Sequence[Any] | None,
    callback: Any,
) -> ValidationResult:
    """
    Check selector, resolved surfaces and callback together.

    The "no elements" issue is only raised for a usable selector, so a bad
    selector yields a single selector message rather than two.
    """
    issues: list[str] = []
    if not is_valid_selector(selector):
        issues.append(f'"{selector}" is not a valid selector')
    elif not surfaces:
        issues.append(f'No elements were found for the selector "{selector}"')

    if not callable(callback):
        issues.append(f"{callback!r} is not a valid callback function")

    return ValidationResult(issues=tuple(issues))
