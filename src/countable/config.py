from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

# Camel-cased option names accepted alongside the field names.
OPTION_ALIASES = {
    "hardReturns": "hard_returns",
    "stripTags": "strip_tags",
}


@dataclass(slots=True, frozen=True)
class CountConfig:
    """Options that change how text is counted."""

    hard_returns: bool = False
    strip_tags: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[Any, Any]) -> dict[str, bool]:
    allowed = {field.name for field in fields(CountConfig)}
    kwargs: dict[str, bool] = {}
    for key in data:
        name = OPTION_ALIASES.get(key, key) if isinstance(key, str) else None
        if name in allowed:
            kwargs[name] = bool(data[key])
    return kwargs


def config_from_dict(data: Mapping[Any, Any] | None) -> CountConfig:
    """Overlay a partial mapping of options onto the defaults."""
    if data is None:
        return CountConfig()
    return CountConfig(**_build_kwargs(data))


def resolve_config(options: CountConfig | Mapping[Any, Any] | None) -> CountConfig:
    """
    Coerce whatever the caller passed as options into a CountConfig.

    Unknown keys are dropped and anything that is not a mapping falls back to
    the defaults, so this never raises.
    """
    if isinstance(options, CountConfig):
        return options
    if isinstance(options, Mapping):
        return config_from_dict(options)
    return CountConfig()


def config_from_yaml(path: str | Path) -> CountConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> CountConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return CountConfig()
    return config_from_yaml(path)
