from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

CONFIG_SECTION = "pw_entropy"


@dataclass(slots=True)
class EntropyConfig:
    """Toggles for the password reduction pipeline."""

    # Overwrite the intermediate character list before it is released.
    zeroize: bool = False
    # Match common sequences regardless of case ("PASSWORD" as "password").
    ignore_sequence_case: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the toggles as a plain dict, as written by `print-config`."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    # Keys that are not pipeline toggles are dropped silently.
    allowed = {field.name for field in fields(EntropyConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> EntropyConfig:
    """Build an EntropyConfig from a flat or `pw_entropy:`-nested mapping."""
    if data is None:
        return EntropyConfig()
    section = data.get(CONFIG_SECTION)
    if isinstance(section, Mapping):
        data = section
    return EntropyConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> EntropyConfig:
    """Read pipeline toggles from a YAML file, flat or under `pw_entropy:`."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EntropyConfig:
    """Return the toggles from path, or the defaults (no zeroize, case-sensitive
    sequences) when no file is given."""
    if path is None:
        return EntropyConfig()
    return config_from_yaml(path)
