from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import yaml

from .tables import CONVERSIONS, SPECIAL_CONVERSIONS, RuleTable

DEFAULT_MAX_EXPANSIONS = 20


@dataclass(frozen=True)
class Settings:
    max_expansions: int = DEFAULT_MAX_EXPANSIONS
    generate_variants: bool = True
    use_special_mapping: bool = False

    @property
    def table(self) -> RuleTable:
        return SPECIAL_CONVERSIONS if self.use_special_mapping else CONVERSIONS


def _as_bool(key: str, x: Any) -> bool:
    if isinstance(x, bool):
        return x
    # YAML 1.1 already maps yes/no/on/off; accept the strings hosts pass through
    if isinstance(x, str) and x.strip().lower() in ("true", "false"):
        return x.strip().lower() == "true"
    raise ValueError(f"Config error: '{key}' must be a boolean, got {x!r}.")


def _as_positive_int(key: str, x: Any) -> int:
    # floats, bools and free text are rejected rather than coerced
    if isinstance(x, int) and not isinstance(x, bool):
        value = x
    elif isinstance(x, str) and x.strip().isdigit():
        value = int(x)
    else:
        raise ValueError(f"Config error: '{key}' must be an integer, got {x!r}.")
    if value <= 0:
        raise ValueError(f"Config error: '{key}' must be positive, got {value}.")
    return value


def settings_from_mapping(raw: Optional[Mapping[str, Any]]) -> Settings:
    raw = raw or {}
    if not isinstance(raw, Mapping):
        raise ValueError("Config error: settings must be a mapping (dict).")

    # Only pass known keys to Settings to avoid unexpected-kw errors
    kw: Dict[str, Any] = {}
    if raw.get("max_expansions") is not None:
        kw["max_expansions"] = _as_positive_int("max_expansions", raw["max_expansions"])

    # "greek_variants" is the setting name used by the search plugin
    given = {
        key: _as_bool(key, raw[key])
        for key in ("generate_variants", "greek_variants")
        if raw.get(key) is not None
    }
    if len(set(given.values())) > 1:
        raise ValueError(
            "Config error: 'generate_variants' and 'greek_variants' disagree; set only one."
        )
    if given:
        kw["generate_variants"] = next(iter(given.values()))

    if raw.get("use_special_mapping") is not None:
        kw["use_special_mapping"] = _as_bool("use_special_mapping", raw["use_special_mapping"])

    return Settings(**kw)


def load_config(path: str) -> Settings:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError("Config error: top-level YAML must be a mapping (dict).")

    # settings may sit at the top level or under a "greeklish" section
    section = raw.get("greeklish", raw)
    if not isinstance(section, dict):
        raise ValueError("Config error: 'greeklish' must be a mapping (dict).")

    return settings_from_mapping(section)
