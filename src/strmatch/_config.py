"""Config types for declarative matcher construction.

A matcher tree can be described as plain dicts (the shape JSON and YAML
loaders produce) and compiled through the registry:
  dict → parse_matcher_config() → MatcherConfig → Registry.load_matcher() → matcher

Each config dict has exactly one key naming the matcher kind:

    {"Exact": "hello"}
    {"CaseInsensitive": "hello"}
    {"StartsWith": "/api"}        {"EndsWith": ".json"}     {"Contains": "x"}
    {"Regex": "^File[0-9]+$"}
    {"Wildcard": "Fre*"}
    {"Wildcard": {"pattern": "Fre%", "single": "%", "multi": "*"}}
    {"AnyOf": [{"Exact": "Joe"}, {"Wildcard": "Fre?"}]}
    {"Custom": {"type_url": "example.v1.Matcher", "config": {...}}}

Relationship to runtime types:

| Config type           | Runtime type                         |
|-----------------------|--------------------------------------|
| BuiltInMatch          | Exact/CaseInsensitive/.../Regex      |
| WildcardMatch         | WildcardMatcher                      |
| AlternateMatchConfig  | AlternateMatcher                     |
| CustomMatch           | registered matcher factory result    |
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from strmatch._errors import MatcherError
from strmatch._wildcard import DEFAULT_MULTI, DEFAULT_SINGLE

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class BuiltInMatch:
    """Built-in literal or regex matching.

    The variant name is the dict key: { "Exact": "hello" }, { "Regex": "^foo" }
    """

    variant: str
    value: str


@dataclass(frozen=True, slots=True)
class WildcardMatch:
    """Wildcard pattern with its SINGLE and MULTI symbols."""

    pattern: str
    single: str = DEFAULT_SINGLE
    multi: str = DEFAULT_MULTI


@dataclass(frozen=True, slots=True)
class AlternateMatchConfig:
    """Any child matcher must match (logical OR)."""

    matchers: tuple[MatcherConfig, ...]


@dataclass(frozen=True, slots=True)
class TypedConfig:
    """Reference to a registered matcher type with its configuration.

    - type_url identifies the registered factory
    - config carries the type-specific payload
    """

    type_url: str
    config: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class CustomMatch:
    """Custom matcher resolved via the registry's matcher factories."""

    typed_config: TypedConfig


type MatcherConfig = BuiltInMatch | WildcardMatch | AlternateMatchConfig | CustomMatch


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════

# String match variant names
STRING_MATCH_VARIANTS = frozenset(
    {"Exact", "CaseInsensitive", "StartsWith", "EndsWith", "Contains", "Regex"}
)
_ALL_VARIANTS = STRING_MATCH_VARIANTS | {"Wildcard", "AnyOf", "Custom"}


class ConfigParseError(MatcherError):
    """Error parsing a config dict into config types."""


def parse_matcher_config(data: dict[str, Any]) -> MatcherConfig:
    """Parse a dict into a MatcherConfig.

    This is the main entry point for config loading.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"matcher config must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    keys = [k for k in data if k in _ALL_VARIANTS]
    if len(keys) != 1:
        expected = sorted(_ALL_VARIANTS)
        msg = (
            f"matcher config must contain exactly one of {expected}, "
            f"got keys: {sorted(map(str, data.keys()))}"
        )
        raise ConfigParseError(msg)
    if len(data) != 1:
        unknown = sorted(str(k) for k in data if k not in _ALL_VARIANTS)
        msg = f"unexpected keys in matcher config: {unknown}"
        raise ConfigParseError(msg)

    variant = keys[0]
    value = data[variant]
    if variant in STRING_MATCH_VARIANTS:
        if not isinstance(value, str):
            msg = f"{variant} value must be a string, got {type(value).__name__}"
            raise ConfigParseError(msg)
        return BuiltInMatch(variant=variant, value=value)
    if variant == "Wildcard":
        return _parse_wildcard(value)
    if variant == "AnyOf":
        if not isinstance(value, list):
            msg = f"AnyOf value must be a list, got {type(value).__name__}"
            raise ConfigParseError(msg)
        return AlternateMatchConfig(matchers=tuple(parse_matcher_config(m) for m in value))
    return CustomMatch(typed_config=_parse_typed_config(value))


def _parse_wildcard(data: str | dict[str, Any]) -> WildcardMatch:
    """Parse a Wildcard value: a bare pattern string or a dict."""
    if isinstance(data, str):
        return WildcardMatch(pattern=data)
    if not isinstance(data, dict):
        msg = f"Wildcard value must be a string or dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "pattern" not in data:
        msg = "Wildcard missing required field 'pattern'"
        raise ConfigParseError(msg)
    fields = {
        "pattern": data["pattern"],
        "single": data.get("single", DEFAULT_SINGLE),
        "multi": data.get("multi", DEFAULT_MULTI),
    }
    for name, value in fields.items():
        if not isinstance(value, str):
            msg = f"Wildcard {name} must be a string, got {type(value).__name__}"
            raise ConfigParseError(msg)
    unknown = sorted(set(data) - set(fields))
    if unknown:
        msg = f"unexpected keys in Wildcard config: {unknown}"
        raise ConfigParseError(msg)
    return WildcardMatch(**fields)


def _parse_typed_config(data: dict[str, Any]) -> TypedConfig:
    """Parse a typed config dict."""
    if not isinstance(data, dict):
        msg = f"typed_config must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "type_url" not in data:
        msg = "typed_config missing required field 'type_url'"
        raise ConfigParseError(msg)

    type_url = data["type_url"]
    if not isinstance(type_url, str):
        msg = f"type_url must be a string, got {type(type_url).__name__}"
        raise ConfigParseError(msg)

    config = data.get("config", {})
    if not isinstance(config, dict):
        msg = f"config must be a dict, got {type(config).__name__}"
        raise ConfigParseError(msg)

    return TypedConfig(type_url=type_url, config=config)
