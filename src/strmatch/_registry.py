"""Type registry for config-driven matcher construction.

The registry turns a parsed MatcherConfig into a runtime matcher. Built-in
kinds need no registration; custom matchers are plain callables registered
under a type URL:

- RegistryBuilder → .build() → Registry (immutable)
- Factories are plain callables: (config: dict) → StringMatcher
- load_matcher() walks the config tree and constructs runtime matchers

Example::

    builder = RegistryBuilder()
    builder.matcher("example.v1.Length", lambda cfg: LengthMatcher(cfg["max"]))
    registry = builder.build()

    config = parse_matcher_config({"AnyOf": [{"Wildcard": "*.txt"}, ...]})
    matcher = registry.load_matcher(config)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from strmatch._alternate import AlternateMatcher
from strmatch._config import (
    AlternateMatchConfig,
    BuiltInMatch,
    CustomMatch,
    WildcardMatch,
    parse_matcher_config,
)
from strmatch._errors import MatcherError
from strmatch._string_matchers import (
    CaseInsensitiveMatcher,
    ContainsMatcher,
    EndsWithMatcher,
    ExactMatcher,
    RegexMatcher,
    StartsWithMatcher,
)
from strmatch._types import StringMatcher
from strmatch._wildcard import WildcardMatcher

if TYPE_CHECKING:
    from collections.abc import Callable

    from strmatch._config import MatcherConfig

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_ALTERNATES = 256
MAX_DEPTH = 32
MAX_PATTERN_LENGTH = 8192
MAX_REGEX_PATTERN_LENGTH = 4096

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownTypeUrlError(MatcherError):
    """A type_url was not found in the registry."""

    def __init__(self, type_url: str, available: list[str]) -> None:
        self.type_url = type_url
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown matcher type_url: {type_url!r} (registered: {registered})"
        else:
            msg = f"unknown matcher type_url: {type_url!r} (no matcher types are registered)"
        super().__init__(msg)


class InvalidConfigError(MatcherError):
    """A config payload was malformed or semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class TooManyMatchersError(MatcherError):
    """An AnyOf config has too many children (width-based limit)."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many matchers in AnyOf: {count} exceeds maximum {max_}")


class DepthExceededError(MatcherError):
    """AnyOf configs are nested too deeply."""

    def __init__(self, depth: int, max_: int) -> None:
        self.depth = depth
        self.max = max_
        super().__init__(f"matcher depth {depth} exceeds maximum allowed depth {max_}")


class PatternTooLongError(MatcherError):
    """A match pattern exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════

type MatcherFactory = Callable[[dict[str, Any]], StringMatcher]


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register custom matcher factories with type URLs, then call build() to
    produce an immutable Registry. No registration is possible after build.
    """

    def __init__(self) -> None:
        self._matcher_factories: dict[str, MatcherFactory] = {}

    def matcher(self, type_url: str, factory: MatcherFactory) -> RegistryBuilder:
        """Register a matcher factory with a type URL."""
        if type_url in self._matcher_factories:
            logger.debug("replacing matcher factory for %s", type_url)
        self._matcher_factories[type_url] = factory
        return self

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        return Registry(_matcher_factories=MappingProxyType(dict(self._matcher_factories)))


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable registry of custom matcher factories.

    Constructed via RegistryBuilder (or directly, for built-ins only). Use
    load_matcher() to compile config into a runtime matcher.
    """

    _matcher_factories: MappingProxyType[str, MatcherFactory] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_matcher(self, config: MatcherConfig) -> StringMatcher:
        """Load a matcher from configuration.

        Raises:
            UnknownTypeUrlError: custom matcher type_url not registered
            InvalidConfigError: config payload rejected by a matcher
            TooManyMatchersError: too many AnyOf children
            DepthExceededError: AnyOf nesting too deep
            PatternTooLongError: pattern exceeds length limit
        """
        matcher = self._load(config, 1)
        logger.debug("loaded %s", type(matcher).__name__)
        return matcher

    @property
    def matcher_count(self) -> int:
        """Number of registered custom matcher types."""
        return len(self._matcher_factories)

    def contains_matcher(self, type_url: str) -> bool:
        """Check if a matcher type URL is registered."""
        return type_url in self._matcher_factories

    def matcher_type_urls(self) -> list[str]:
        """Return all registered matcher type URLs (sorted)."""
        return sorted(self._matcher_factories.keys())

    # ── Private loading methods ────────────────────────────────────────────

    def _load(self, config: MatcherConfig, depth: int) -> StringMatcher:
        if depth > MAX_DEPTH:
            raise DepthExceededError(depth, MAX_DEPTH)
        match config:
            case BuiltInMatch(variant=variant, value=value):
                return _compile_built_in(variant, value)
            case WildcardMatch(pattern=pattern, single=single, multi=multi):
                _check_pattern_length(pattern, MAX_PATTERN_LENGTH)
                try:
                    return WildcardMatcher(pattern, single, multi)
                except MatcherError as e:
                    raise InvalidConfigError(str(e)) from e
            case AlternateMatchConfig(matchers=children):
                if len(children) > MAX_ALTERNATES:
                    raise TooManyMatchersError(len(children), MAX_ALTERNATES)
                return AlternateMatcher(tuple(self._load(c, depth + 1) for c in children))
            case CustomMatch(typed_config=tc):
                return self._load_custom(tc.type_url, tc.config)
            case _:  # pragma: no cover
                msg = f"unknown matcher config type: {type(config).__name__}"
                raise InvalidConfigError(msg)

    def _load_custom(self, type_url: str, config: dict[str, Any]) -> StringMatcher:
        factory = self._matcher_factories.get(type_url)
        if factory is None:
            raise UnknownTypeUrlError(type_url, list(self._matcher_factories.keys()))
        try:
            matcher = factory(config)
        except Exception as e:
            raise InvalidConfigError(str(e)) from e
        if not isinstance(matcher, StringMatcher):
            msg = f"factory for {type_url!r} returned {type(matcher).__name__}, not a matcher"
            raise InvalidConfigError(msg)
        return matcher


def load_matcher_dict(data: dict[str, Any], registry: Registry | None = None) -> StringMatcher:
    """Parse a config dict and load it in one step.

    Uses an empty registry (built-in kinds only) when none is given.
    """
    if registry is None:
        registry = Registry()
    return registry.load_matcher(parse_matcher_config(data))


# ═══════════════════════════════════════════════════════════════════════════════
# Built-in matcher compilation
# ═══════════════════════════════════════════════════════════════════════════════


def _check_pattern_length(value: str, max_: int) -> None:
    if len(value) > max_:
        raise PatternTooLongError(len(value), max_)


def _compile_built_in(variant: str, value: str) -> StringMatcher:
    """Compile a built-in string match variant into a matcher."""
    if variant == "Regex":
        _check_pattern_length(value, MAX_REGEX_PATTERN_LENGTH)
    else:
        _check_pattern_length(value, MAX_PATTERN_LENGTH)

    match variant:
        case "Exact":
            return ExactMatcher(value)
        case "CaseInsensitive":
            return CaseInsensitiveMatcher(value)
        case "StartsWith":
            return StartsWithMatcher(value)
        case "EndsWith":
            return EndsWithMatcher(value)
        case "Contains":
            return ContainsMatcher(value)
        case "Regex":
            try:
                return RegexMatcher(value)
            except MatcherError as e:
                raise InvalidConfigError(str(e)) from e
        case _:
            msg = f"unknown built-in match variant: {variant!r}"
            raise InvalidConfigError(msg)
