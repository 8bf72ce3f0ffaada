"""strmatch — whole-string matching predicates behind one contract.

All public types are exported from this module for flat imports:

    from strmatch import WildcardMatcher, ExactMatcher, alternate, wildcard
"""

import logging

__version__ = "0.1.0"

from strmatch._alternate import AlternateMatcher

# Config types — see strmatch._config for details
from strmatch._config import (
    STRING_MATCH_VARIANTS,
    AlternateMatchConfig,
    BuiltInMatch,
    ConfigParseError,
    CustomMatch,
    MatcherConfig,
    TypedConfig,
    WildcardMatch,
    parse_matcher_config,
)
from strmatch._errors import InvalidArgumentError, MatcherError

# Factory functions
from strmatch._factory import (
    alternate,
    alternate_strings,
    case_insensitive,
    contains,
    ends_with,
    exact,
    regex,
    starts_with,
    wildcard,
)

# Registry — see strmatch._registry for details
from strmatch._registry import (
    MAX_ALTERNATES,
    MAX_DEPTH,
    MAX_PATTERN_LENGTH,
    MAX_REGEX_PATTERN_LENGTH,
    DepthExceededError,
    InvalidConfigError,
    PatternTooLongError,
    Registry,
    RegistryBuilder,
    TooManyMatchersError,
    UnknownTypeUrlError,
    load_matcher_dict,
)

# Concrete matchers
from strmatch._string_matchers import (
    CaseInsensitiveMatcher,
    ContainsMatcher,
    EndsWithMatcher,
    ExactMatcher,
    RegexMatcher,
    SearchPattern,
    StartsWithMatcher,
)
from strmatch._types import StringMatcher, Text
from strmatch._wildcard import DEFAULT_MULTI, DEFAULT_SINGLE, WildcardMatcher

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Protocol
    "StringMatcher",
    "Text",
    "SearchPattern",
    # Errors
    "MatcherError",
    "InvalidArgumentError",
    # Concrete matchers
    "ExactMatcher",
    "CaseInsensitiveMatcher",
    "StartsWithMatcher",
    "EndsWithMatcher",
    "ContainsMatcher",
    "RegexMatcher",
    "AlternateMatcher",
    "WildcardMatcher",
    "DEFAULT_SINGLE",
    "DEFAULT_MULTI",
    # Factories
    "exact",
    "case_insensitive",
    "starts_with",
    "ends_with",
    "contains",
    "regex",
    "wildcard",
    "alternate",
    "alternate_strings",
    # Config types
    "TypedConfig",
    "BuiltInMatch",
    "WildcardMatch",
    "AlternateMatchConfig",
    "CustomMatch",
    "MatcherConfig",
    "STRING_MATCH_VARIANTS",
    "ConfigParseError",
    "parse_matcher_config",
    # Registry
    "RegistryBuilder",
    "Registry",
    "load_matcher_dict",
    "UnknownTypeUrlError",
    "InvalidConfigError",
    "TooManyMatchersError",
    "DepthExceededError",
    "PatternTooLongError",
    "MAX_ALTERNATES",
    "MAX_DEPTH",
    "MAX_PATTERN_LENGTH",
    "MAX_REGEX_PATTERN_LENGTH",
]
