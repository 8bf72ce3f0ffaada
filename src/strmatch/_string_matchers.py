"""Primitive string matchers implementing the StringMatcher protocol.

Each matcher is a frozen dataclass: immutable after construction, with
equality and hashing derived from its configuration value. All matchers
reject a None or non-string text with InvalidArgumentError.

RegexMatcher compiles pattern strings with ``google-re2`` for guaranteed
linear-time matching. RE2 does not support backreferences or
lookahead/lookbehind because they require backtracking, so patterns using
them are rejected at construction. Callers that need those features can pass
an already compiled ``re.Pattern`` instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

import re2

from strmatch._errors import InvalidArgumentError
from strmatch._types import require_text, require_value

if TYPE_CHECKING:
    from strmatch._types import Text


@dataclass(frozen=True, slots=True)
class ExactMatcher:
    """Exact string equality match."""

    value: str

    def __post_init__(self) -> None:
        require_value(self.value, "string")

    def matches(self, value: Text, /) -> bool:
        return require_text(value) == self.value


@dataclass(frozen=True, slots=True)
class CaseInsensitiveMatcher:
    """Exact match ignoring case.

    Texts match when they have the same length and every pair of characters
    is equal after ``str.casefold()``. Folding is locale-independent, so the
    result does not depend on the environment. The comparison string is
    folded once at construction time.
    """

    value: str
    _folded: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        require_value(self.value, "string")
        object.__setattr__(self, "_folded", tuple(ch.casefold() for ch in self.value))

    def matches(self, value: Text, /) -> bool:
        text = require_text(value)
        if len(text) != len(self._folded):
            return False
        return all(
            ch.casefold() == folded for ch, folded in zip(text, self._folded, strict=True)
        )


@dataclass(frozen=True, slots=True)
class StartsWithMatcher:
    """String prefix match (startswith)."""

    prefix: str

    def __post_init__(self) -> None:
        require_value(self.prefix, "string")

    def matches(self, value: Text, /) -> bool:
        return require_text(value).startswith(self.prefix)


@dataclass(frozen=True, slots=True)
class EndsWithMatcher:
    """String suffix match (endswith)."""

    suffix: str

    def __post_init__(self) -> None:
        require_value(self.suffix, "string")

    def matches(self, value: Text, /) -> bool:
        return require_text(value).endswith(self.suffix)


@dataclass(frozen=True, slots=True)
class ContainsMatcher:
    """Substring search match.

    An empty substring is contained in every text, the empty text included.
    """

    substring: str

    def __post_init__(self) -> None:
        require_value(self.substring, "string")

    def matches(self, value: Text, /) -> bool:
        text = require_text(value)
        if not self.substring:
            return True
        if len(text) < len(self.substring):
            return False
        return self.substring in text


class SearchPattern(Protocol):
    """A compiled regular expression that can search a string."""

    def search(self, string: str, /) -> Any: ...


@dataclass(frozen=True, slots=True)
class RegexMatcher:
    """Regular expression search.

    Matches when the expression finds a match anywhere in the text (search,
    not fullmatch); anchor the expression to require a whole-string match.

    ``regex`` is either a pattern string, compiled here with ``google-re2``,
    or an already compiled pattern exposing ``search`` (``re.Pattern`` or an
    RE2 pattern), which is used as is.

    Raises:
        InvalidArgumentError: If regex is None, of an unsupported type, or
            not valid RE2 syntax.
    """

    regex: str | SearchPattern
    _compiled: SearchPattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.regex is None:
            msg = "regex must not be None"
            raise InvalidArgumentError(msg)
        if isinstance(self.regex, str):
            try:
                compiled = re2.compile(self.regex)
            except re2.error as e:
                msg = f'invalid regex pattern "{self.regex}": {e}'
                raise InvalidArgumentError(msg) from e
        elif callable(getattr(self.regex, "search", None)):
            compiled = self.regex
        else:
            msg = f"regex must be a str or compiled pattern, got {type(self.regex).__name__}"
            raise InvalidArgumentError(msg)
        object.__setattr__(self, "_compiled", compiled)

    def matches(self, value: Text, /) -> bool:
        return self._compiled.search(require_text(value)) is not None
