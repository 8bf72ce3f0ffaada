"""Construction helpers for every matcher kind.

These are thin wrappers over the matcher classes for call sites that read
better as functions::

    from strmatch import alternate, exact, wildcard

    m = alternate(wildcard("Fre?"), exact("Joe"), "Harry")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from strmatch._alternate import AlternateMatcher
from strmatch._errors import InvalidArgumentError
from strmatch._string_matchers import (
    CaseInsensitiveMatcher,
    ContainsMatcher,
    EndsWithMatcher,
    ExactMatcher,
    RegexMatcher,
    StartsWithMatcher,
)
from strmatch._types import require_value
from strmatch._wildcard import DEFAULT_MULTI, DEFAULT_SINGLE, WildcardMatcher

if TYPE_CHECKING:
    from collections.abc import Iterable

    from strmatch._string_matchers import SearchPattern
    from strmatch._types import StringMatcher


def exact(string: str) -> ExactMatcher:
    return ExactMatcher(string)


def case_insensitive(string: str) -> CaseInsensitiveMatcher:
    return CaseInsensitiveMatcher(string)


def contains(string: str) -> ContainsMatcher:
    return ContainsMatcher(string)


def starts_with(string: str) -> StartsWithMatcher:
    return StartsWithMatcher(string)


def ends_with(string: str) -> EndsWithMatcher:
    return EndsWithMatcher(string)


def regex(pattern: str | SearchPattern) -> RegexMatcher:
    """Create a RegexMatcher from a pattern string (compiled with RE2) or a
    compiled pattern."""
    return RegexMatcher(pattern)


def wildcard(
    pattern: str, single: str = DEFAULT_SINGLE, multi: str = DEFAULT_MULTI
) -> WildcardMatcher:
    """Create a WildcardMatcher, optionally with custom wildcard symbols."""
    return WildcardMatcher(pattern, single, multi)


def alternate(*members: StringMatcher | str) -> AlternateMatcher:
    """Create an AlternateMatcher from matchers and/or literal strings.

    Each string member is wrapped in an ExactMatcher. With no members the
    result never matches.

    Raises:
        InvalidArgumentError: If any member is None.
    """
    matchers: list[StringMatcher] = []
    for member in members:
        if member is None:
            msg = "matcher must not be None"
            raise InvalidArgumentError(msg)
        matchers.append(ExactMatcher(member) if isinstance(member, str) else member)
    return AlternateMatcher(tuple(matchers))


def alternate_strings(strings: Iterable[str]) -> AlternateMatcher:
    """Create an AlternateMatcher of exact matches, one per string.

    Raises:
        InvalidArgumentError: If the collection or any string in it is None.
    """
    if strings is None:
        msg = "strings must not be None"
        raise InvalidArgumentError(msg)
    if isinstance(strings, str):
        msg = "strings must be a collection of str, not a single str"
        raise InvalidArgumentError(msg)
    return AlternateMatcher(tuple(ExactMatcher(require_value(s, "string")) for s in strings))
