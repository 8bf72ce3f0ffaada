"""AlternateMatcher: logical OR over an ordered tuple of matchers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from strmatch._errors import InvalidArgumentError
from strmatch._types import StringMatcher, require_text

if TYPE_CHECKING:
    from strmatch._types import Text


@dataclass(frozen=True, slots=True)
class AlternateMatcher:
    """Any member matcher must match.

    Members are consulted in order and evaluation short-circuits on the
    first True. An empty AlternateMatcher never matches.

    Any iterable of matchers is accepted and frozen into a tuple, so two
    alternates built from equal members in the same order compare equal.

    Raises:
        InvalidArgumentError: If the member collection or any member is None,
            or a member does not provide ``matches``.
    """

    matchers: tuple[StringMatcher, ...]

    def __post_init__(self) -> None:
        if self.matchers is None:
            msg = "matchers must not be None"
            raise InvalidArgumentError(msg)
        if not isinstance(self.matchers, Iterable) or isinstance(self.matchers, str):
            msg = f"matchers must be an iterable of matchers, got {type(self.matchers).__name__}"
            raise InvalidArgumentError(msg)
        members = tuple(self.matchers)
        for m in members:
            if m is None:
                msg = "matcher must not be None"
                raise InvalidArgumentError(msg)
            if not isinstance(m, StringMatcher):
                msg = f"expected a matcher, got {type(m).__name__}"
                raise InvalidArgumentError(msg)
        object.__setattr__(self, "matchers", members)

    def matches(self, value: Text, /) -> bool:
        text = require_text(value)
        return any(m.matches(text) for m in self.matchers)
