"""WildcardMatcher: whole-string matching with single and multi wildcards.

The pattern language has exactly two metacharacters, configurable per
matcher:

- SINGLE (``?`` by default) matches exactly one logical character.
- MULTI (``*`` by default) matches zero or more logical characters.

Every other pattern character must equal the text's code unit at the same
position. There are no character classes and no escaping.

A logical character is one code point. When the text carries a high
surrogate immediately followed by a low surrogate, the pair counts as one
logical character, so a wildcard never splits it. Literal comparison is per
code unit, so a literal pattern character only matches a surrogate pair if
the pattern spells out the same pair.

Matching is a backtracking search over ``(pattern_index, text_index)``
states, starting at ``(0, 0)`` and accepting only at
``(len(pattern), len(text))``. MULTI tries the empty run first and then grows
one logical character at a time. States are kept on an explicit work-list,
and states already explored are skipped, so the search is bounded by the
number of distinct states rather than exponential in the number of MULTI
wildcards. Both structures live only for the duration of one call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from strmatch._errors import InvalidArgumentError
from strmatch._types import require_text, require_value

if TYPE_CHECKING:
    from strmatch._types import Text

logger = logging.getLogger(__name__)

DEFAULT_SINGLE = "?"
DEFAULT_MULTI = "*"


@dataclass(frozen=True, slots=True)
class WildcardMatcher:
    """Whole-string wildcard match.

    >>> m = WildcardMatcher("Fre*'s dog")
    >>> m.matches("Freddy's dog")
    True
    >>> m.matches("Fred's cat")
    False

    Raises:
        InvalidArgumentError: If pattern is None, either wildcard symbol is
            not exactly one character, or both symbols are the same.
    """

    pattern: str
    single: str = DEFAULT_SINGLE
    multi: str = DEFAULT_MULTI
    # Pattern with each run of consecutive MULTI symbols reduced to one.
    _program: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        require_value(self.pattern, "pattern")
        _require_symbol(self.single, "single")
        _require_symbol(self.multi, "multi")
        if self.single == self.multi:
            msg = f"single and multi wildcards must differ, both are {self.single!r}"
            raise InvalidArgumentError(msg)
        program = _collapse_multi(self.pattern, self.multi)
        if len(program) != len(self.pattern):
            logger.debug(
                "collapsed consecutive %r wildcards: %r -> %r", self.multi, self.pattern, program
            )
        object.__setattr__(self, "_program", program)

    def matches(self, value: Text, /) -> bool:
        text = require_text(value)
        program_end = len(self._program)
        text_end = len(text)

        pending = [(0, 0)]
        visited: set[tuple[int, int]] = set()
        while pending:
            state = pending.pop()
            if state in visited:
                continue
            visited.add(state)

            resumed = self._consume_fixed(text, *state)
            if resumed is None:
                continue
            pattern_index, text_index = resumed
            if pattern_index == program_end:
                if text_index == text_end:
                    return True
                continue

            # Stopped on a MULTI wildcard: either it ends here, or it absorbs
            # one more logical character and the choice repeats. The shorter
            # run is pushed last so it is explored first.
            if pattern_index + 1 == program_end:
                return True
            if text_index < text_end:
                pending.append((pattern_index, _next_boundary(text, text_index)))
            pending.append((pattern_index + 1, text_index))
        return False

    def _consume_fixed(
        self, text: str, pattern_index: int, text_index: int
    ) -> tuple[int, int] | None:
        """Advance over literals and SINGLE wildcards.

        Returns the state reached at the next MULTI wildcard or at the end of
        the pattern, or None if the text cannot match from this state.
        """
        program = self._program
        text_end = len(text)
        while pattern_index < len(program):
            ch = program[pattern_index]
            if ch == self.multi:
                return pattern_index, text_index
            if text_index >= text_end:
                return None
            if ch == self.single:
                text_index = _next_boundary(text, text_index)
            elif text[text_index] != ch:
                return None
            else:
                text_index += 1
            pattern_index += 1
        return pattern_index, text_index


def _require_symbol(symbol: Any, what: str) -> None:
    require_value(symbol, f"{what} wildcard")
    if len(symbol) != 1:
        msg = f"{what} wildcard must be exactly one character, got {symbol!r}"
        raise InvalidArgumentError(msg)


def _collapse_multi(pattern: str, multi: str) -> str:
    out: list[str] = []
    for ch in pattern:
        if ch == multi and out and out[-1] == multi:
            continue
        out.append(ch)
    return "".join(out)


def _is_high_surrogate(ch: str) -> bool:
    return "\ud800" <= ch <= "\udbff"


def _is_low_surrogate(ch: str) -> bool:
    return "\udc00" <= ch <= "\udfff"


def _next_boundary(text: str, index: int) -> int:
    """Index just past the logical character starting at ``index``."""
    if (
        _is_high_surrogate(text[index])
        and index + 1 < len(text)
        and _is_low_surrogate(text[index + 1])
    ):
        return index + 2
    return index + 1
