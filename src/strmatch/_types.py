"""The matcher contract and its shared argument checks.

Every matcher in strmatch answers a single question: does this whole text
satisfy my rule? The StringMatcher protocol is that question. It is
structural, so any object with a compatible ``matches`` method can sit in an
AlternateMatcher next to the built-in kinds.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from strmatch._errors import InvalidArgumentError

# Candidate text. Python strings index code points, but a string may still
# carry surrogate code points (e.g. decoded with "surrogatepass"); the
# wildcard matcher treats an adjacent high/low pair as one logical character.
type Text = str


@runtime_checkable
class StringMatcher(Protocol):
    """Decide whether a text fully satisfies a configured rule.

    Implementations are immutable after construction, so ``matches`` is a
    pure function of the matcher and the text and may be called from any
    number of threads at once.
    """

    def matches(self, value: Text, /) -> bool: ...


def require_text(value: Any) -> str:
    """Validate a candidate text passed to ``matches``.

    Raises:
        InvalidArgumentError: If the value is None or not a str.
    """
    return require_value(value, "target")


def require_value(value: Any, what: str) -> str:
    """Validate a string configuration value at construction time.

    Raises:
        InvalidArgumentError: If the value is None or not a str.
    """
    if value is None:
        msg = f"{what} must not be None"
        raise InvalidArgumentError(msg)
    if not isinstance(value, str):
        msg = f"{what} must be a str, got {type(value).__name__}"
        raise InvalidArgumentError(msg)
    return value
