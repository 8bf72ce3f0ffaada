"""Exception hierarchy for strmatch.

Everything the library raises derives from MatcherError. Caller mistakes
(None where a value is required, wrong types, unusable wildcard symbols)
raise InvalidArgumentError, which is also a ValueError so generic
argument-checking code catches it.
"""

from __future__ import annotations


class MatcherError(Exception):
    """Base class for all strmatch errors."""


class InvalidArgumentError(MatcherError, ValueError):
    """A required argument was None, of the wrong type, or otherwise unusable."""
