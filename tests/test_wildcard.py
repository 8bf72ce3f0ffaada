"""Tests for WildcardMatcher."""

import pytest

from strmatch import (
    DEFAULT_MULTI,
    DEFAULT_SINGLE,
    ExactMatcher,
    InvalidArgumentError,
    WildcardMatcher,
)

# U+1F600 spelled as a UTF-16 surrogate pair, one code point per unit.
SURROGATE_PAIR = "\ud83d\ude00"


class TestLiteralPatterns:
    def test_simple_text(self) -> None:
        m = WildcardMatcher("Fred")
        assert m.matches("Fred") is True
        assert m.matches("Free") is False
        assert m.matches("Freddy") is False

    @pytest.mark.parametrize("text", ["abc", "ab", "abcd", "", "ABC", "xbc"])
    def test_no_wildcards_behaves_like_exact(self, text: str) -> None:
        assert WildcardMatcher("abc").matches(text) == ExactMatcher("abc").matches(text)

    def test_empty_pattern(self) -> None:
        m = WildcardMatcher("")
        assert m.matches("") is True
        assert m.matches("a") is False


class TestSingleWildcard:
    def test_single_at_end(self) -> None:
        m = WildcardMatcher("Fre?")
        assert m.matches("Fred") is True
        assert m.matches("Free") is True
        assert m.matches("Freddy") is False

    def test_consumes_exactly_one_character(self) -> None:
        m = WildcardMatcher("a?c")
        assert m.matches("abc") is True
        assert m.matches("ac") is False
        assert m.matches("abbc") is False

    def test_single_alone_needs_one_character(self) -> None:
        m = WildcardMatcher("?")
        assert m.matches("x") is True
        assert m.matches("") is False
        assert m.matches("xy") is False


class TestMultiWildcard:
    def test_trailing_multi_matches_any_suffix(self) -> None:
        m = WildcardMatcher("abc*")
        assert m.matches("abc") is True
        assert m.matches("abcxyz") is True
        assert m.matches("ab") is False

    def test_multi_at_end(self) -> None:
        m = WildcardMatcher("Fre*")
        assert m.matches("Fred") is True
        assert m.matches("Free") is True
        assert m.matches("Freddy") is True
        assert m.matches("Friend") is False

    def test_leading_multi_matches_any_prefix(self) -> None:
        m = WildcardMatcher("*xyz")
        assert m.matches("wxyz") is True
        assert m.matches("xyz") is True
        assert m.matches("xy") is False

    def test_multi_at_start(self) -> None:
        m = WildcardMatcher("*'s dog")
        assert m.matches("Fred's dog") is True
        assert m.matches("Freddy's dog") is True
        assert m.matches("Joe's dog") is True
        assert m.matches("Fred's cat") is False

    def test_multi_in_middle(self) -> None:
        m = WildcardMatcher("Fre*'s dog")
        assert m.matches("Fred's dog") is True
        assert m.matches("Free's dog") is True
        assert m.matches("Freddy's dog") is True
        assert m.matches("Freddy's cat") is False

    def test_multiple_multi_wildcards(self) -> None:
        m = WildcardMatcher("abc*ghi*mno*xyz")
        assert m.matches("abcdefghijklmnopqrstuvwxyz") is True
        assert m.matches("abcghimnoxyz") is True
        assert m.matches("abcmnoghixyzmnoxyz") is True
        assert m.matches("abcdefghijklmno") is False
        assert m.matches("abcdefghijklmnoooooo") is False
        assert m.matches("abcdefghijkqqqxyz") is False

    def test_multi_at_start_and_end(self) -> None:
        m = WildcardMatcher("*sex*")
        assert m.matches("sex education") is True
        assert m.matches("Essex") is True
        assert m.matches("You sexy thing") is True
        assert m.matches("s e x y") is False

    def test_lone_multi_matches_everything(self) -> None:
        m = WildcardMatcher("*")
        assert m.matches("") is True
        assert m.matches("anything at all") is True

    def test_backtracks_past_first_candidate(self) -> None:
        m = WildcardMatcher("*ab")
        assert m.matches("aab") is True
        assert m.matches("abab") is True
        assert m.matches("aba") is False


class TestConsecutiveMultiWildcards:
    def test_behave_as_one(self) -> None:
        m = WildcardMatcher("a**b")
        assert m.matches("ab") is True
        assert m.matches("axxxb") is True
        assert m.matches("ac") is False

    def test_file_extension(self) -> None:
        m = WildcardMatcher("File**.txt")
        assert m.matches("File.txt") is True
        assert m.matches("File1.txt") is True
        assert m.matches("File12.txt") is True
        assert m.matches("File123.txt") is True

    def test_trailing_consecutive_multi_matches_empty_remainder(self) -> None:
        m = WildcardMatcher("a**")
        assert m.matches("a") is True
        assert m.matches("abc") is True
        assert m.matches("") is False

    @pytest.mark.parametrize("text", ["", "a", "ab", "ba", "xyz", "aab"])
    def test_same_result_as_single_multi(self, text: str) -> None:
        assert WildcardMatcher("*a***b*").matches(text) == WildcardMatcher("*a*b*").matches(text)


class TestCombinedWildcards:
    def test_single_then_multi(self) -> None:
        m = WildcardMatcher("File?*.txt")
        assert m.matches("File.txt") is False
        assert m.matches("File1.txt") is True
        assert m.matches("File12.txt") is True
        assert m.matches("File123.txt") is True

    def test_multi_then_single(self) -> None:
        m = WildcardMatcher("*?")
        assert m.matches("") is False
        assert m.matches("a") is True
        assert m.matches("abc") is True


class TestCustomSymbols:
    def test_custom_single(self) -> None:
        m = WildcardMatcher("Fre%", "%", DEFAULT_MULTI)
        assert m.matches("Fred") is True
        assert m.matches("Free") is True
        assert m.matches("Freddy") is False

    def test_custom_multi(self) -> None:
        m = WildcardMatcher("Fre%", DEFAULT_SINGLE, "%")
        assert m.matches("Fred") is True
        assert m.matches("Free") is True
        assert m.matches("Freddy") is True
        assert m.matches("Friend") is False

    def test_default_symbols_are_literals_when_replaced(self) -> None:
        m = WildcardMatcher("what?*", single="_", multi="#")
        assert m.matches("what?*") is True
        assert m.matches("what!*") is False
        assert m.matches("what?") is False

    def test_same_symbols_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must differ"):
            WildcardMatcher("abc", "*", "*")

    @pytest.mark.parametrize("symbol", ["", "**", "ab"])
    def test_symbol_must_be_one_character(self, symbol: str) -> None:
        with pytest.raises(InvalidArgumentError, match="exactly one character"):
            WildcardMatcher("abc", single=symbol)

    def test_none_symbol_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="multi wildcard must not be None"):
            WildcardMatcher("abc", multi=None)  # type: ignore[arg-type]


class TestLogicalCharacters:
    def test_single_consumes_whole_surrogate_pair(self) -> None:
        m = WildcardMatcher("a?b")
        assert m.matches(f"a{SURROGATE_PAIR}b") is True

    def test_pair_is_one_logical_character(self) -> None:
        m = WildcardMatcher("a??b")
        assert m.matches(f"a{SURROGATE_PAIR}b") is False

    def test_multi_never_splits_a_pair(self) -> None:
        m = WildcardMatcher("a*\ude00b")
        assert m.matches(f"a{SURROGATE_PAIR}b") is False

    def test_multi_then_single_over_pair(self) -> None:
        m = WildcardMatcher("*?")
        assert m.matches(SURROGATE_PAIR) is True

    def test_literal_pair_in_pattern(self) -> None:
        m = WildcardMatcher(f"x{SURROGATE_PAIR}*")
        assert m.matches(f"x{SURROGATE_PAIR}yz") is True

    def test_astral_code_point(self) -> None:
        m = WildcardMatcher("a?b")
        assert m.matches("a\U0001f600b") is True

    def test_unpaired_surrogate_is_one_character(self) -> None:
        m = WildcardMatcher("a?c")
        assert m.matches("a\ud83dc") is True
        assert m.matches("a\ude00c") is True


class TestValidation:
    def test_none_pattern_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="pattern must not be None"):
            WildcardMatcher(None)  # type: ignore[arg-type]

    def test_none_target_rejected(self) -> None:
        m = WildcardMatcher("test")
        with pytest.raises(InvalidArgumentError, match="target must not be None"):
            m.matches(None)  # type: ignore[arg-type]

    def test_non_string_target_rejected(self) -> None:
        m = WildcardMatcher("42")
        with pytest.raises(InvalidArgumentError, match="target must be a str"):
            m.matches(42)  # type: ignore[arg-type]

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            WildcardMatcher(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", ["", "?", "*", "**??", "\ud83d"])
    def test_never_raises_for_well_formed_text(self, text: str) -> None:
        assert WildcardMatcher("a*b?").matches(text) is False


class TestEqualityAndPurity:
    def test_equal_configuration_is_equal(self) -> None:
        a = WildcardMatcher("a*b")
        b = WildcardMatcher("a*b", "?", "*")
        assert a == b
        assert hash(a) == hash(b)

    def test_consecutive_multi_is_a_different_configuration(self) -> None:
        assert WildcardMatcher("a**b") != WildcardMatcher("a*b")

    def test_symbols_are_part_of_equality(self) -> None:
        assert WildcardMatcher("a%b", "%", "*") != WildcardMatcher("a%b")

    def test_usable_as_dict_key(self) -> None:
        seen = {WildcardMatcher("*.txt"): "text"}
        assert seen[WildcardMatcher("*.txt")] == "text"

    def test_repeated_calls_agree(self) -> None:
        m = WildcardMatcher("*a?c*")
        results = {m.matches("xxabcxx") for _ in range(5)}
        assert results == {True}

    def test_frozen(self) -> None:
        m = WildcardMatcher("abc")
        with pytest.raises(AttributeError):
            m.pattern = "xyz"  # type: ignore[misc]


class TestPathologicalInputs:
    def test_many_multi_wildcards_fail_fast(self) -> None:
        m = WildcardMatcher("*a" * 20 + "*b")
        assert m.matches("a" * 200) is False

    def test_many_multi_wildcards_match(self) -> None:
        m = WildcardMatcher("*a" * 20 + "*b")
        assert m.matches("a" * 200 + "b") is True

    def test_deep_pattern_does_not_exhaust_stack(self) -> None:
        m = WildcardMatcher("*a" * 3000)
        assert m.matches("a" * 3000) is True
        assert m.matches("b" * 10) is False
