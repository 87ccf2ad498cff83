"""Tests for uritpl._internal.percent: UTF-8 percent-encoding codec."""

from uritpl._internal.chars import is_unreserved, is_unreserved_or_reserved
from uritpl._internal.percent import (
    decode_pct_triplet,
    encode_char,
    encode_string,
    is_pct_triplet,
    pct_encode,
)


class TestEncodeChar:
    def test_allowed_char_verbatim(self) -> None:
        out: list[str] = []
        encode_char("a", is_unreserved, out)
        assert out == ["a"]

    def test_disallowed_ascii(self) -> None:
        out: list[str] = []
        encode_char("/", is_unreserved, out)
        assert "".join(out) == "%2F"

    def test_multibyte_uses_uppercase_hex(self) -> None:
        out: list[str] = []
        encode_char("€", is_unreserved, out)
        assert "".join(out) == "%E2%82%AC"

    def test_astral_code_point(self) -> None:
        out: list[str] = []
        pct_encode("\U0001f600", out)
        assert "".join(out) == "%F0%9F%98%80"


class TestIsPctTriplet:
    def test_valid(self) -> None:
        assert is_pct_triplet("%2f", 0)
        assert is_pct_triplet("ab%2F", 2)

    def test_truncated(self) -> None:
        assert not is_pct_triplet("%2", 0)
        assert not is_pct_triplet("%", 0)

    def test_non_hex(self) -> None:
        assert not is_pct_triplet("%zz", 0)
        assert not is_pct_triplet("%2g", 0)


class TestDecodePctTriplet:
    def test_single_byte(self) -> None:
        assert decode_pct_triplet("%41", 0) == (3, "A")

    def test_multibyte_sequence(self) -> None:
        assert decode_pct_triplet("%E2%82%AC", 0) == (9, "€")

    def test_stops_after_one_character(self) -> None:
        assert decode_pct_triplet("%C3%A9%C3%A9", 0) == (6, "é")

    def test_offset(self) -> None:
        assert decode_pct_triplet("caf%C3%A9", 3) == (9, "é")

    def test_no_triplet_leaves_position(self) -> None:
        assert decode_pct_triplet("abc", 1) == (1, None)
        assert decode_pct_triplet("%4", 0) == (0, None)

    def test_invalid_utf8_leaves_position(self) -> None:
        assert decode_pct_triplet("%FF", 0) == (0, None)

    def test_incomplete_sequence_leaves_position(self) -> None:
        assert decode_pct_triplet("%E2%82", 0) == (0, None)


class TestEncodeString:
    def test_reencodes_percent_by_default(self) -> None:
        assert encode_string("%E2%82%AC", is_unreserved) == "%25E2%2582%25AC"

    def test_passthrough_keeps_valid_triplets(self) -> None:
        encoded = encode_string("%E2%82%AC", is_unreserved_or_reserved, allow_pct_triplets=True)
        assert encoded == "%E2%82%AC"

    def test_passthrough_still_escapes_bare_percent(self) -> None:
        assert encode_string("50%", is_unreserved_or_reserved, allow_pct_triplets=True) == "50%25"
        assert encode_string("%zz", is_unreserved_or_reserved, allow_pct_triplets=True) == "%25zz"

    def test_mixed(self) -> None:
        assert encode_string("Hello World!", is_unreserved) == "Hello%20World%21"
        assert encode_string("Hello World!", is_unreserved_or_reserved) == "Hello%20World!"

    def test_empty(self) -> None:
        assert encode_string("", is_unreserved) == ""

    def test_reencoding_is_stable_with_passthrough(self) -> None:
        once = encode_string("a b/€", is_unreserved_or_reserved, allow_pct_triplets=True)
        twice = encode_string(once, is_unreserved_or_reserved, allow_pct_triplets=True)
        assert once == twice == "a%20b/%E2%82%AC"
