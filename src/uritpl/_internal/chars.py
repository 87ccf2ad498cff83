"""Character classes from RFC 3986 and RFC 6570.

Every predicate takes an integer code point (``ord(ch)``) so the parser
can work on code points without caring how the host string stores them.
"""

GEN_DELIMS = frozenset(":/?#[]@")
SUB_DELIMS = frozenset("!$&'()*+,;=")
_UNRESERVED_PUNCT = frozenset("-._~")

# ucschar, RFC 3987 section 2.2
_UCSCHAR_RANGES: tuple[tuple[int, int], ...] = (
    (0xA0, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFEF),
    (0x10000, 0x1FFFD),
    (0x20000, 0x2FFFD),
    (0x30000, 0x3FFFD),
    (0x40000, 0x4FFFD),
    (0x50000, 0x5FFFD),
    (0x60000, 0x6FFFD),
    (0x70000, 0x7FFFD),
    (0x80000, 0x8FFFD),
    (0x90000, 0x9FFFD),
    (0xA0000, 0xAFFFD),
    (0xB0000, 0xBFFFD),
    (0xC0000, 0xCFFFD),
    (0xD0000, 0xDFFFD),
    (0xE1000, 0xEFFFD),
)

_IPRIVATE_RANGES: tuple[tuple[int, int], ...] = (
    (0xE000, 0xF8FF),
    (0xF0000, 0xFFFFD),
    (0x100000, 0x10FFFD),
)


def is_alpha(cp: int) -> bool:
    return 0x41 <= cp <= 0x5A or 0x61 <= cp <= 0x7A


def is_digit(cp: int) -> bool:
    return 0x30 <= cp <= 0x39


def is_hexdig(cp: int) -> bool:
    return is_digit(cp) or 0x41 <= cp <= 0x46 or 0x61 <= cp <= 0x66


def is_unreserved(cp: int) -> bool:
    """``ALPHA / DIGIT / "-" / "." / "_" / "~"``"""
    return is_alpha(cp) or is_digit(cp) or chr(cp) in _UNRESERVED_PUNCT


def is_gen_delim(cp: int) -> bool:
    return chr(cp) in GEN_DELIMS


def is_sub_delim(cp: int) -> bool:
    return chr(cp) in SUB_DELIMS


def is_reserved(cp: int) -> bool:
    """``gen-delims / sub-delims``"""
    return is_gen_delim(cp) or is_sub_delim(cp)


def is_unreserved_or_reserved(cp: int) -> bool:
    """Allowed set for ``+`` and ``#`` expansion values and for literals."""
    return is_unreserved(cp) or is_reserved(cp)


def is_ucschar(cp: int) -> bool:
    return any(low <= cp <= high for low, high in _UCSCHAR_RANGES)


def is_iprivate(cp: int) -> bool:
    return any(low <= cp <= high for low, high in _IPRIVATE_RANGES)


def is_literal_ascii(cp: int) -> bool:
    """ASCII characters RFC 6570 allows verbatim in template literals.

    Excludes controls, space, ``"``, ``'``, ``%``, ``<``, ``>``, ``\\``,
    ``^``, `````, ``{``, ``|`` and ``}``.
    """
    return (
        cp == 0x21
        or 0x23 <= cp <= 0x24
        or cp == 0x26
        or 0x28 <= cp <= 0x3B
        or cp == 0x3D
        or 0x3F <= cp <= 0x5B
        or cp == 0x5D
        or cp == 0x5F
        or 0x61 <= cp <= 0x7A
        or cp == 0x7E
    )


def is_varchar(cp: int) -> bool:
    """Unencoded variable-name character: ``ALPHA / DIGIT / "_"``."""
    return is_alpha(cp) or is_digit(cp) or cp == 0x5F
