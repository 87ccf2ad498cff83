"""Percent-encoding codec.

Encodes code points as UTF-8 ``%XX`` triplets (uppercase hex) and decodes
runs of triplets back into single characters.
"""

from uritpl._internal.chars import is_hexdig
from uritpl._internal.types import AllowedSet

_MAX_UTF8_WIDTH = 4


def pct_encode(ch: str, out: list[str]) -> None:
    """Append the UTF-8 bytes of *ch* as percent-triplets."""
    # Lone surrogates have no UTF-8 form; pass them through as their raw code units.
    for byte in ch.encode("utf-8", "surrogatepass"):
        out.append(f"%{byte:02X}")


def encode_char(ch: str, allowed: AllowedSet, out: list[str]) -> None:
    """Append *ch* verbatim if allowed, percent-encoded otherwise."""
    if allowed(ord(ch)):
        out.append(ch)
    else:
        pct_encode(ch, out)


def is_pct_triplet(s: str, pos: int) -> bool:
    """True if ``s[pos:pos + 3]`` is ``% HEXDIG HEXDIG``."""
    return (
        pos + 2 < len(s)
        and s[pos] == "%"
        and is_hexdig(ord(s[pos + 1]))
        and is_hexdig(ord(s[pos + 2]))
    )


def decode_pct_triplet(s: str, pos: int) -> tuple[int, str | None]:
    """Decode one character from the percent-triplet run starting at *pos*.

    Consumes as many triplets as the UTF-8 sequence needs (up to four) and
    returns ``(new_pos, char)``. Returns ``(pos, None)`` when there is no
    triplet at *pos* or the bytes do not form a valid UTF-8 character;
    callers treat that as the end of the token.
    """
    buffer = bytearray()
    idx = pos
    while len(buffer) < _MAX_UTF8_WIDTH and is_pct_triplet(s, idx):
        buffer.append(int(s[idx + 1 : idx + 3], 16))
        idx += 3
        try:
            decoded = buffer.decode("utf-8")
        except UnicodeDecodeError:
            continue
        return idx, decoded
    return pos, None


def encode_string(s: str, allowed: AllowedSet, *, allow_pct_triplets: bool = False) -> str:
    """Percent-encode every character of *s* outside *allowed*.

    With *allow_pct_triplets*, a syntactically valid ``%XX`` already in
    *s* is copied unchanged instead of having its ``%`` escaped.
    """
    out: list[str] = []
    pos = 0
    length = len(s)
    while pos < length:
        if allow_pct_triplets and is_pct_triplet(s, pos):
            out.append(s[pos : pos + 3])
            pos += 3
            continue
        encode_char(s[pos], allowed, out)
        pos += 1
    return "".join(out)
