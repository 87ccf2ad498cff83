"""Recursive-descent parser for RFC 6570 templates.

Each production takes the source string and a start position and returns
the new position together with what it parsed. A production that does
not match returns its start position unchanged; callers treat that as
"not here" rather than as an error. Only ``compile_terms`` raises.

Examples::

    parse_expression("{A,B}", 0)  -> (5, Expression(SIMPLE, (A, B)))
    parse_expression("{A,}", 0)   -> (0, None)
    parse_max_length("12345", 0)  -> (4, 1234)
"""

import logging

from uritpl._internal.chars import is_digit, is_iprivate, is_literal_ascii, is_ucschar, is_varchar
from uritpl._internal.percent import decode_pct_triplet, is_pct_triplet, pct_encode
from uritpl.errors import ParseError
from uritpl.operators import SIMPLE, OperatorId, operator_for_trigger
from uritpl.parsing.terms import Expression, Literal, Term, Varspec

logger = logging.getLogger("uritpl.parser")

_MAX_PREFIX_DIGITS = 4


def compile_terms(source: str) -> tuple[Term, ...]:
    """Parse *source* into its terms.

    Raises ``ParseError`` unless the whole string is consumed, or if any
    expression uses an operator reserved for future extensions.
    """
    pos, terms, starts = parse_template(source, 0)
    if pos != len(source):
        logger.debug("Rejected template %r at position %d", source, pos)
        raise ParseError(source, pos)

    for term, start in zip(terms, starts, strict=True):
        if isinstance(term, Expression) and term.operator is OperatorId.FUTURE:
            logger.debug("Rejected template %r: reserved operator at %d", source, start)
            raise ParseError(source, start, "reserved operator")

    return tuple(terms)


def parse_template(s: str, pos: int) -> tuple[int, list[Term], list[int]]:
    """Consume alternating literal and expression runs.

    Returns the end position, the terms, and each term's start position.
    """
    terms: list[Term] = []
    starts: list[int] = []
    while True:
        idx, text = parse_literals(s, pos)
        if idx > pos:
            terms.append(Literal(text))
            starts.append(pos)
            pos = idx
            continue
        idx, expression = parse_expression(s, pos)
        if expression is None:
            return pos, terms, starts
        terms.append(expression)
        starts.append(pos)
        pos = idx


def parse_literals(s: str, pos: int) -> tuple[int, str]:
    """Consume a maximal literal run, returning it in encoded form.

    Percent-triplets are copied unchanged; ``ucschar`` and ``iprivate``
    code points are percent-encoded as UTF-8.
    """
    out: list[str] = []
    length = len(s)
    while pos < length:
        ch = s[pos]
        cp = ord(ch)
        if is_literal_ascii(cp):
            out.append(ch)
            pos += 1
        elif is_ucschar(cp) or is_iprivate(cp):
            pct_encode(ch, out)
            pos += 1
        elif is_pct_triplet(s, pos):
            out.append(s[pos : pos + 3])
            pos += 3
        else:
            break
    return pos, "".join(out)


def parse_expression(s: str, pos: int) -> tuple[int, Expression | None]:
    """Parse ``'{' [operator] variable-list '}'``.

    An empty variable list is accepted (``{}``). Without a closing brace
    right after the list, nothing is consumed.
    """
    if pos >= len(s) or s[pos] != "{":
        return pos, None

    idx = pos + 1
    operator = operator_for_trigger(s[idx]) if idx < len(s) else None
    if operator is None:
        operator = SIMPLE
    else:
        idx += 1

    idx, varspecs = parse_variable_list(s, idx)
    if idx < len(s) and s[idx] == "}":
        return idx + 1, Expression(operator.id, tuple(varspecs))
    return pos, None


def parse_variable_list(s: str, pos: int) -> tuple[int, list[Varspec]]:
    """Parse ``varspec *( "," varspec )``.

    A trailing comma not followed by a varspec is left unconsumed.
    """
    idx, varspec = parse_varspec(s, pos)
    if varspec is None:
        return pos, []

    varspecs = [varspec]
    pos = idx
    while pos < len(s) and s[pos] == ",":
        idx, varspec = parse_varspec(s, pos + 1)
        if varspec is None:
            break
        varspecs.append(varspec)
        pos = idx
    return pos, varspecs


def parse_varspec(s: str, pos: int) -> tuple[int, Varspec | None]:
    """Parse ``varname [ modifier-level4 ]``."""
    idx, decoded = parse_varname(s, pos)
    if idx == pos:
        return pos, None

    varname = s[pos:idx]
    idx, prefix_length, exploded = parse_modifier(s, idx)
    return idx, Varspec(varname, decoded, prefix_length, exploded)


def parse_varname(s: str, pos: int) -> tuple[int, str]:
    """Parse ``varchar *( ["."] varchar )``.

    Returns the end position and the name with percent-triplets decoded.
    A ``.`` is consumed only when a varchar follows it, so ``A.`` and
    ``A..B`` stop right after ``A``.
    """
    decoded: list[str] = []
    idx, ch = parse_varchar(s, pos)
    while ch is not None:
        decoded.append(ch)
        pos = idx
        idx, ch = parse_varchar(s, pos)
        if ch is None and pos < len(s) and s[pos] == ".":
            idx, ch = parse_varchar(s, pos + 1)
            if ch is not None:
                decoded.append(".")
    return pos, "".join(decoded)


def parse_varchar(s: str, pos: int) -> tuple[int, str | None]:
    """Parse ``ALPHA / DIGIT / "_" / pct-encoded``, returning the character."""
    if pos >= len(s):
        return pos, None
    ch = s[pos]
    if is_varchar(ord(ch)):
        return pos + 1, ch
    return decode_pct_triplet(s, pos)


def parse_modifier(s: str, pos: int) -> tuple[int, int | None, bool]:
    """Parse ``prefix / explode``.

    Returns ``(position, prefix_length, exploded)``; at most one of the two
    modifiers is ever set.
    """
    idx, prefix_length = parse_prefix(s, pos)
    if prefix_length is not None:
        return idx, prefix_length, False
    if pos < len(s) and s[pos] == "*":
        return pos + 1, None, True
    return pos, None, False


def parse_prefix(s: str, pos: int) -> tuple[int, int | None]:
    """Parse ``":" max-length``. A bare ``:`` or ``:0`` is not consumed."""
    if pos < len(s) and s[pos] == ":":
        idx, max_length = parse_max_length(s, pos + 1)
        if max_length is not None:
            return idx, max_length
    return pos, None


def parse_max_length(s: str, pos: int) -> tuple[int, int | None]:
    """Parse ``%x31-39 0*3DIGIT``.

    Digits past the fourth are left unconsumed, so ``12345`` reads as
    ``1234`` and stops before the ``5``.
    """
    if pos >= len(s) or not "1" <= s[pos] <= "9":
        return pos, None

    end = pos + 1
    while end < len(s) and end - pos < _MAX_PREFIX_DIGITS and is_digit(ord(s[end])):
        end += 1
    return end, int(s[pos:end])
