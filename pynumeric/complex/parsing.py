"""
Textual grammar for complex numbers.

Accepted forms (whitespace around the joining sign is allowed):

    "2+3i"   "2 - 3i"   "-4.5"   "3i"   "i"   "-i"   "1e-3+2.5E2i"   "3i+2"

A number is one or two signed terms. A term is a real literal or an
imaginary literal (an optional real literal followed by 'i'). Only the
first term may omit its sign, and a number holds at most one real and
one imaginary term. Signs inside an exponent never start a new term.
"""

from __future__ import annotations

import re

from pynumeric.core.exceptions import ParseError

_REAL_LITERAL = r'(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?'

_TERM_RE = re.compile(
    rf'\s*(?P<sign>[+-])?\s*(?P<value>{_REAL_LITERAL})?(?P<unit>i)?'
)


def parse_complex(text: str) -> tuple[float, float]:
    """
    Parse text into (real, imaginary) components.

    Parameters
    ----------
    text : str
        Textual complex number, e.g. "2+3i".

    Returns
    -------
    tuple of float
        (re, im)

    Raises
    ------
    ParseError
        If text does not match the grammar. The exception carries the
        original text and the offset of the offending term.
    """
    if not isinstance(text, str):
        raise ParseError(
            f"text: expected str, got {type(text).__name__}", text=None, position=None
        )

    source = text.strip()
    # positions are reported against the caller's text
    offset = len(text) - len(text.lstrip())
    if not source:
        raise ParseError("text: empty string is not a complex number", text=text, position=0)

    real: float | None = None
    imag: float | None = None
    pos = 0

    while pos < len(source):
        match = _TERM_RE.match(source, pos)
        sign, value, unit = match.group('sign', 'value', 'unit')

        if value is None and unit is None:
            raise ParseError(
                f"text: invalid complex number {text!r} at position {offset + pos}",
                text=text,
                position=offset + pos,
            )
        if sign is None and pos > 0:
            raise ParseError(
                f"text: expected '+' or '-' before term at position {offset + pos} in {text!r}",
                text=text,
                position=offset + pos,
            )

        magnitude = float(value) if value is not None else 1.0
        if sign == '-':
            magnitude = -magnitude

        if unit is None:
            if real is not None:
                raise ParseError(
                    f"text: more than one real part in {text!r}", text=text, position=offset + pos
                )
            real = magnitude
        else:
            if imag is not None:
                raise ParseError(
                    f"text: more than one imaginary part in {text!r}", text=text, position=offset + pos
                )
            imag = magnitude

        pos = match.end()

    return (
        0.0 if real is None else real,
        0.0 if imag is None else imag,
    )
