"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = frozenset({32, 9, 10, 11, 12, 13})


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) < 127


def _shift(c: int | str, low: str, high: str, delta: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else comes back unchanged."""
    return _shift(c, "a", "z", -32)


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else comes back unchanged."""
    return _shift(c, "A", "Z", 32)


def _wrap_int(value: int) -> int:
    """Reduce a value to the range of a 32-bit signed integer."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading blanks (space and tab through carriage return) are skipped, one
    optional sign is accepted, and digits are read until the first non-digit.
    Text without digits gives 0. The result wraps to a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and ord(text[pos]) in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    number = int(text[start:pos]) if pos > start else 0
    return _wrap_int(-number if negative else number)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)