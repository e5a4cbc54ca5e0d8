"""String helpers: splitting, slicing, searching, comparing and bounded copies."""

from __future__ import annotations

from typing import Callable


def _char(c: int | str) -> str:
    """Return a one-character string for c, reducing an int to its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _require(value: str | None, name: str) -> str:
    if value is None:
        raise TypeError(f"{name} must be a string, not None")
    return value


def split(text: str, sep: int | str) -> list[str]:
    """Split text on the separator character, dropping empty words."""
    text = _require(text, "text")
    return [word for word in text.split(_char(sep)) if word]


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end gives an empty string.
    """
    text = _require(text, "text")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return _require(first, "first") + _require(second, "second")


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    text = _require(text, "text")
    charset = _require(charset, "charset")
    return text.strip(charset) if charset else text


def strchr(text: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in text, or None.

    Searching for the terminator character '\\0' gives len(text).
    """
    ch = _char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == "\0" else None


def strrchr(text: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in text, or None.

    Searching for the terminator character '\\0' gives len(text).
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of needle within the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = _require(haystack, "haystack")[:length].find(needle)
    return index if index >= 0 else None


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch.

    A string that ends early compares as if followed by a zero character.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    a = _require(first, "first")[:n]
    b = _require(second, "second")[:n]
    width = max(len(a), len(b))
    for x, y in zip(a.ljust(width, "\0"), b.ljust(width, "\0")):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and the full length of src, so truncation
    happened when the length is at least size.
    """
    src = _require(src, "src")
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting text and the length it tried to create. When dest
    already fills the buffer it is left alone and size + len(src) is returned.
    """
    dest = _require(dest, "dest")
    src = _require(src, "src")
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character of text."""
    text = _require(text, "text")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], object]) -> None:
    """Call func(index, char) for every character of text."""
    text = _require(text, "text")
    for index, ch in enumerate(text):
        func(index, ch)