"""LDML pattern translation.

Named formats and user-supplied patterns are written in the LDML
(Joda/SimpleDateFormat) pattern syntax. The backend formats and parses
with its own token syntax; this module translates one into the other.

Supported Pattern Letters:
    y    - Year (yy = 2 digits, otherwise 4 digits)
    M    - Month (M, MM numeric; MMM abbreviated name; MMMM full name)
    d    - Day of month (d, dd)
    D    - Day of year (D, DDD)
    E    - Day of week (E..EEE abbreviated name; EEEE full name)
    H    - Hour, 24-hour clock (H, HH)
    h    - Hour, 12-hour clock (h, hh)
    m    - Minute (m, mm)
    s    - Second (s, ss)
    S    - Fraction of second (S..SSSSSS)
    a    - AM/PM marker
    z    - Time zone name
    Z    - UTC offset (Z = +0000, ZZ = +00:00)

Text between single quotes is literal; '' is a single quote.
Any other ASCII letter is an error.

Examples:
    >>> to_backend_tokens("yyyy-MM-dd HH:mm:ss")
    'YYYY-MM-DD HH:mm:ss'

    >>> to_backend_tokens("dd MMM ''yy")
    "DD MMM 'YY"

    >>> to_backend_tokens("d MMMM yyyy 'at' H:mm")
    'D MMMM YYYY[ at ]H:mm'
"""

from __future__ import annotations

import functools

from chrono.errors import UnknownFormatError


def _year(count: int) -> str:
    return "YY" if count == 2 else "YYYY"


def _month(count: int) -> str:
    return ("M", "MM", "MMM", "MMMM")[min(count, 4) - 1]


def _day_of_year(count: int) -> str:
    return "DDDD" if count >= 3 else "DDD"


def _day_name(count: int) -> str:
    return "dddd" if count >= 4 else "ddd"


def _fraction(count: int) -> str:
    return "S" * min(count, 6)


def _offset(count: int) -> str:
    return "ZZ" if count == 1 else "Z"


# LDML letter -> function of the run length returning a backend token.
_LETTERS = {
    "y": _year,
    "M": _month,
    "d": lambda count: "DD" if count >= 2 else "D",
    "D": _day_of_year,
    "E": _day_name,
    "H": lambda count: "HH" if count >= 2 else "H",
    "h": lambda count: "hh" if count >= 2 else "h",
    "m": lambda count: "mm" if count >= 2 else "m",
    "s": lambda count: "ss" if count >= 2 else "s",
    "S": _fraction,
    "a": lambda count: "A",
    "z": lambda count: "z",
    "Z": _offset,
}


def _literal(text: str) -> str:
    """Render literal text so the backend does not read it as tokens."""
    if "[" in text or "]" in text:
        raise UnknownFormatError(f"square brackets are not supported in patterns: {text!r}")
    if any(ch.isascii() and (ch.isalpha() or ch == "\\") for ch in text):
        return f"[{text}]"
    return text


@functools.lru_cache(maxsize=256)
def to_backend_tokens(pattern: str) -> str:
    """Translate an LDML pattern into backend format tokens.

    Args:
        pattern: LDML pattern string.

    Returns:
        The equivalent backend token string.

    Raises:
        UnknownFormatError: If the pattern uses an unsupported letter,
            has an unterminated quote, or contains square brackets.
    """
    result: list[str] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            result.append(_literal("".join(literal)))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]

        if ch == "'":
            # '' outside quotes is one literal quote
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            close = i + 1
            while True:
                close = pattern.find("'", close)
                if close == -1:
                    raise UnknownFormatError(f"unterminated quote in pattern {pattern!r}")
                if close + 1 < n and pattern[close + 1] == "'":
                    close += 2
                    continue
                break
            literal.append(pattern[i + 1 : close].replace("''", "'"))
            i = close + 1

        elif ch.isascii() and ch.isalpha():
            run = i
            while run < n and pattern[run] == ch:
                run += 1
            convert = _LETTERS.get(ch)
            if convert is None:
                raise UnknownFormatError(
                    f"unsupported pattern letter {ch!r} in {pattern!r}"
                )
            flush()
            result.append(convert(run - i))
            i = run

        else:
            literal.append(ch)
            i += 1

    flush()
    return "".join(result)


__all__ = ["to_backend_tokens"]
