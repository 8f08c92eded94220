"""
Human-readable rendering of numbers and strings for chart labels, map legends
and console reports.
"""
import textwrap
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence

import pandas as pd


def percent(fraction: float, decimals: int = 2) -> str:
    """0.1524 -> '15.24%'"""
    return f"{fraction:.{decimals}%}"


def with_commas(number, decimals: int = 0) -> str:
    """1234567 -> '1,234,567'. Floats are rounded half away from zero to `decimals` places."""
    # Decimal keeps large counts exact and avoids round-half-to-even (2.5 -> "3")
    value = Decimal(str(number)).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f"{value:,.{decimals}f}"


def hard_wrap(text: str, width: int) -> str:
    """Wraps every line of `text` to at most `width` characters.

    Words are never split, so a single word longer than `width` keeps its own line.
    """
    if width < 1:
        raise ValueError(f"width must be at least 1, got {width}")

    wrapped = [
        textwrap.fill(line, width=width, break_long_words=False, break_on_hyphens=False)
        for line in text.splitlines()
    ]
    return "\n".join(wrapped)


def _nearest_break(text: str, target: int, lo: int, hi: int, reach: int):
    best = None
    for pos in range(max(lo, target - reach), min(hi, target + reach + 1)):
        if text[pos] == " " and (best is None or abs(pos - target) < abs(best - target)):
            best = pos
    return best


def split_string_into_n_parts(text: str, n: int) -> List[str]:
    """
    Splits `text` into exactly `n` pieces of similar length, e.g. to stack a long
    map title over several lines.

    Each cut lands on the space nearest to the even split point if one lies within
    half a piece length; that space is dropped, so " ".join(parts) rebuilds the
    text. Other whitespace such as newlines is never a break. Otherwise the cut
    falls mid-word. Short texts yield trailing empty pieces.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")

    parts = []
    start = 0
    for i in range(n - 1):
        pieces_left = n - i
        piece_len = (len(text) - start) / pieces_left
        target = start + int(round(piece_len))

        cut = _nearest_break(text, target, start + 1, len(text), int(piece_len // 2))
        if cut is None:
            parts.append(text[start:target])
            start = target
        else:
            parts.append(text[start:cut])
            start = cut + 1
    parts.append(text[start:])
    return parts


def format_table_as_text(headers: Sequence[str], rows: Sequence[Sequence]) -> str:
    """Aligned plain-text table with a dashed rule under the header."""
    headers = list(headers)
    for i, row in enumerate(rows):
        if len(row) != len(headers):
            raise ValueError(
                f"Row {i} has {len(row)} values but there are {len(headers)} headers"
            )

    if not rows:
        header_line = "  ".join(str(h) for h in headers)
        return header_line + "\n" + "-" * len(header_line)

    # object dtype so 1 stays "1" next to 2.5 in the same column
    df = pd.DataFrame([list(r) for r in rows], columns=headers, dtype=object)
    lines = df.to_string(index=False).splitlines()
    lines.insert(1, "-" * len(lines[0]))
    return "\n".join(lines)
