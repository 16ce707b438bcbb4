"""Human readable byte sizes using decimal (1000-based) units."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

_UNITS = ("bytes", "kB", "MB", "GB", "TB", "PB")
_STEP = Decimal(1000)


def format_byte_size(size: int, *, decimals: int = 1, trim_zeros: bool = True) -> str:
    """Return a rough display string such as ``"425.7 kB"`` for ``size`` bytes.

    Values are scaled into the largest unit below them, up to petabytes, and
    rounded half away from zero. With ``trim_zeros`` the fractional part is
    dropped when it rounds to zero, otherwise ``decimals`` digits are kept.
    """
    if decimals < 0:
        raise ValueError("decimals must not be negative")

    value = Decimal(size)
    unit_index = 0
    # Wide enough for every integer digit of the input plus the requested decimals.
    with localcontext() as ctx:
        ctx.prec = len(str(abs(int(size)))) + decimals + 2
        while unit_index < len(_UNITS) - 1 and abs(value) >= _STEP:
            value /= _STEP
            unit_index += 1

        quantum = Decimal(1).scaleb(-decimals)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    text = f"{rounded:,.{decimals}f}"
    if trim_zeros and "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {_UNITS[unit_index]}"
