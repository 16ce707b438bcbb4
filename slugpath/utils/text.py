"""URL-friendly slugs with transliteration of accented Latin letters."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SLUG_MAX_CHARS = 80
SEPARATORS = frozenset(" ,./\\-_=")

_TRANSLITERATION_GROUPS = {
    "àåáâäãą": "a",
    "èéêëę": "e",
    "ìíîïı": "i",
    "òóôõöøőð": "o",
    "ùúûüŭů": "u",
    "çćčĉ": "c",
    "żźž": "z",
    "śşšŝ": "s",
    "ñń": "n",
    "ýÿ": "y",
    "ğĝ": "g",
    "ř": "r",
    "ł": "l",
    "đ": "d",
    "ß": "ss",
    "þ": "th",
    "ĥ": "h",
    "ĵ": "j",
}

TRANSLITERATIONS: Mapping[str, str] = MappingProxyType(
    {char: ascii_text for chars, ascii_text in _TRANSLITERATION_GROUPS.items() for char in chars}
)


def remap_international_char(char: str) -> str:
    """Return the ASCII replacement for ``char`` or ``""`` when there is none."""
    return TRANSLITERATIONS.get(char.lower(), "")


def slugify(title: str | None, *, max_chars: int = SLUG_MAX_CHARS) -> str:
    """Produce a lowercase, hyphen-delimited slug such as ``"like-this-one"``.

    The scan stops after the character at index ``max_chars`` has been
    handled. The result is not truncated afterwards, so a multi-letter
    transliteration near the limit can make it longer than ``max_chars``.
    """
    if not title:
        return ""

    parts: list[str] = []
    prev_dash = False

    for index, char in enumerate(title):
        if "a" <= char <= "z" or "0" <= char <= "9":
            parts.append(char)
            prev_dash = False
        elif "A" <= char <= "Z":
            parts.append(char.lower())
            prev_dash = False
        elif char in SEPARATORS:
            if not prev_dash and parts:
                parts.append("-")
                prev_dash = True
        elif ord(char) >= 128:
            mapped = remap_international_char(char)
            if mapped:
                parts.append(mapped)
                prev_dash = False
        if index == max_chars:
            break

    if prev_dash:
        parts.pop()
    return "".join(parts)
