"""Small None-tolerant string helpers."""

from __future__ import annotations


def is_blank(value: str | None) -> bool:
    """Return True for ``None``, empty or whitespace-only strings."""
    return value is None or not value.strip()


def is_not_blank(value: str | None) -> bool:
    return not is_blank(value)


def clean(value: str | None) -> str | None:
    """Return ``value`` stripped, or ``None`` when it is blank."""
    if is_blank(value):
        return None
    return value.strip()


def shave(value: str | None, max_length: int, concat: str = "...") -> str | None:
    """Cut ``value`` down to ``max_length`` characters, appending ``concat`` when cut."""
    if not value or len(value) <= max_length:
        return value
    return value[:max_length] + concat


def parse_prefix(phrase: str | None, prefix: str | None, *, ignore_case: bool = True) -> str | None:
    """Move a leading ``prefix`` to the end of ``phrase``.

    ``parse_prefix("The Phrase", "The ")`` returns ``"Phrase, The"``.
    """
    if is_blank(phrase):
        return None
    if is_blank(prefix):
        return phrase

    head = phrase[: len(prefix)]
    matches = head.casefold() == prefix.casefold() if ignore_case else head == prefix
    if not matches:
        return phrase
    return f"{phrase[len(prefix):].strip()}, {head.strip()}"


def is_unordered_substring(source: str | None, target: str | None) -> bool:
    """Return True if every character of ``source`` occurs somewhere in ``target``.

    Order and repetition are ignored, so ``"abc"`` is an unordered substring
    of ``"decba"``.
    """
    if source is None:
        return target is None
    if source == target:
        return True
    if target is None:
        return False
    return set(source) <= set(target)


def safe_equals(source: str | None, other: str | None, *, ignore_case: bool = True) -> bool:
    if source is None or other is None:
        return source is other
    if ignore_case:
        return source.casefold() == other.casefold()
    return source == other
