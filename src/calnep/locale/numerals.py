from __future__ import annotations

from typing import Dict, Union

from ..core.errors import RangeError
from .names import Language

ASCII_DIGITS = "0123456789"
NEPALI_DIGITS = "०१२३४५६७८९"

_TO_SYSTEM: Dict[Language, Dict[int, int]] = {
    Language.ENGLISH: {},
    Language.NEPALI: str.maketrans(ASCII_DIGITS, NEPALI_DIGITS),
}
_TO_ASCII = str.maketrans(NEPALI_DIGITS, ASCII_DIGITS)


def _language(system: Union[Language, str]) -> Language:
    if isinstance(system, Language):
        return system
    if not isinstance(system, str):
        raise RangeError(f"Unknown numeral system {system!r}")
    for lang in Language:
        if system.lower() in (lang.value, lang.name.lower()):
            return lang
    raise RangeError(f"Unknown numeral system {system!r}")


def to_numeral_system(text: str, system: Union[Language, str] = Language.NEPALI) -> str:
    """Replace ASCII digits in ``text`` by the digits of ``system``; other characters pass through."""
    return text.translate(_TO_SYSTEM[_language(system)])


def to_nepali_digits(text: str) -> str:
    return text.translate(_TO_SYSTEM[Language.NEPALI])


def to_ascii_digits(text: str) -> str:
    return text.translate(_TO_ASCII)
