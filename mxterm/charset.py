"""National replacement and DEC special graphics character sets."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

log = logging.getLogger(__name__)

CharacterSet = Mapping[str, str]

DEC_SPECIAL_CHAR: CharacterSet = MappingProxyType({
    "`": "◆", "a": "▒", "b": "␉", "c": "␌", "d": "␍", "e": "␊",
    "f": "°", "g": "±", "h": "␤", "i": "␋", "j": "┘", "k": "┐",
    "l": "┌", "m": "└", "n": "┼", "o": "⎺", "p": "⎻", "q": "─",
    "r": "⎼", "s": "⎽", "t": "├", "u": "┤", "v": "┴", "w": "┬",
    "x": "│", "y": "≤", "z": "≥", "{": "π", "|": "≠", "}": "£",
    "~": "·",
})

UNITED_KINGDOM: CharacterSet = MappingProxyType({"#": "£"})

FINNISH: CharacterSet = MappingProxyType({
    "[": "Ä", "\\": "Ö", "]": "Å", "^": "Ü", "`": "é",
    "{": "ä", "|": "ö", "}": "å", "~": "ü",
})

SWEDISH: CharacterSet = MappingProxyType({
    "@": "É", "[": "Ä", "\\": "Ö", "]": "Å", "^": "Ü", "`": "é",
    "{": "ä", "|": "ö", "}": "å", "~": "ü",
})

GERMAN: CharacterSet = MappingProxyType({
    "@": "§", "[": "Ä", "\\": "Ö", "]": "Ü",
    "{": "ä", "|": "ö", "}": "ü", "~": "ß",
})

FRENCH: CharacterSet = MappingProxyType({
    "#": "£", "@": "à", "[": "°", "\\": "ç", "]": "§",
    "{": "é", "|": "ù", "}": "è", "~": "¨",
})

FRENCH_CANADIAN: CharacterSet = MappingProxyType({
    "@": "à", "[": "â", "\\": "ç", "]": "ê", "^": "î", "`": "ô",
    "{": "é", "|": "ù", "}": "è", "~": "û",
})

ITALIAN: CharacterSet = MappingProxyType({
    "#": "£", "@": "§", "[": "°", "\\": "ç", "]": "é", "`": "ù",
    "{": "à", "|": "ò", "}": "è", "~": "ì",
})

SPANISH: CharacterSet = MappingProxyType({
    "#": "£", "@": "§", "[": "¡", "\\": "Ñ", "]": "¿",
    "{": "˚", "|": "ñ", "}": "ç",
})

DUTCH: CharacterSet = MappingProxyType({
    "#": "£", "@": "¾", "[": "ĳ", "\\": "½", "]": "|",
    "{": "¨", "|": "ƒ", "}": "¼", "~": "´",
})

_BY_FINAL: Mapping[str, CharacterSet] = {
    "0": DEC_SPECIAL_CHAR,
    "A": UNITED_KINGDOM,
    "C": FINNISH,
    "5": FINNISH,
    "H": SWEDISH,
    "7": SWEDISH,
    "K": GERMAN,
    "Q": FRENCH_CANADIAN,
    "9": FRENCH_CANADIAN,
    "R": FRENCH,
    "f": FRENCH,
    "Y": ITALIAN,
    "Z": SPANISH,
    "4": DUTCH,
}


def character_set(final: str) -> Optional[CharacterSet]:
    """Return the character set designated by an SCS final character.

    ``None`` means plain US-ASCII / UTF-8, which is also what an unknown
    final character falls back to.
    """
    if final == "B":
        return None
    found = _BY_FINAL.get(final)
    if found is None:
        log.debug("Character set %s requested but does not exist", final)
    return found