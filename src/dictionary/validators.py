"""
Lexicon Duel - Dictionary Validators

Local dictionary collaborators and the fail-closed guard used by the game
engine. Any validator only needs a ``validate(words)`` method returning a
DictionaryVerdict.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Protocol, Sequence

from src.dictionary.models import DictionaryVerdict

logger = logging.getLogger(__name__)


MINIMAL_WORDS: frozenset[str] = frozenset({
    "AA", "AB", "AD", "AE", "AG", "AH", "AI", "AL", "AM", "AN", "AR", "AS",
    "AT", "AW", "AX", "AY", "BA", "BE", "BI", "BO", "BY", "DA", "DE", "DO",
    "ED", "EF", "EH", "EL", "EM", "EN", "ER", "ES", "ET", "EX", "FA", "FE",
    "GO", "HA", "HE", "HI", "HM", "HO", "ID", "IF", "IN", "IS", "IT", "JO",
    "KA", "KI", "LA", "LI", "LO", "MA", "ME", "MI", "MO", "MU", "MY", "NA",
    "NE", "NO", "NU", "OD", "OE", "OF", "OH", "OI", "OM", "ON", "OP", "OR",
    "OS", "OW", "OX", "OY", "PA", "PE", "PI", "QI", "RE", "SH", "SI", "SO",
    "TA", "TI", "TO", "UH", "UM", "UN", "UP", "US", "UT", "WE", "WO", "XI",
    "XU", "YA", "YE", "YO", "ZA",
    "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "CAN", "HER",
    "WAS", "ONE", "OUR", "OUT", "DAY", "HAD", "HAS", "HIS", "HOW", "ITS",
    "NEW", "NOW", "OLD", "SEE", "WAY", "WHO", "CAT", "CATS", "DOG", "RUN",
    "SET", "TOP", "RED", "ZOO", "WORD", "PLAY", "GAME", "TILE", "BOARD",
    "QUIZ", "JAZZ", "FUZZ", "ECHO", "HELLO", "WORLD", "BLANK", "HOUSE",
})


class DictionaryValidator(Protocol):
    """External collaborator deciding whether words are legal."""

    def validate(self, words: Sequence[str]) -> DictionaryVerdict:
        ...


class WordListValidator:
    """Validates words against an in-memory word list."""

    def __init__(
        self,
        words: Iterable[str] | None = None,
        path: str | None = None,
    ) -> None:
        self.words: set[str] = set()
        if words is not None:
            self.words = {w.strip().upper() for w in words if w.strip()}
        elif path is not None and os.path.exists(path):
            self._load(path)
        else:
            if path is not None:
                logger.warning("Word list %s not found", path)
            logger.warning("Using built-in minimal word list")
            self.words = set(MINIMAL_WORDS)

    def _load(self, path: str) -> None:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip().upper()
                if len(word) >= 2 and word.isalpha():
                    self.words.add(word)
        logger.info("Loaded %s words from %s", f"{len(self.words):,}", path)

    def is_valid(self, word: str) -> bool:
        return word.upper() in self.words

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def validate(self, words: Sequence[str]) -> DictionaryVerdict:
        invalid = [w.upper() for w in words if not self.is_valid(w)]
        if invalid:
            return DictionaryVerdict.rejected(invalid)
        return DictionaryVerdict.accepted()


class PermissiveValidator:
    """
    Reduced-trust validator that accepts every word.

    Only for setups with no dictionary available. Every call is logged.
    """

    def validate(self, words: Sequence[str]) -> DictionaryVerdict:
        logger.warning(
            "Dictionary check bypassed (reduced-trust mode): accepted %s unchecked",
            ", ".join(words) or "no words",
        )
        return DictionaryVerdict.accepted()


def check_words(validator: DictionaryValidator, words: Sequence[str]) -> DictionaryVerdict:
    """
    Ask ``validator`` about ``words``, failing closed on any error.

    No retry is attempted; the caller decides what to tell the player.
    """
    try:
        return validator.validate(list(words))
    except Exception as exc:
        logger.exception("Dictionary validator raised for %d words", len(words))
        return DictionaryVerdict.transport_failure(str(exc) or type(exc).__name__)
