"""
Lexicon Duel Dictionary Layer.

Collaborators that decide word legality for the move engine.
"""

from src.dictionary.client import get_dictionary_validator
from src.dictionary.models import COULD_NOT_VALIDATE, DictionaryVerdict
from src.dictionary.service import HttpDictionaryValidator
from src.dictionary.validators import (
    DictionaryValidator,
    PermissiveValidator,
    WordListValidator,
    check_words,
)

__all__ = [
    "COULD_NOT_VALIDATE",
    "DictionaryValidator",
    "DictionaryVerdict",
    "HttpDictionaryValidator",
    "PermissiveValidator",
    "WordListValidator",
    "check_words",
    "get_dictionary_validator",
]
