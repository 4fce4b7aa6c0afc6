"""
Lexicon Duel - Dictionary Validator Factory

Cached factory choosing the dictionary collaborator from settings.
"""

import logging
from functools import lru_cache

from src.config.settings import get_settings
from src.dictionary.service import HttpDictionaryValidator
from src.dictionary.validators import (
    DictionaryValidator,
    PermissiveValidator,
    WordListValidator,
)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_dictionary_validator() -> DictionaryValidator:
    """
    Create and cache the configured validator.

    Precedence: service URL, word list file, explicit bypass, built-in list.
    """
    settings = get_settings()
    if settings.dictionary_url:
        logger.info("Using dictionary service at %s", settings.dictionary_url)
        return HttpDictionaryValidator(
            settings.dictionary_url,
            api_key=settings.dictionary_api_key,
            timeout=settings.dictionary_timeout,
        )
    if settings.word_list_path:
        return WordListValidator(path=settings.word_list_path)
    if settings.allow_unvalidated_words:
        logger.warning("No dictionary configured; words will NOT be validated")
        return PermissiveValidator()
    return WordListValidator()
