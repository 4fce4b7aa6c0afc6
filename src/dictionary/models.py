"""
Lexicon Duel - Dictionary Models

Pydantic model for the dictionary validator's response.
"""

from pydantic import AliasChoices, BaseModel, Field, model_validator

from src.engine.base import ErrorKind

COULD_NOT_VALIDATE = "Could not validate"


class DictionaryVerdict(BaseModel):
    """Answer of a dictionary validator for a batch of words."""

    all_valid: bool = Field(validation_alias=AliasChoices("allValid", "valid", "all_valid"))
    invalid_words: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("invalidWords", "invalid_words"),
    )
    error: str | None = None

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _listed_words_are_rejections(self) -> "DictionaryVerdict":
        # A verdict listing rejected words is never an acceptance.
        if self.invalid_words or self.error:
            self.all_valid = False
        return self

    @classmethod
    def accepted(cls) -> "DictionaryVerdict":
        return cls(all_valid=True)

    @classmethod
    def rejected(cls, invalid_words: list[str]) -> "DictionaryVerdict":
        return cls(all_valid=False, invalid_words=invalid_words)

    @classmethod
    def transport_failure(cls, error: str) -> "DictionaryVerdict":
        """Fail-closed verdict for an unreachable or unparsable validator."""
        return cls(all_valid=False, invalid_words=[COULD_NOT_VALIDATE], error=error)

    @property
    def error_kind(self) -> ErrorKind | None:
        if self.all_valid:
            return None
        if self.error is not None:
            return ErrorKind.VALIDATION_TRANSPORT
        return ErrorKind.DICTIONARY_REJECTION
