"""
Lexicon Duel - Dictionary Service Client

HTTP client for a remote dictionary validation service. The service
receives ``{"words": [...]}`` and answers
``{"allValid": bool, "invalidWords": [...]}``.
"""

from __future__ import annotations

import logging
from typing import Sequence

import requests
from pydantic import ValidationError

from src.dictionary.models import DictionaryVerdict

logger = logging.getLogger(__name__)


class HttpDictionaryValidator:
    """Validates words through a remote service, failing closed."""

    def __init__(
        self,
        url: str,
        api_key: str | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def validate(self, words: Sequence[str]) -> DictionaryVerdict:
        """
        Submit ``words`` to the service.

        Transport errors, HTTP error statuses and unparsable bodies all
        produce a fail-closed verdict.
        """
        payload = {"words": [w.upper() for w in words]}
        try:
            response = self._session.post(
                self.url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            verdict = DictionaryVerdict.model_validate_json(response.text)
        except requests.RequestException as exc:
            logger.exception("Dictionary service request to %s failed", self.url)
            return DictionaryVerdict.transport_failure(str(exc) or type(exc).__name__)
        except ValidationError:
            logger.exception("Dictionary service returned an unparsable response")
            return DictionaryVerdict.transport_failure("Unparsable response")

        logger.debug("Dictionary service checked %s: %s", payload["words"], verdict)
        return verdict

    def close(self) -> None:
        self._session.close()
