import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from glossary_api.errors import TranslationApiError
from glossary_models import LanguagePair, RemoteGlossaryDescriptor

logger = logging.getLogger(__name__)

DEEPL_FREE_BASE_URL = "https://api-free.deepl.com"
DEEPL_PRO_BASE_URL = "https://api.deepl.com"


def _default_base_url(api_key: Optional[str]) -> str:
    if api_key and api_key.endswith(":fx"):
        return DEEPL_FREE_BASE_URL
    return DEEPL_PRO_BASE_URL


class DeepLClient:
    """Read-only client for the DeepL glossary endpoints.

    Language pairs come from ``language_pairs`` when given, otherwise from
    the API. Both lookups are cached for the lifetime of the instance, which
    is one request.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        language_pairs: Optional[List[LanguagePair]] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = (base_url or _default_base_url(api_key)).rstrip("/")
        self._configured_pairs = list(language_pairs or [])
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)
        self._language_pairs: Optional[List[LanguagePair]] = None
        self._glossaries: Optional[List[RemoteGlossaryDescriptor]] = None

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "DeepLClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @staticmethod
    def internal_glossary_key(source_lang: str, target_lang: str) -> str:
        return f"{source_lang.strip().upper()}-{target_lang.strip().upper()}"

    def get_language_pairs(self) -> List[LanguagePair]:
        if self._language_pairs is None:
            if self._configured_pairs:
                self._language_pairs = list(self._configured_pairs)
            else:
                payload = self._get("/v2/glossary-language-pairs")
                items = payload.get("supported_languages") or []
                self._language_pairs = [
                    LanguagePair(source=item.get("source_lang"), target=item.get("target_lang"))
                    for item in items
                    if isinstance(item, dict)
                ]
        return self._language_pairs

    def get_glossaries(self) -> List[RemoteGlossaryDescriptor]:
        if self._glossaries is None:
            payload = self._get("/v2/glossaries")
            try:
                self._glossaries = [
                    RemoteGlossaryDescriptor.model_validate(item) for item in payload.get("glossaries") or []
                ]
            except ValidationError as exc:
                logger.error("DeepL glossary payload invalid", extra={"errors": exc.errors()})
                raise TranslationApiError("Translation API returned malformed glossary metadata") from exc
        return self._glossaries

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"DeepL-Auth-Key {self.api_key}"}

    def _get(self, path: str) -> Dict[str, Any]:
        if not self.api_key:
            raise TranslationApiError("Translation API key is not configured")

        url = f"{self.base_url}{path}"
        logger.info("DeepL GET", extra={"url": url})
        try:
            resp = self._client.get(url, headers=self._headers())
        except httpx.TimeoutException as exc:
            logger.error("DeepL GET timed out", extra={"url": url})
            raise TranslationApiError("Translation API request timed out") from exc
        except httpx.HTTPError as exc:
            logger.error("DeepL GET failed", extra={"url": url, "error": str(exc)})
            raise TranslationApiError(f"Translation API request failed: {exc}") from exc

        logger.info("DeepL GET response", extra={"url": url, "status_code": resp.status_code})
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "DeepL GET error",
                extra={"url": url, "status_code": resp.status_code, "response_body": resp.text},
            )
            raise TranslationApiError(
                f"Translation API answered with status {resp.status_code}",
                status_code=resp.status_code,
            ) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise TranslationApiError("Translation API returned invalid JSON") from exc
        if not isinstance(payload, dict):
            raise TranslationApiError("Translation API returned an unexpected payload")
        return payload
