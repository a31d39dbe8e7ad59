"""Client for AI-assisted dictionary entry generation (Gemini API)."""

import json
import logging
from typing import Any

import requests

from borno.config import BornoConfig
from borno.exceptions import EnrichmentError
from borno.models import LANGUAGES, LIST_FIELDS, EnrichmentResult
from borno.models.entry import CONTENT_FIELDS, FIELD_KEYS
from borno.utils.text_utils import detect_language, strip_code_fences

logger = logging.getLogger(__name__)

REQUIRED_KEYS = (
    "word",
    "translation",
    "partOfSpeech",
    "meaning",
    "description",
    "synonyms",
    "examples",
)

# Persisted key -> attribute name, limited to generated content
_KEY_TO_FIELD = {FIELD_KEYS[name]: name for name in CONTENT_FIELDS}


def _string(description: str) -> dict:
    return {"type": "STRING", "description": description}


def _string_list(description: str) -> dict:
    return {"type": "ARRAY", "items": {"type": "STRING"}, "description": description}


RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "word": _string("The word, capitalized."),
        "translation": _string("Direct equivalent in the other language (পরিভাষা)"),
        "phonetic": _string("IPA pronunciation"),
        "pronunciationBn": _string("Pronunciation written in Bengali script (উচ্চারণ)"),
        "partOfSpeech": _string("e.g., Noun (বিশেষ্য)"),
        "meaning": _string("Primary meaning, concise"),
        "description": _string("Detailed description"),
        "etymology": _string("Etymology (ব্যুৎপত্তি)"),
        "sandhi": _string("Sandhi breakdown, if any (সন্ধি)"),
        "samas": _string("Samas analysis, if any (সমাস)"),
        "source": _string("Source category, e.g. তৎসম, তদ্ভব, বিদেশি"),
        "sourceWord": _string("Source word (উৎস শব্দ)"),
        "synonyms": _string_list("List of synonyms"),
        "antonyms": _string_list("List of antonyms"),
        "examples": _string_list("Bilingual example sentences"),
        "origin": _string("Short etymology note"),
    },
    "required": list(REQUIRED_KEYS),
}

PROMPT_TEMPLATE = """You are a dictionary content generator for a Bengali/English student dictionary.
Create a detailed dictionary entry for the word: "{word}".

{language_instruction}

Ensure the 'meaning' is concise.
'description' should be detailed.
Leave a field empty when it does not apply to this word."""

LANGUAGE_INSTRUCTIONS = {
    "en": "The input is English. Provide Bengali translations.",
    "bn": "The input is Bengali. Provide English translations where appropriate.",
}


class EnrichmentClient:
    """Generate structured dictionary entries from a headword.

    Implements the EnrichmentProvider protocol. Each call makes a single
    attempt; any failure is reported as EnrichmentError.
    """

    def __init__(self, config: BornoConfig, session: requests.Session | None = None):
        """Initialize the enrichment client.

        Args:
            config: Configuration with API endpoint, model, key and timeout
            session: Optional requests session (a new one is created if omitted)
        """
        self.config = config
        self._session = session or requests.Session()

    @property
    def name(self) -> str:
        return f"Gemini ({self.config.gemini_model})"

    def is_available(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.config.gemini_api_key)

    def generate(self, word: str, language_hint: str | None = None) -> EnrichmentResult:
        """Request a dictionary entry for a word.

        Args:
            word: Headword to describe
            language_hint: "bn" or "en"; detected from the script if omitted

        Returns:
            Validated entry fields

        Raises:
            EnrichmentError: On missing configuration, network failure,
                timeout, empty response or invalid content
        """
        word = (word or "").strip()
        if not word:
            raise EnrichmentError("Enter a word before generating an entry")
        if not self.is_available():
            raise EnrichmentError("No Gemini API key configured (set GEMINI_API_KEY)")

        hint = language_hint if language_hint in LANGUAGES else detect_language(word)
        logger.info(f"Requesting entry for '{word}' ({hint}) from {self.name}")

        text = self._request(self.build_prompt(word, hint))
        document = self.parse_response_text(text)
        return self.validate(document, requested_word=word)

    @staticmethod
    def build_prompt(word: str, language_hint: str) -> str:
        return PROMPT_TEMPLATE.format(
            word=word,
            language_instruction=LANGUAGE_INSTRUCTIONS.get(language_hint, LANGUAGE_INSTRUCTIONS["bn"]),
        )

    def _request(self, prompt: str) -> str:
        """POST the prompt and return the generated text."""
        url = f"{self.config.gemini_api_url.rstrip('/')}/{self.config.gemini_model}:generateContent"
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }

        try:
            response = self._session.post(
                url,
                json=payload,
                headers={"x-goog-api-key": self.config.gemini_api_key},
                timeout=self.config.enrichment_timeout,
            )
        except requests.exceptions.Timeout as e:
            raise EnrichmentError(
                f"Generation timed out after {self.config.enrichment_timeout:g}s"
            ) from e
        except requests.RequestException as e:
            raise EnrichmentError(f"Could not reach generation service: {e}") from e

        if response.status_code != 200:
            raise EnrichmentError(f"Generation service returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise EnrichmentError("Generation service returned a non-JSON reply") from e

        text = self._extract_text(data)
        if not text:
            raise EnrichmentError("No response from AI")
        return text

    @staticmethod
    def _extract_text(data: Any) -> str:
        if not isinstance(data, dict):
            return ""
        candidates = data.get("candidates") or []
        if not candidates or not isinstance(candidates[0], dict):
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(p.get("text", "") for p in parts if isinstance(p, dict)).strip()

    @staticmethod
    def parse_response_text(text: str) -> dict[str, Any]:
        """Decode the generated text into a JSON object.

        Raises:
            EnrichmentError: If the text is not a JSON object
        """
        try:
            document = json.loads(strip_code_fences(text))
        except json.JSONDecodeError as e:
            raise EnrichmentError(f"AI response is not valid JSON: {e}") from e
        if not isinstance(document, dict):
            raise EnrichmentError("AI response is not a JSON object")
        return document

    @staticmethod
    def validate(document: dict[str, Any], requested_word: str = "") -> EnrichmentResult:
        """Check a generated document against the entry schema.

        Unknown keys are ignored. Optional keys with the wrong type are
        dropped. Required keys need a non-null value of the right type.

        Args:
            document: Decoded service output
            requested_word: Word that was asked for (used if "word" is blank)

        Returns:
            EnrichmentResult with attribute-named fields

        Raises:
            EnrichmentError: If a required field is missing or malformed
        """
        missing = [key for key in REQUIRED_KEYS if document.get(key) is None]
        if missing:
            raise EnrichmentError(f"AI response is missing fields: {', '.join(missing)}")

        fields: dict[str, str | list[str]] = {}
        for key, name in _KEY_TO_FIELD.items():
            if key not in document or document[key] is None:
                continue
            value = document[key]
            if name in LIST_FIELDS:
                ok = isinstance(value, list) and all(isinstance(v, str) for v in value)
                cleaned: str | list[str] = [v.strip() for v in value if v.strip()] if ok else []
            else:
                ok = isinstance(value, str)
                cleaned = value.strip() if ok else ""
            if not ok:
                if key in REQUIRED_KEYS:
                    raise EnrichmentError(f"AI response field '{key}' has the wrong type")
                logger.debug(f"Ignoring malformed optional field '{key}'")
                continue
            fields[name] = cleaned

        word = str(fields.get("word") or "").strip() or requested_word
        fields["word"] = word
        return EnrichmentResult(word=word, fields=fields)
