"""Generative AI capability used for skin analysis and speech synthesis.

Routes depend on the CareAI protocol only, so the provider can be swapped
(or stubbed in tests) through the ``get_care_ai`` dependency.
"""
import base64
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import httpx

from ..config import Settings

logger = logging.getLogger(__name__)

SKIN_PROMPT = """You are an AI Skin Care Specialist. Analyze this skin photo and these user answers: {answers}.
Identify possible concerns (acne, dryness, oiliness, pigmentation) and recommend a daily skincare routine.
Also, warn about comedogenic ingredients if relevant.
Format the response in a structured JSON-like way but as a readable string."""

SPEECH_PROMPT = "Say clearly and gently: {text}"

DEFAULT_AUDIO_MIME = "audio/L16;codec=pcm;rate=24000"


class AIServiceError(Exception):
    """The AI provider failed or returned an unusable response."""


class AIServiceNotConfigured(AIServiceError):
    """No API key is configured for the provider."""


class AIServiceTimeout(AIServiceError):
    """The provider did not answer in time."""


@dataclass(frozen=True)
class SpeechClip:
    """Synthesized speech as base64 audio."""

    audio_base64: str
    mime_type: str


class CareAI(Protocol):
    """One method per AI-backed use case."""

    async def analyze_skin(self, image: bytes, mime_type: str, answers: str) -> str:
        ...

    async def synthesize_speech(self, text: str) -> SpeechClip:
        ...


class GeminiCareAI:
    """CareAI backed by the Gemini generateContent REST endpoint."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        skin_model: str,
        tts_model: str,
        voice: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.skin_model = skin_model
        self.tts_model = tts_model
        self.voice = voice
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiCareAI":
        return cls(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            skin_model=settings.skin_model,
            tts_model=settings.tts_model,
            voice=settings.tts_voice,
            timeout=settings.ai_timeout,
        )

    async def analyze_skin(self, image: bytes, mime_type: str, answers: str) -> str:
        """Ask the vision model for skin concerns and a routine."""
        body = {
            "contents": [
                {
                    "parts": [
                        {
                            "inline_data": {
                                "mime_type": mime_type or "image/jpeg",
                                "data": base64.b64encode(image).decode("utf-8"),
                            }
                        },
                        {"text": SKIN_PROMPT.format(answers=answers)},
                    ]
                }
            ]
        }
        data = await self._generate(self.skin_model, body)

        parts = _first_candidate_parts(data)
        text = "".join(part["text"] for part in parts if isinstance(part.get("text"), str)).strip()
        if not text:
            raise AIServiceError("Empty analysis returned by AI provider")
        return text

    async def synthesize_speech(self, text: str) -> SpeechClip:
        """Render text as speech with the configured prebuilt voice."""
        body = {
            "contents": [{"parts": [{"text": SPEECH_PROMPT.format(text=text)}]}],
            "generationConfig": {
                "responseModalities": ["AUDIO"],
                "speechConfig": {
                    "voiceConfig": {"prebuiltVoiceConfig": {"voiceName": self.voice}}
                },
            },
        }
        data = await self._generate(self.tts_model, body)

        for part in _first_candidate_parts(data):
            inline = part.get("inlineData") or part.get("inline_data")
            if isinstance(inline, dict) and inline.get("data"):
                mime = inline.get("mimeType") or inline.get("mime_type") or DEFAULT_AUDIO_MIME
                return SpeechClip(audio_base64=inline["data"], mime_type=mime)

        raise AIServiceError("No audio returned by AI provider")

    async def _generate(self, model: str, body: dict) -> dict:
        if not self.api_key:
            raise AIServiceNotConfigured("GEMINI_API_KEY is not set")

        url = f"{self.base_url}/models/{model}:generateContent"
        headers = {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout), transport=self._transport
            ) as client:
                response = await client.post(url, headers=headers, json=body)
        except httpx.TimeoutException as e:
            logger.error(f"[GENAI] {model} timed out")
            raise AIServiceTimeout(f"{model} request timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"[GENAI] {model} request failed: {e}")
            raise AIServiceError(f"Cannot reach AI provider: {e}") from e

        if response.status_code != 200:
            logger.error(f"[GENAI] {model} returned {response.status_code}: {response.text}")
            raise AIServiceError(f"AI provider returned status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"[GENAI] {model} returned a non-JSON body")
            raise AIServiceError("Malformed response from AI provider") from e
        if not isinstance(data, dict):
            logger.error(f"[GENAI] {model} returned {type(data).__name__} instead of an object")
            raise AIServiceError("Malformed response from AI provider")

        logger.info(f"[GENAI] {model} responded")
        return data


def _first_candidate_parts(data: dict) -> list:
    """Parts of the first candidate; only dict parts are kept."""
    candidates = data.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        return []
    candidate = candidates[0]
    if not isinstance(candidate, dict):
        raise AIServiceError("Malformed response from AI provider")
    content = candidate.get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return []
    return [part for part in parts if isinstance(part, dict)]
