"""TTS Provider base interface, models, and exceptions."""

from __future__ import annotations

import base64
import binascii
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class TTSProviderType(str, Enum):
    """Provider ids with a synthesis adapter."""

    OPENAI = "openai"
    ELEVENLABS = "elevenlabs"
    GEMINI = "gemini"
    INWORLD = "inworld"


# =============================================================================
# Exceptions
# =============================================================================


class TTSProviderError(Exception):
    """Base exception for TTS provider errors."""

    def __init__(
        self, message: str, provider: str, details: dict[str, Any] | None = None
    ) -> None:
        self.message = message
        self.provider = provider
        self.details = details or {}
        super().__init__(f"[{provider}] {message}")


class TTSMissingCredentialError(TTSProviderError):
    """Raised before any network call when the provider credential is unset."""

    def __init__(self, provider: str, setting: str) -> None:
        self.setting = setting
        super().__init__(f"Missing {setting}", provider, {"setting": setting})


class TTSSynthesisError(TTSProviderError):
    """Raised when the provider answers with a non-success status."""

    def __init__(self, provider: str, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"TTS request failed ({status_code}): {body}",
            provider,
            {"status_code": status_code, "response": body},
        )


class TTSMalformedResponseError(TTSProviderError):
    """Raised when a successful response lacks the expected audio payload."""

    def __init__(
        self, provider: str, field_name: str, details: dict[str, Any] | None = None
    ) -> None:
        self.field_name = field_name
        super().__init__(f"Response missing {field_name}", provider, details)


class TTSConnectionError(TTSProviderError):
    """Raised when connection to provider fails."""

    def __init__(self, provider: str, details: dict[str, Any] | None = None) -> None:
        super().__init__("Connection to provider failed", provider, details)


class UnsupportedProviderError(TTSProviderError):
    """Raised for a provider id that has no configuration or adapter."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"Unsupported provider: {provider}", provider)


# =============================================================================
# Data Models
# =============================================================================


@dataclass(frozen=True)
class CacheKey:
    """Fields that must all match for a cached clip to be reused."""

    provider_id: str
    prompt_id: str
    model: str
    voice: str


@dataclass(frozen=True)
class ProviderConfig:
    """Generation parameters resolved for one provider at request time."""

    provider_id: str
    model: str
    voice: str
    cache_model: str  # model component of the cache key
    api_key: str = field(default="", repr=False)
    encoding: str = "MP3"
    sample_rate: int | None = None
    options: dict[str, Any] = field(default_factory=dict)

    def cache_key(self, prompt_id: str) -> CacheKey:
        return CacheKey(
            provider_id=self.provider_id,
            prompt_id=prompt_id,
            model=self.cache_model,
            voice=self.voice,
        )


@dataclass
class SynthesisResult:
    """Raw adapter output before format normalization."""

    audio_data: bytes
    model: str  # model actually used
    voice: str  # voice actually used
    encoding: str = "MP3"
    sample_rate: int | None = None
    raw_pcm: bool = False  # headerless samples that need a container


# =============================================================================
# Provider Protocol
# =============================================================================


class TTSProvider(ABC):
    """Abstract base class for TTS providers."""

    provider_name: str
    credential_setting: str

    def __init__(self, timeout: float = 60.0) -> None:
        """
        Initialize provider.

        Args:
            timeout: Request timeout in seconds.
        """
        self.timeout = timeout

    @abstractmethod
    async def synthesize(self, text: str, config: ProviderConfig) -> SynthesisResult:
        """
        Synthesize speech from text.

        Args:
            text: Prompt text to speak.
            config: Resolved provider configuration.

        Returns:
            SynthesisResult with raw audio and the model/voice actually used.

        Raises:
            TTSMissingCredentialError: If the credential is not configured.
            TTSSynthesisError: If the provider returns a non-success status.
            TTSMalformedResponseError: If the audio payload is absent.
            TTSConnectionError: If the provider cannot be reached.
        """
        ...

    def require_credential(self, config: ProviderConfig) -> str:
        """Return the configured credential or fail before any network call."""
        if not config.api_key:
            raise TTSMissingCredentialError(self.provider_name, self.credential_setting)
        return config.api_key

    async def _post(
        self,
        url: str,
        *,
        headers: dict[str, str],
        payload: dict[str, Any],
    ) -> httpx.Response:
        """
        POST a JSON payload and return the successful response.

        Raises:
            TTSSynthesisError: On any non-2xx status, with the upstream body.
            TTSConnectionError: On transport failures and timeouts.
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(url, headers=headers, json=payload)
            except httpx.TimeoutException as e:
                raise TTSConnectionError(
                    provider=self.provider_name,
                    details={"error": f"Request timeout: {e}"},
                ) from e
            except httpx.RequestError as e:
                raise TTSConnectionError(
                    provider=self.provider_name,
                    details={"error": str(e)},
                ) from e

        if response.status_code < 200 or response.status_code >= 300:
            logger.warning(
                f"[{self.provider_name}] Upstream returned {response.status_code}"
            )
            raise TTSSynthesisError(
                provider=self.provider_name,
                status_code=response.status_code,
                body=response.text,
            )

        return response

    def _json_body(self, response: httpx.Response, field_name: str) -> dict[str, Any]:
        """Parse a JSON envelope, treating an unparseable body as malformed."""
        try:
            data = response.json()
        except ValueError as e:
            raise TTSMalformedResponseError(
                self.provider_name, field_name, {"error": f"Invalid JSON: {e}"}
            ) from e
        if not isinstance(data, dict):
            raise TTSMalformedResponseError(self.provider_name, field_name)
        return data

    def _decode_audio(self, encoded: Any, field_name: str) -> bytes:
        """Decode a base64 audio field from a JSON envelope."""
        if not encoded or not isinstance(encoded, str):
            raise TTSMalformedResponseError(self.provider_name, field_name)
        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise TTSMalformedResponseError(
                self.provider_name, field_name, {"error": str(e)}
            ) from e
