"""Voice Chat: Polly's speech-to-text, reply, and text-to-speech pipeline.

Invariants:
    - Missing input raises InvalidArgumentError with a fixed message:
      "Audio content is required", "Prompt is required", "Text is required"
    - Audio crosses the API as base64; gateways see raw bytes
    - Unset languageCode resolves to Settings.speech_default_language
    - Speech failures surface as SpeechAPIError, model failures as
      AIResponseError ("Failed to generate AI response")
    - Reply text is the first text block of the model response, or ""
    - voice_conversation: empty transcript -> "No speech detected in audio"

Design Decisions:
    - No retries here for speech calls; the Anthropic client keeps its own policy
    - Gateways passed in by the caller (route dependencies), so tests swap fakes
"""

import base64
import binascii
import logging
from typing import Protocol

from chirpolly.config import Settings
from chirpolly.core.domain_types import VoiceGender
from chirpolly.core.errors import AIResponseError, InvalidArgumentError, TutorModelError
from chirpolly.infrastructure.anthropic_client import first_text
from chirpolly.schemas.voice import (
    SynthesizeRequest, TranscribeRequest,
    VoiceConversationRequest, VoiceConversationResponse,
)
from chirpolly.services.polly_prompt import build_polly_prompt

logger = logging.getLogger(__name__)


class SpeechGateway(Protocol):
    async def transcribe(self, audio: bytes, language_code: str) -> str: ...

    async def synthesize(
        self, text: str, language_code: str, voice_gender: VoiceGender,
    ) -> bytes: ...


class TutorChatClient(Protocol):
    async def create_message(
        self, *, model: str, max_tokens: int, system: str, messages: list, context=None,
    ): ...


def decode_audio(audio_content: str | None) -> bytes:
    if not audio_content:
        raise InvalidArgumentError("Audio content is required", "audioContent")
    try:
        audio = base64.b64decode(audio_content, validate=True)
    except binascii.Error:
        raise InvalidArgumentError(
            "Audio content must be base64-encoded", "audioContent",
        )
    if not audio:
        raise InvalidArgumentError("Audio content is required", "audioContent")
    return audio


def resolve_language(language_code: str | None, settings: Settings) -> str:
    return language_code or settings.speech_default_language


async def transcribe(
    gateway: SpeechGateway, settings: Settings, body: TranscribeRequest,
) -> str:
    audio = decode_audio(body.audio_content)
    language_code = resolve_language(body.language_code, settings)
    transcript = await gateway.transcribe(audio, language_code)
    logger.info(
        "Audio transcribed",
        extra={"language_code": language_code, "audio_bytes": len(audio)},
    )
    return transcript


async def chat_with_polly(
    client: TutorChatClient,
    settings: Settings,
    prompt: str | None,
    language_code: str | None = None,
) -> str:
    if not prompt or not prompt.strip():
        raise InvalidArgumentError("Prompt is required", "prompt")
    try:
        response = await client.create_message(
            model=settings.tutor_model,
            max_tokens=settings.tutor_max_tokens,
            system=build_polly_prompt(resolve_language(language_code, settings)),
            messages=[{"role": "user", "content": prompt}],
        )
    except TutorModelError as e:
        logger.error(
            f"Polly reply failed: {e.message}", extra={"error_code": e.code},
        )
        raise AIResponseError(retry_after_ms=e.context.retry_after_ms)
    return first_text(response)


async def synthesize(
    gateway: SpeechGateway, settings: Settings, body: SynthesizeRequest,
) -> str:
    """Synthesized MP3 as base64."""
    if not body.text or not body.text.strip():
        raise InvalidArgumentError("Text is required", "text")
    audio = await gateway.synthesize(
        body.text, resolve_language(body.language_code, settings), body.voice_gender,
    )
    return base64.b64encode(audio).decode("ascii")


async def voice_conversation(
    client: TutorChatClient,
    gateway: SpeechGateway,
    settings: Settings,
    body: VoiceConversationRequest,
) -> VoiceConversationResponse:
    """Transcribe the learner, get Polly's reply, optionally speak it."""
    language_code = resolve_language(body.language_code, settings)
    user_text = await transcribe(
        gateway, settings,
        TranscribeRequest(audio_content=body.audio_content, language_code=language_code),
    )
    if not user_text.strip():
        raise InvalidArgumentError("No speech detected in audio", "audioContent")

    ai_text = await chat_with_polly(client, settings, user_text, language_code)

    ai_audio = None
    if body.enable_voice_response and ai_text:
        ai_audio = await synthesize(
            gateway, settings,
            SynthesizeRequest(
                text=ai_text,
                language_code=language_code,
                voice_gender=VoiceGender.NEUTRAL,
            ),
        )
    return VoiceConversationResponse(
        user_text=user_text, ai_text=ai_text, ai_audio_content=ai_audio,
    )
