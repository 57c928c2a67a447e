"""Voice routes: Polly's transcribe, chat, synthesize, and full voice turn.

Invariants:
    - Bodies and responses use camelCase wire names (audioContent, languageCode, ...)
    - Missing input -> 400 INVALID_ARGUMENT with a fixed message
    - Upstream speech/model failure -> 502

Design Decisions:
    - Anthropic client and speech gateway are process-wide singletons created
      on first use; exposed as dependencies so tests override them
"""

import logging

from fastapi import APIRouter, Depends

from chirpolly.config import Settings, get_settings
from chirpolly.infrastructure.anthropic_client import ResilientAnthropicClient
from chirpolly.infrastructure.speech_client import GoogleSpeechGateway
from chirpolly.schemas.voice import (
    ChatRequest, ChatResponse, SynthesizeRequest, SynthesizeResponse,
    TranscribeRequest, TranscribeResponse,
    VoiceConversationRequest, VoiceConversationResponse,
)
from chirpolly.services import voice_chat

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/voice", tags=["voice"])

_tutor_client: ResilientAnthropicClient | None = None
_speech_gateway: GoogleSpeechGateway | None = None


def get_tutor_client() -> ResilientAnthropicClient:
    global _tutor_client
    if _tutor_client is None:
        settings = get_settings()
        _tutor_client = ResilientAnthropicClient(
            api_key=settings.anthropic_api_key,
            max_retries=settings.anthropic_max_retries,
            base_delay_ms=settings.anthropic_base_delay_ms,
            max_delay_ms=settings.anthropic_max_delay_ms,
            timeout_seconds=settings.anthropic_timeout_seconds,
        )
    return _tutor_client


def get_speech_gateway() -> GoogleSpeechGateway:
    global _speech_gateway
    if _speech_gateway is None:
        settings = get_settings()
        _speech_gateway = GoogleSpeechGateway(
            recognition_model=settings.speech_recognition_model,
            speaking_rate=settings.tts_speaking_rate,
            pitch=settings.tts_pitch,
        )
    return _speech_gateway


@router.post("/transcribe", response_model=TranscribeResponse)
async def transcribe_audio(
    body: TranscribeRequest,
    gateway: GoogleSpeechGateway = Depends(get_speech_gateway),
    settings: Settings = Depends(get_settings),
):
    transcript = await voice_chat.transcribe(gateway, settings, body)
    return TranscribeResponse(transcript=transcript)


@router.post("/chat", response_model=ChatResponse)
async def chat_with_polly(
    body: ChatRequest,
    client: ResilientAnthropicClient = Depends(get_tutor_client),
    settings: Settings = Depends(get_settings),
):
    reply = await voice_chat.chat_with_polly(client, settings, body.prompt)
    return ChatResponse(reply=reply)


@router.post("/synthesize", response_model=SynthesizeResponse)
async def synthesize_speech(
    body: SynthesizeRequest,
    gateway: GoogleSpeechGateway = Depends(get_speech_gateway),
    settings: Settings = Depends(get_settings),
):
    audio_content = await voice_chat.synthesize(gateway, settings, body)
    return SynthesizeResponse(audio_content=audio_content)


@router.post("/conversation", response_model=VoiceConversationResponse)
async def voice_conversation(
    body: VoiceConversationRequest,
    client: ResilientAnthropicClient = Depends(get_tutor_client),
    gateway: GoogleSpeechGateway = Depends(get_speech_gateway),
    settings: Settings = Depends(get_settings),
):
    """Speak to Polly: transcript, reply text, and optionally reply audio."""
    return await voice_chat.voice_conversation(client, gateway, settings, body)
