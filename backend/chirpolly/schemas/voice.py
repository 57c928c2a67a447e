"""Voice Schemas: request/response bodies for the Polly voice endpoints.

Invariants:
    - Wire names are camelCase (audioContent, languageCode, voiceGender)
    - Required inputs are optional here: missing, null, or "" all reach
      services/voice_chat.py, which rejects them with INVALID_ARGUMENT
    - languageCode left unset falls back to Settings.speech_default_language
"""

from pydantic import BaseModel, ConfigDict, Field

from chirpolly.core.domain_types import VoiceGender


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TranscribeRequest(_CamelModel):
    audio_content: str | None = Field(None, alias="audioContent")
    language_code: str | None = Field(None, alias="languageCode", max_length=20)


class TranscribeResponse(_CamelModel):
    transcript: str


class ChatRequest(_CamelModel):
    prompt: str | None = Field(None, max_length=10_000)


class ChatResponse(_CamelModel):
    reply: str


class SynthesizeRequest(_CamelModel):
    text: str | None = Field(None, max_length=5000)
    language_code: str | None = Field(None, alias="languageCode", max_length=20)
    voice_gender: VoiceGender = Field(VoiceGender.NEUTRAL, alias="voiceGender")


class SynthesizeResponse(_CamelModel):
    audio_content: str = Field(alias="audioContent")


class VoiceConversationRequest(_CamelModel):
    audio_content: str | None = Field(None, alias="audioContent")
    language_code: str | None = Field(None, alias="languageCode", max_length=20)
    enable_voice_response: bool = Field(True, alias="enableVoiceResponse")


class VoiceConversationResponse(_CamelModel):
    user_text: str = Field(alias="userText")
    ai_text: str = Field(alias="aiText")
    ai_audio_content: str | None = Field(None, alias="aiAudioContent")
