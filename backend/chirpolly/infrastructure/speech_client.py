"""Google Speech Gateway: Cloud Speech-to-Text and Text-to-Speech behind one class.

Invariants:
    - Works on raw bytes; base64 lives at the API boundary (services/voice_chat.py)
    - Recognition: OGG_OPUS, automatic punctuation, results joined with "\n"
    - No recognition results -> "" (not an error)
    - Synthesis: MP3, configured speaking rate and pitch
    - GoogleAPIError mapped to SpeechAPIError; nothing retried here

Design Decisions:
    - SDK clients created lazily on first use: importing the app needs no credentials
"""

import logging

from google.api_core.exceptions import GoogleAPIError
from google.cloud import speech
from google.cloud import texttospeech

from chirpolly.core.domain_types import VoiceGender
from chirpolly.core.errors import SpeechAPIError

logger = logging.getLogger(__name__)


class GoogleSpeechGateway:
    """Async wrapper over Google Cloud speech clients."""

    def __init__(
        self,
        recognition_model: str = "default",
        speaking_rate: float = 1.0,
        pitch: float = 0.0,
    ):
        self.recognition_model = recognition_model
        self.speaking_rate = speaking_rate
        self.pitch = pitch
        self._stt: speech.SpeechAsyncClient | None = None
        self._tts: texttospeech.TextToSpeechAsyncClient | None = None

    @property
    def stt(self) -> speech.SpeechAsyncClient:
        if self._stt is None:
            self._stt = speech.SpeechAsyncClient()
        return self._stt

    @property
    def tts(self) -> texttospeech.TextToSpeechAsyncClient:
        if self._tts is None:
            self._tts = texttospeech.TextToSpeechAsyncClient()
        return self._tts

    async def transcribe(self, audio: bytes, language_code: str) -> str:
        """Recognize speech in an Opus-encoded clip."""
        config = speech.RecognitionConfig(
            encoding=speech.RecognitionConfig.AudioEncoding.OGG_OPUS,
            language_code=language_code,
            enable_automatic_punctuation=True,
            model=self.recognition_model,
        )
        try:
            response = await self.stt.recognize(
                config=config,
                audio=speech.RecognitionAudio(content=audio),
            )
        except GoogleAPIError as e:
            logger.error(
                f"Speech-to-Text failed: {e}",
                extra={"language_code": language_code, "audio_bytes": len(audio)},
            )
            raise SpeechAPIError(f"Failed to transcribe audio: {e}", "transcribe")

        if not response.results:
            logger.warning("No transcription results returned")
            return ""
        return "\n".join(
            result.alternatives[0].transcript if result.alternatives else ""
            for result in response.results
        )

    async def synthesize(
        self, text: str, language_code: str, voice_gender: VoiceGender,
    ) -> bytes:
        """Render `text` to MP3 audio."""
        try:
            response = await self.tts.synthesize_speech(
                input=texttospeech.SynthesisInput(text=text),
                voice=texttospeech.VoiceSelectionParams(
                    language_code=language_code,
                    ssml_gender=texttospeech.SsmlVoiceGender[voice_gender.value],
                ),
                audio_config=texttospeech.AudioConfig(
                    audio_encoding=texttospeech.AudioEncoding.MP3,
                    speaking_rate=self.speaking_rate,
                    pitch=self.pitch,
                ),
            )
        except GoogleAPIError as e:
            logger.error(
                f"Text-to-Speech failed: {e}",
                extra={"language_code": language_code},
            )
            raise SpeechAPIError("Failed to synthesize speech", "synthesize")
        return response.audio_content
