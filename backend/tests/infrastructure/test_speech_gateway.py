"""GoogleSpeechGateway: request shape and error mapping, with SDK clients faked."""

from types import SimpleNamespace

import pytest
from google.api_core.exceptions import ServiceUnavailable
from google.cloud import speech, texttospeech

from chirpolly.core.domain_types import VoiceGender
from chirpolly.core.errors import SpeechAPIError
from chirpolly.infrastructure.speech_client import GoogleSpeechGateway


def _result(text):
    return SimpleNamespace(alternatives=[SimpleNamespace(transcript=text)])


class _FakeSTT:
    def __init__(self, results=None, error=None):
        self.results = results or []
        self.error = error
        self.config = None

    async def recognize(self, config, audio):
        self.config = config
        if self.error:
            raise self.error
        return SimpleNamespace(results=self.results)


class _FakeTTS:
    def __init__(self, error=None):
        self.error = error
        self.kwargs = None

    async def synthesize_speech(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        return SimpleNamespace(audio_content=b"ID3")


async def test_transcribe_joins_results_with_newlines():
    gateway = GoogleSpeechGateway()
    gateway._stt = _FakeSTT([_result("Bonjour"), _result("ça va?")])
    assert await gateway.transcribe(b"opus", "fr-FR") == "Bonjour\nça va?"
    assert gateway._stt.config.language_code == "fr-FR"
    assert gateway._stt.config.encoding == speech.RecognitionConfig.AudioEncoding.OGG_OPUS


async def test_transcribe_without_results_is_empty():
    gateway = GoogleSpeechGateway()
    gateway._stt = _FakeSTT([])
    assert await gateway.transcribe(b"opus", "en-US") == ""


async def test_transcribe_api_error_mapped():
    gateway = GoogleSpeechGateway()
    gateway._stt = _FakeSTT(error=ServiceUnavailable("down"))
    with pytest.raises(SpeechAPIError) as exc:
        await gateway.transcribe(b"opus", "en-US")
    assert exc.value.message.startswith("Failed to transcribe audio:")
    assert exc.value.http_status == 502


async def test_synthesize_uses_mp3_and_gender():
    gateway = GoogleSpeechGateway(speaking_rate=0.9)
    gateway._tts = _FakeTTS()
    audio = await gateway.synthesize("Hola", "es-ES", VoiceGender.FEMALE)
    assert audio == b"ID3"
    kwargs = gateway._tts.kwargs
    assert kwargs["voice"].ssml_gender == texttospeech.SsmlVoiceGender.FEMALE
    assert kwargs["audio_config"].audio_encoding == texttospeech.AudioEncoding.MP3
    assert kwargs["audio_config"].speaking_rate == pytest.approx(0.9)


async def test_synthesize_api_error_mapped():
    gateway = GoogleSpeechGateway()
    gateway._tts = _FakeTTS(error=ServiceUnavailable("down"))
    with pytest.raises(SpeechAPIError) as exc:
        await gateway.synthesize("Hola", "es-ES", VoiceGender.NEUTRAL)
    assert exc.value.message == "Failed to synthesize speech"
