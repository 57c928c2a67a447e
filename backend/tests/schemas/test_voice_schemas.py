"""Voice request bodies: camelCase wire names and defaults.

Invariants:
    - voiceGender defaults to NEUTRAL; languageCode left unset (filled from settings)
    - Missing or null required input parses to None (rejected later with a fixed message)
"""

import pytest
from pydantic import ValidationError

from chirpolly.core.domain_types import VoiceGender
from chirpolly.schemas.voice import (
    SynthesizeRequest, SynthesizeResponse, TranscribeRequest, VoiceConversationResponse,
)


def test_transcribe_defaults():
    body = TranscribeRequest.model_validate({})
    assert body.audio_content is None
    assert body.language_code is None


def test_null_inputs_parse_as_missing():
    assert TranscribeRequest.model_validate({"audioContent": None}).audio_content is None
    assert SynthesizeRequest.model_validate({"text": None}).text is None


def test_transcribe_reads_camel_case():
    body = TranscribeRequest.model_validate({"audioContent": "AAAA", "languageCode": "fr-FR"})
    assert body.audio_content == "AAAA"
    assert body.language_code == "fr-FR"


def test_synthesize_default_gender_is_neutral():
    body = SynthesizeRequest.model_validate({"text": "Bonjour"})
    assert body.voice_gender == VoiceGender.NEUTRAL


def test_synthesize_rejects_unknown_gender():
    with pytest.raises(ValidationError):
        SynthesizeRequest.model_validate({"text": "Hi", "voiceGender": "ROBOT"})


def test_responses_serialize_camel_case():
    assert SynthesizeResponse(audio_content="QQ==").model_dump(by_alias=True) == {
        "audioContent": "QQ==",
    }
    dumped = VoiceConversationResponse(user_text="hi", ai_text="hello").model_dump(by_alias=True)
    assert dumped == {"userText": "hi", "aiText": "hello", "aiAudioContent": None}
