"""Language detection tests for post content.

Tests cover:
    - Long text in common languages detected with its ISO code
    - Short or empty text returns None
    - Deterministic results (same input -> same output)
"""

from chirpolly.core.detect_language import detect_language_code


def test_detects_english():
    text = (
        "I practised ordering coffee today and the barista understood "
        "everything I said without asking me to repeat it."
    )
    assert detect_language_code(text) == "en"


def test_detects_french():
    text = (
        "Aujourd'hui j'ai commandé un café en français et le serveur a "
        "compris tout ce que je disais sans me demander de répéter."
    )
    assert detect_language_code(text) == "fr"


def test_detects_spanish():
    text = (
        "Hoy practiqué pedir un café en español y el camarero entendió "
        "todo lo que dije sin pedirme que lo repitiera."
    )
    assert detect_language_code(text) == "es"


def test_short_text_returns_none():
    assert detect_language_code("Bonjour!") is None


def test_empty_text_returns_none():
    assert detect_language_code("") is None
    assert detect_language_code(None) is None


def test_detection_is_deterministic():
    text = (
        "Ich habe heute zum ersten Mal ein ganzes Gespräch auf Deutsch "
        "geführt und war sehr stolz auf mich."
    )
    assert detect_language_code(text) == detect_language_code(text)
