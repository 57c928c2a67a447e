"""Conversation id tests."""

from chirpolly.core.conversation_ids import generate_conversation_id, other_participant


def test_id_is_tutor_then_student():
    assert generate_conversation_id("tutor-1", "student-9") == "tutor-1_student-9"


def test_id_is_stable_for_the_same_pair():
    assert generate_conversation_id("a", "b") == generate_conversation_id("a", "b")
    assert generate_conversation_id("a", "b") != generate_conversation_id("b", "a")


def test_other_participant():
    assert other_participant("tutor-1", "student-9", "tutor-1") == "student-9"
    assert other_participant("tutor-1", "student-9", "student-9") == "tutor-1"
