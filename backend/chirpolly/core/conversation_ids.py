"""Conversation identity: one conversation per tutor/student pair.

Invariants:
    - id is "{tutor_id}_{student_id}", always in that order
"""

from chirpolly.core.domain_types import ConversationId


def generate_conversation_id(tutor_id: str, student_id: str) -> ConversationId:
    return ConversationId(f"{tutor_id}_{student_id}")


def other_participant(tutor_id: str, student_id: str, user_id: str) -> str:
    """The participant who is not `user_id`."""
    return student_id if user_id == tutor_id else tutor_id
