"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from chirpolly.models.user import User  # noqa: F401
from chirpolly.models.tutor_profile import TutorProfile  # noqa: F401
from chirpolly.models.tutor_application import TutorApplication  # noqa: F401
from chirpolly.models.booking import Booking  # noqa: F401
from chirpolly.models.review import Review  # noqa: F401
from chirpolly.models.conversation import Conversation  # noqa: F401
from chirpolly.models.message import Message  # noqa: F401
from chirpolly.models.post import Post  # noqa: F401
from chirpolly.models.comment import Comment  # noqa: F401
from chirpolly.models.like import Like  # noqa: F401
from chirpolly.models.payout import Payout  # noqa: F401
from chirpolly.models.notification import Notification  # noqa: F401
from chirpolly.models.vocabulary_word import VocabularyWord  # noqa: F401
