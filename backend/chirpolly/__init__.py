"""ChirPolly application package: tutor marketplace, Polly voice tutor, social feed.

Invariants:
    - Package root contains no executable code (no import side effects)
"""
