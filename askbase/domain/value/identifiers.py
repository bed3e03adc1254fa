"""Strongly typed identifiers for Askbase domain entities.

Identifiers keep the readable ``<prefix>-<n>`` form (``q-1``, ``ans-3``,
``tag-2``). NewType keeps the three kinds from being mixed up.
"""

from typing import NewType

QuestionId = NewType("QuestionId", str)
AnswerId = NewType("AnswerId", str)
TagId = NewType("TagId", str)

# Prefixes used when assigning new identifiers
QUESTION_ID_PREFIX = "q"
ANSWER_ID_PREFIX = "ans"
TAG_ID_PREFIX = "tag"
