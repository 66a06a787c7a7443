"""Strongly typed identifiers for Nuôi DEV domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

ProfileId = NewType("ProfileId", UUID)
VoteId = NewType("VoteId", UUID)
UserId = NewType("UserId", UUID)
