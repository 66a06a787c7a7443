"""Domain services."""

from .base import Service
from .clock import Clock, utc_day
from .jwt_service import JWTService
from .profile_service import ProfileService
from .rank_calculator import RANK_THRESHOLDS, rank_for
from .vote_service import VoteReceipt, VoteService

__all__ = [
    "Clock",
    "JWTService",
    "ProfileService",
    "RANK_THRESHOLDS",
    "Service",
    "VoteReceipt",
    "VoteService",
    "rank_for",
    "utc_day",
]
