"""Rank tiers derived from vote counts."""

from nuoidev.domain.value import Rank

# Highest threshold first; the first satisfied tier wins.
RANK_THRESHOLDS: tuple[tuple[int, Rank], ...] = (
    (1000, Rank.LEGEND),
    (500, Rank.MASTER),
    (200, Rank.DIAMOND),
    (100, Rank.PLATINUM),
    (50, Rank.GOLD),
    (20, Rank.SILVER),
    (0, Rank.BRONZE),
)


def rank_for(votes: int) -> Rank:
    """Map a total vote count to its rank.

    Args:
        votes: Non-negative vote count

    Returns:
        The rank tier

    Raises:
        ValueError: If votes is negative
    """
    if votes < 0:
        raise ValueError(f"Vote count cannot be negative: {votes}")
    for threshold, rank in RANK_THRESHOLDS:
        if votes >= threshold:
            return rank
    return Rank.BRONZE
