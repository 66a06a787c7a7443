"""Unit tests for rank calculation."""

import pytest

from nuoidev.domain.service import RANK_THRESHOLDS, rank_for
from nuoidev.domain.value import Rank


class TestRankFor:
    """Tests for rank_for."""

    @pytest.mark.parametrize(
        ("votes", "expected"),
        [
            (0, Rank.BRONZE),
            (19, Rank.BRONZE),
            (20, Rank.SILVER),
            (49, Rank.SILVER),
            (50, Rank.GOLD),
            (99, Rank.GOLD),
            (100, Rank.PLATINUM),
            (200, Rank.DIAMOND),
            (500, Rank.MASTER),
            (999, Rank.MASTER),
            (1000, Rank.LEGEND),
            (250_000, Rank.LEGEND),
        ],
    )
    def test_boundaries(self, votes, expected):
        """Each threshold starts its tier."""
        assert rank_for(votes) == expected

    def test_rank_never_decreases(self):
        """Rank order is monotonic in the vote count."""
        # Arrange
        order = [rank for _, rank in reversed(RANK_THRESHOLDS)]

        # Act
        positions = [order.index(rank_for(v)) for v in range(0, 1201)]

        # Assert
        assert positions == sorted(positions)

    def test_negative_votes_rejected(self):
        """A negative count is a programming error."""
        with pytest.raises(ValueError, match="cannot be negative"):
            rank_for(-1)
