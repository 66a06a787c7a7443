"""Unit tests for voter identity value objects."""

from uuid import UUID

import pytest
from pydantic import TypeAdapter, ValidationError

from nuoidev.domain.value import (
    AnonymousVoter,
    AuthenticatedVoter,
    UserId,
    VisitorToken,
    VoterIdentity,
)


class TestVoterKeys:
    """Ledger keys never collide between voter kinds."""

    def test_anonymous_key(self):
        voter = AnonymousVoter(token=VisitorToken("  abc-123  "))

        assert voter.key == "anon:abc-123"

    def test_authenticated_key(self):
        user_id = UserId(UUID("11111111-2222-3333-4444-555555555555"))

        voter = AuthenticatedVoter(user_id=user_id)

        assert voter.key == "user:11111111-2222-3333-4444-555555555555"

    def test_kinds_do_not_collide(self):
        """A visitor token shaped like a user ID still gets its own key."""
        raw = "11111111-2222-3333-4444-555555555555"

        anon = AnonymousVoter(token=VisitorToken(raw))
        user = AuthenticatedVoter(user_id=UserId(UUID(raw)))

        assert anon.key != user.key


class TestVisitorToken:
    """Tests for VisitorToken validation."""

    @pytest.mark.parametrize("raw", ["", "   ", "x" * 129])
    def test_rejects_invalid(self, raw):
        with pytest.raises(ValidationError):
            VisitorToken(raw)

    def test_accepts_max_length(self):
        assert VisitorToken("x" * 128).root == "x" * 128


class TestVoterIdentityUnion:
    """The union is discriminated by ``kind``."""

    def test_parses_by_kind(self):
        adapter = TypeAdapter(VoterIdentity)

        voter = adapter.validate_python({"kind": "anonymous", "token": "abc"})

        assert isinstance(voter, AnonymousVoter)
        assert voter.key == "anon:abc"
