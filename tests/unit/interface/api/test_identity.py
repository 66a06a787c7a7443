"""Unit tests for voter identity resolution."""

from uuid import uuid4

import pytest
from fastapi import HTTPException

from nuoidev.config import AuthSettings, VotingSettings
from nuoidev.domain.service import JWTService
from nuoidev.domain.value import AnonymousVoter, AuthenticatedVoter, UserId
from nuoidev.interface.api.identity import resolve_voter


@pytest.fixture
def jwt_service():
    settings = AuthSettings(jwt_secret="identity-test-secret-long-enough-for-hs256")
    return JWTService(auth_settings=settings)


class TestResolveVoter:
    """Tests for resolve_voter."""

    def test_valid_session_wins_over_visitor_id(self, jwt_service):
        # Arrange
        user_id = UserId(uuid4())
        token = jwt_service.create_token(user_id, "teo")

        # Act
        voter = resolve_voter(jwt_service, VotingSettings(), token, "visitor-1")

        # Assert
        assert isinstance(voter, AuthenticatedVoter)
        assert voter.user_id == user_id

    def test_visitor_id_used_without_session(self, jwt_service):
        voter = resolve_voter(jwt_service, VotingSettings(), None, "visitor-1")

        assert isinstance(voter, AnonymousVoter)
        assert voter.key == "anon:visitor-1"

    def test_invalid_session_falls_back_to_visitor(self, jwt_service):
        voter = resolve_voter(jwt_service, VotingSettings(), "garbage", "visitor-1")

        assert isinstance(voter, AnonymousVoter)

    def test_no_identity(self, jwt_service):
        assert resolve_voter(jwt_service, VotingSettings(), None, None) is None

    def test_anonymous_disabled(self, jwt_service):
        settings = VotingSettings(allow_anonymous=False)

        with pytest.raises(HTTPException) as exc_info:
            resolve_voter(jwt_service, settings, None, "visitor-1")

        assert exc_info.value.status_code == 401

    def test_blank_visitor_id_rejected(self, jwt_service):
        with pytest.raises(HTTPException) as exc_info:
            resolve_voter(jwt_service, VotingSettings(), None, "   ")

        assert exc_info.value.status_code == 400
