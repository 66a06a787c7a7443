"""Voter identity resolution for API routes."""

from fastapi import HTTPException, status
from pydantic import ValidationError

from nuoidev.config import VotingSettings
from nuoidev.domain.service import JWTService
from nuoidev.domain.value import (
    AnonymousVoter,
    AuthenticatedVoter,
    VisitorToken,
    VoterIdentity,
)


def resolve_voter(
    jwt_service: JWTService,
    voting_settings: VotingSettings,
    auth_token: str | None,
    visitor_id: str | None,
) -> VoterIdentity | None:
    """Work out who is voting.

    A valid session token always wins. Otherwise the visitor token is used
    when anonymous voting is enabled.

    Args:
        jwt_service: JWT service for session verification
        voting_settings: Voting configuration
        auth_token: Session token from cookie
        visitor_id: Per-browser visitor token

    Returns:
        Voter identity, or None if the caller supplied none

    Raises:
        HTTPException: 401 if only a visitor token was given while anonymous
            voting is disabled, 400 if the visitor token is malformed
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id:
        return AuthenticatedVoter(user_id=user_id)

    if not visitor_id:
        return None

    if not voting_settings.allow_anonymous:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required to vote",
        )

    try:
        return AnonymousVoter(token=VisitorToken(visitor_id))
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid visitor id",
        )
