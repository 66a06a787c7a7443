"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from nuoidev.application.usecase.profile import (
    CreateProfileRequest,
    CreateProfileUseCase,
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
)
from nuoidev.domain.error import ValidationError
from nuoidev.domain.service import JWTService

router = APIRouter(tags=["profiles"], route_class=DishkaRoute)


@router.post(
    "/profiles", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED
)
async def create_profile(
    request: CreateProfileRequest,
    create_profile_use_case: FromDishka[CreateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """Create a developer profile.

    When the caller is logged in the profile is linked to their account,
    which is what the self-vote check compares against.

    Raises:
        HTTPException: 400 if the name is blank
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    request = request.model_copy(
        update={"user_id": str(user_id) if user_id else None}
    )

    try:
        return await create_profile_use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/profiles/{profile_id}", response_model=ProfileResponse)
async def get_profile(
    profile_id: str,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileResponse:
    """Get a profile by ID.

    Raises:
        HTTPException: 404 if the profile does not exist
    """
    profile = await get_profile_use_case.execute(
        GetProfileRequest(profile_id=profile_id)
    )
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return profile


@router.get("/leaderboard", response_model=GetLeaderboardResponse)
async def get_leaderboard(
    get_leaderboard_use_case: FromDishka[GetLeaderboardUseCase],
    limit: int | None = Query(default=None, ge=1, le=200),
) -> GetLeaderboardResponse:
    """Top profiles by votes."""
    return await get_leaderboard_use_case.execute(GetLeaderboardRequest(limit=limit))
