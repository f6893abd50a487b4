"""Profile API routes."""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import (
    get_account_service,
    get_github_service,
    get_profile_service,
)
from api.v1.schemas.common import AUTH_ERROR_RESPONSES, ErrorResponse, MessageResponse
from api.v1.schemas.profile import (
    EducationCreate,
    ExperienceCreate,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileOwnerResponse,
    ProfileResponse,
    ProfileUpsert,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.profile import Profile, ProfileWithOwner
from domain.services.account_service import AccountService
from domain.services.github_service import GitHubService
from domain.services.profile_service import ProfileFields, ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


def _to_response(profile: Profile) -> ProfileResponse:
    return ProfileResponse.model_validate(profile)


def _to_owner_response(item: ProfileWithOwner) -> ProfileResponse:
    response = _to_response(item.profile)
    response.user = ProfileOwnerResponse(
        id=item.profile.user_id,
        name=item.name,
        avatar=item.avatar,
    )
    return response


@router.get(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Get your profile",
    responses={**AUTH_ERROR_RESPONSES, 404: {"description": "There is no profile for this user"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the authenticated user's profile with their name and avatar."""
    item = await service.get_for_user(user.id)
    return ProfileDetailResponse(data=_to_owner_response(item))


@router.post(
    "",
    response_model=ProfileDetailResponse,
    summary="Create or update your profile",
    responses={422: {"description": "Status or skills missing"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """
    Create the profile, or merge the supplied fields into the existing one.

    Empty fields are ignored. `skills` is a comma-separated list.
    """
    profile = await service.upsert(user.id, ProfileFields(**body.model_dump()))
    return ProfileDetailResponse(data=_to_response(profile))


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List all profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get every profile with its owner's name and avatar. Public."""
    items = await service.list_all()
    return ProfileListResponse(data=[_to_owner_response(item) for item in items])


@router.get(
    "/user/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile by user ID",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_by_user(
    request: Request,
    user_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a user's profile. Public."""
    item = await service.get_for_user(user_id)
    return ProfileDetailResponse(data=_to_owner_response(item))


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete your account",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_account(
    request: Request,
    user: CurrentUser,
    service: AccountService = Depends(get_account_service),
) -> MessageResponse:
    """Delete your posts, your profile and your user account."""
    await service.delete_account(user.id)
    return MessageResponse(message="User deleted")


@router.put(
    "/experience",
    response_model=ProfileDetailResponse,
    summary="Add an experience entry",
    responses={
        404: {"description": "There is no profile for this user"},
        422: {"description": "Title, company or from date missing"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_experience(
    request: Request,
    body: ExperienceCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an experience entry to the top of your profile's list."""
    profile = await service.add_experience(
        user.id,
        title=body.title,
        company=body.company,
        from_date=body.from_date,
        location=body.location,
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    return ProfileDetailResponse(data=_to_response(profile))


@router.delete(
    "/experience/{experience_id}",
    response_model=ProfileDetailResponse,
    summary="Remove an experience entry",
    responses={404: {"description": "Profile or entry not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_experience(
    request: Request,
    experience_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an experience entry from your profile."""
    profile = await service.remove_experience(user.id, experience_id)
    return ProfileDetailResponse(data=_to_response(profile))


@router.put(
    "/education",
    response_model=ProfileDetailResponse,
    summary="Add an education entry",
    responses={
        404: {"description": "There is no profile for this user"},
        422: {"description": "School, degree, field of study or from date missing"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_education(
    request: Request,
    body: EducationCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an education entry to the top of your profile's list."""
    profile = await service.add_education(
        user.id,
        school=body.school,
        degree=body.degree,
        field_of_study=body.field_of_study,
        from_date=body.from_date,
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    return ProfileDetailResponse(data=_to_response(profile))


@router.delete(
    "/education/{education_id}",
    response_model=ProfileDetailResponse,
    summary="Remove an education entry",
    responses={404: {"description": "Profile or entry not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_education(
    request: Request,
    education_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an education entry from your profile."""
    profile = await service.remove_education(user.id, education_id)
    return ProfileDetailResponse(data=_to_response(profile))


@router.get(
    "/github/{username}",
    summary="List a GitHub user's repositories",
    responses={404: {"model": ErrorResponse, "description": "No Github profile found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_github_repos(
    request: Request,
    username: str,
    service: GitHubService = Depends(get_github_service),
) -> Any:
    """Return GitHub's repository listing for the username unchanged. Public."""
    return await service.get_repos(username)
