"""Authentication routes: current user and login."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_account_service
from api.v1.schemas.user import LoginRequest, TokenResponse, UserDetailResponse, UserResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.account_service import AccountService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get(
    "",
    response_model=UserDetailResponse,
    summary="Get the authenticated user",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_authenticated_user(
    request: Request,
    user: CurrentUser,
    service: AccountService = Depends(get_account_service),
) -> UserDetailResponse:
    """Get the user the bearer token belongs to."""
    account = await service.get_user(user.id)
    return UserDetailResponse(data=UserResponse.model_validate(account))


@router.post(
    "",
    response_model=TokenResponse,
    summary="Log in",
    responses={400: {"description": "Invalid Credentials"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: LoginRequest,
    service: AccountService = Depends(get_account_service),
) -> TokenResponse:
    """Exchange email and password for an access token."""
    token = await service.authenticate(body.email, body.password)
    return TokenResponse(token=token)
