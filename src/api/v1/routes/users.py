"""User registration route."""

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_account_service
from api.v1.schemas.user import TokenResponse, UserRegister
from core.rate_limit import WRITE_LIMIT, limiter
from domain.services.account_service import AccountService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    responses={409: {"description": "User already exists"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def register_user(
    request: Request,
    body: UserRegister,
    service: AccountService = Depends(get_account_service),
) -> TokenResponse:
    """Register a user and return an access token."""
    token = await service.register(body.name, body.email, body.password)
    return TokenResponse(token=token)
