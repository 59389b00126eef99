"""Account Routes — signup, login, edit-profile, change-password, get-user.

Invariants:
    - Routes parse the raw JSON body themselves: malformed JSON is an unexpected
      failure (500 at the boundary), a non-object body is a shape error (400)
    - {raw_user_id:path} captures everything after the prefix; the handler keeps
      only the last segment, so "/api/user/" and "/api/user/abc" are 400s, not 404s
    - No business logic here — AccountHandlers owns ordering and messages
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from account_service.api.dependencies import get_account_handlers
from account_service.schemas.user import (
    LoginRequest,
    MessageResponse,
    PasswordChangeRequest,
    ProfileUpdateRequest,
    SignupRequest,
    UserResponse,
)
from account_service.services.account_handlers import AccountHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["accounts"])


@router.post(
    "/signup", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    request: Request,
    handlers: AccountHandlers = Depends(get_account_handlers),
):
    """Create an account."""
    body = SignupRequest.model_validate(await request.json())
    return await handlers.signup(body)


@router.post("/login", response_model=UserResponse)
async def login(
    request: Request,
    handlers: AccountHandlers = Depends(get_account_handlers),
):
    """Check email + password and return the user. Issues no token."""
    body = LoginRequest.model_validate(await request.json())
    return await handlers.login(body)


@router.post("/edit-profile/{raw_user_id:path}", response_model=UserResponse)
async def edit_profile(
    raw_user_id: str,
    request: Request,
    handlers: AccountHandlers = Depends(get_account_handlers),
):
    """Partial update of name, email, mobileno and/or profilepic."""
    body = ProfileUpdateRequest.model_validate(await request.json())
    return await handlers.edit_profile(raw_user_id, body)


@router.post(
    "/change-password/{raw_user_id:path}", response_model=MessageResponse,
)
async def change_password(
    raw_user_id: str,
    request: Request,
    handlers: AccountHandlers = Depends(get_account_handlers),
):
    body = PasswordChangeRequest.model_validate(await request.json())
    return await handlers.change_password(raw_user_id, body)


@router.get("/user/{raw_user_id:path}", response_model=UserResponse)
async def get_user(
    raw_user_id: str,
    handlers: AccountHandlers = Depends(get_account_handlers),
):
    return await handlers.get_user(raw_user_id)
