"""
Authentication Handler

    POST /api/auth/register   → 201 {user, token}, welcome e-mail queued
    POST /api/auth/login      → 200 {user, token}
    GET  /api/auth/me         → 200 {user}

The e-mail is enqueued as a background task after the response is sent,
so a queue outage never fails a registration.
"""

from fastapi import APIRouter, BackgroundTasks, Depends, status

from gamevault.api.dependencies.auth import CurrentUser
from gamevault.api.dependencies.resources import Tasks
from gamevault.api.dependencies.services import get_auth_service
from gamevault.shared.schemas.user import (
    AuthResponse,
    MeResponse,
    UserCreate,
    UserLogin,
    UserResponse,
)
from gamevault.shared.services.auth_service import AuthService


router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserCreate,
    background_tasks: BackgroundTasks,
    task_queue: Tasks,
    auth_service: AuthService = Depends(get_auth_service),
):
    """400 when the email or the username is already taken."""
    user, token = await auth_service.register_user(
        email=user_data.email,
        username=user_data.username,
        password=user_data.password,
    )

    background_tasks.add_task(task_queue.send_welcome_email, user.email, user.username)

    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """401 "Invalid credentials" for an unknown email and for a wrong password alike."""
    user, token = await auth_service.login_user(
        email=credentials.email,
        password=credentials.password,
    )
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.get("/me", response_model=MeResponse)
async def get_me(
    current_user: CurrentUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Return the authenticated user's profile."""
    user = await auth_service.get_user(current_user.user_id)
    return MeResponse(user=UserResponse.model_validate(user))
