"""User API routes."""

import logging
import time

from fastapi import APIRouter, Depends, Response, status

from user_api.config import Settings, get_settings
from user_api.exceptions import UserValidationError
from user_api.models.health import UserServiceHealth
from user_api.models.user import (
    MessageResponse,
    User,
    UserListResponse,
    UserMutationResponse,
    UserStats,
    ValidationErrorResponse,
)
from user_api.services import get_user_store
from user_api.services.user_store import UserStore
from user_api.services.validation import validate_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)

_VALIDATION_RESPONSES: dict = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}
_NOT_FOUND_RESPONSES: dict = {status.HTTP_404_NOT_FOUND: {"description": "User not found"}}


def _validate(user: User) -> None:
    violations = validate_user(user)
    if violations:
        logger.warning("Rejected user payload: %s", [v.model_dump() for v in violations])
        raise UserValidationError(violations)


@router.get("", response_model=UserListResponse)
@router.get("/", response_model=UserListResponse)
async def list_users(store: UserStore = Depends(get_user_store)) -> UserListResponse:
    users = store.list_users()
    return UserListResponse(users=users, total=len(users), active=sum(1 for user in users if user.active))


# Literal paths are registered before "/{user_id}" so they are matched first.


@router.get("/stats", response_model=UserStats)
async def user_stats(store: UserStore = Depends(get_user_store)) -> UserStats:
    return UserStats(
        total_users=store.count(),
        active_users=store.count_active(),
        average_name_length=store.average_name_length(),
    )


@router.get("/health", response_model=UserServiceHealth)
async def user_service_health(
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
) -> UserServiceHealth:
    """Health check of the user service.

    Returns:
        Fixed "healthy" status, service name, epoch-millisecond timestamp
        and the number of stored users
    """
    return UserServiceHealth(
        status="healthy",
        service=settings.app_name,
        timestamp=int(time.time() * 1000),
        total_users=store.count(),
    )


@router.get("/active", response_model=list[User])
async def list_active_users(store: UserStore = Depends(get_user_store)) -> list[User]:
    return store.list_active()


@router.get("/department/{department}", response_model=list[User])
async def users_by_department(department: str, store: UserStore = Depends(get_user_store)) -> list[User]:
    return store.filter_by_department(department)


@router.get("/{user_id}", response_model=User, responses=_NOT_FOUND_RESPONSES)
async def get_user(user_id: int, store: UserStore = Depends(get_user_store)):
    user = store.get(user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user


@router.post("", response_model=UserMutationResponse, responses=_VALIDATION_RESPONSES)
@router.post("/", response_model=UserMutationResponse, responses=_VALIDATION_RESPONSES)
async def create_user(user: User, store: UserStore = Depends(get_user_store)) -> UserMutationResponse:
    """Create a user.

    The payload is validated before anything is stored. An ``id`` in the
    payload is kept; otherwise the store assigns the next one.
    """
    _validate(user)
    created = store.create(user)
    return UserMutationResponse(user=created, message="User created successfully")


@router.put(
    "/{user_id}",
    response_model=UserMutationResponse,
    responses={**_VALIDATION_RESPONSES, **_NOT_FOUND_RESPONSES},
)
async def update_user(user_id: int, user: User, store: UserStore = Depends(get_user_store)):
    """Replace name, email, department and active of an existing user.

    Validation happens first, so an invalid payload for an unknown ID
    is answered with 400 rather than 404.
    """
    _validate(user)
    updated = store.update(user_id, user)
    if updated is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return UserMutationResponse(user=updated, message="User updated successfully")


@router.delete("/{user_id}", response_model=MessageResponse, responses=_NOT_FOUND_RESPONSES)
async def delete_user(user_id: int, store: UserStore = Depends(get_user_store)):
    if not store.delete(user_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return MessageResponse(message="User deleted successfully")
