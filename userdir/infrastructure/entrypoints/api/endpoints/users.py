from fastapi import APIRouter
from fastapi import Depends
from fastapi import Request
from fastapi import Response
from fastapi import status

from userdir.application.use_cases.user_create import user_create
from userdir.application.use_cases.user_delete import user_delete
from userdir.application.use_cases.user_get import user_get
from userdir.application.use_cases.user_list import user_list
from userdir.application.use_cases.user_update import user_update
from userdir.domain.mappers.user import user_to_payload
from userdir.domain.ports.repositories.users import UserRepository
from userdir.domain.schemas.error import ErrorResponse
from userdir.domain.schemas.user import UserCreate
from userdir.domain.schemas.user import UserPayload
from userdir.domain.schemas.user import UserUpdate
from userdir.infrastructure.entrypoints.api.dependencies import get_user_repository

# Business failures (UserDirectoryError) are rendered by the app level handler.
router = APIRouter(
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


@router.get("", name="user_list")
async def list_users(user_repository: UserRepository = Depends(get_user_repository)) -> list[UserPayload]:
    users = await user_list(user_repository)
    return [user_to_payload(user) for user in users]


@router.get("/{user_id}", name="user_get")
async def get_user(user_id: int, user_repository: UserRepository = Depends(get_user_repository)) -> UserPayload:
    user = await user_get(user_id, user_repository)
    return user_to_payload(user)


@router.post("", name="user_create", status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    request: Request,
    response: Response,
    user_repository: UserRepository = Depends(get_user_repository),
) -> UserPayload:
    user = await user_create(user_data=user_data, user_repository=user_repository)

    response.headers["Location"] = str(request.url_for("user_get", user_id=user.id))
    return user_to_payload(user)


@router.put("/{user_id}", name="user_update", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    user_repository: UserRepository = Depends(get_user_repository),
) -> None:
    await user_update(user_id=user_id, user_data=user_data, user_repository=user_repository)
    return None


@router.delete("/{user_id}", name="user_delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, user_repository: UserRepository = Depends(get_user_repository)) -> None:
    await user_delete(user_id, user_repository)
    return None
