"""
User endpoints.

``POST /usuario`` registers a user keyed by its national identifier
and ``GET /usuario/{id}`` returns it.  Failures are raised as
``UserRegistryError`` subclasses and rendered as ``{"error": ...}``
by the handler registered in ``main``.
"""

from fastapi import APIRouter, Depends, status

from user_registry_api.app.api.deps import get_user_service
from user_registry_api.app.core.errors import DuplicateKeyError, UserNotFoundError
from user_registry_api.app.schemas.user import ErrorResponse, UserCreate, UserRead
from user_registry_api.app.services.user_service import UserService


router = APIRouter()


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Cria um novo usuário",
    responses={
        status.HTTP_201_CREATED: {"description": "Usuário criado com sucesso"},
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Usuário já existe"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Erro no servidor"},
    },
)
async def create_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a new user.

    Returns the stored fields unchanged.  A second request with the
    same ``id`` is rejected with 400 and leaves the stored record as
    it was.
    """
    if await service.exists(user.id):
        raise DuplicateKeyError()
    return await service.create_user(user)


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Obtém os dados de um usuário",
    responses={
        status.HTTP_200_OK: {"description": "Dados do usuário"},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Usuário não encontrado"},
    },
)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    user = await service.get_user(user_id)
    if user is None:
        raise UserNotFoundError()
    return user
