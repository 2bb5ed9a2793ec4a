# users_api/api/routers/users.py
import re

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from users_api.data.database import get_session_factory
from users_api.domain.errors import StoreError, UserNotFoundError
from users_api.domain.schemas import MessageOut, UserCreate, UserRead, UserUpdate
from users_api.repos.user_repo import UserRepo
from users_api.services.user_service import UserService
from users_api.utils import settings
from users_api.utils.deadline import Deadline

router = APIRouter(prefix="/users", tags=["users"])

_USER_ID_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1

# ":path" - ID to cala reszta sciezki po /users/, wiec /users/1/2 i /users/ to 400
_USER_PATH = "/{user_id:path}"


def get_repo(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> UserRepo:
    return UserRepo(session_factory)


def get_service(repo: UserRepo = Depends(get_repo)) -> UserService:
    return UserService(repo)


def get_deadline(request: Request) -> Deadline:
    """Deadline ustawiony przez middleware przy odebraniu requestu."""
    deadline = getattr(request.state, "deadline", None)
    if deadline is None:
        deadline = Deadline(settings.REQUEST_TIMEOUT_SECONDS)
    return deadline


def parse_user_id(user_id: str) -> int:
    """Dziesietny int64 ze znakiem; wszystko inne to 400, nigdy 404."""
    if not _USER_ID_RE.fullmatch(user_id):
        raise HTTPException(status_code=400, detail="Invalid user ID")
    value = int(user_id)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise HTTPException(status_code=400, detail="Invalid user ID")
    return value


@router.get("", response_model=list[UserRead])
async def list_users(
    deadline: Deadline = Depends(get_deadline),
    svc: UserService = Depends(get_service),
):
    try:
        return await svc.list_users(deadline)
    except StoreError:
        raise HTTPException(status_code=500, detail="Could not get users")


@router.post("", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate,
    response: Response,
    deadline: Deadline = Depends(get_deadline),
    svc: UserService = Depends(get_service),
):
    try:
        user_id = await svc.create_user(payload, deadline)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=f"Could not create user: {e.detail}")
    response.headers["Location"] = f"{router.prefix}/{user_id}"
    return MessageOut(message="User created successfully")


@router.get(_USER_PATH, response_model=UserRead)
async def get_user(
    user_id: int = Depends(parse_user_id),
    deadline: Deadline = Depends(get_deadline),
    svc: UserService = Depends(get_service),
):
    try:
        return await svc.get_user(user_id, deadline)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except StoreError:
        raise HTTPException(status_code=500, detail="Could not get user")


@router.put(_USER_PATH, status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    payload: UserUpdate,
    user_id: int = Depends(parse_user_id),
    deadline: Deadline = Depends(get_deadline),
    svc: UserService = Depends(get_service),
):
    if payload.id is not None and payload.id != user_id:
        raise HTTPException(status_code=400, detail="User ID in body does not match path")
    try:
        await svc.update_user(user_id, payload, deadline)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except StoreError:
        raise HTTPException(status_code=500, detail="Could not update user")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(_USER_PATH, status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int = Depends(parse_user_id),
    deadline: Deadline = Depends(get_deadline),
    svc: UserService = Depends(get_service),
):
    try:
        await svc.delete_user(user_id, deadline)
    except UserNotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except StoreError:
        raise HTTPException(status_code=500, detail="Could not delete user")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Route bez listy metod lapie kazda inna metode (takze TRACE czy wlasne verby),
# wiec musza byc zarejestrowane po trasach GET/POST/PUT/DELETE.

async def users_method_not_allowed(request: Request):
    raise HTTPException(status_code=405, detail="Method not allowed")


async def user_method_not_allowed(request: Request):
    parse_user_id(request.path_params["user_id"])
    raise HTTPException(status_code=405, detail="Method not allowed")


router.add_route(router.prefix, users_method_not_allowed, include_in_schema=False)
router.add_route(router.prefix + _USER_PATH, user_method_not_allowed, include_in_schema=False)
