from users_api.domain.schemas import UserCreate, UserRead, UserUpdate
from users_api.repos.user_repo import UserRepo
from users_api.utils.deadline import Deadline
from users_api.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    """
    Use case'y dla domeny user.
    Query (list, get) tylko odczyt, commands (create, update, delete) modyfikuja stan.
    Bledy repo (UserNotFoundError, StoreError) przechodza dalej do routera.
    """

    def __init__(self, repo: UserRepo):
        self.repo = repo

    # query - odczyt
    async def list_users(self, deadline: Deadline) -> list[UserRead]:
        users = await self.repo.list_users(deadline)
        return [UserRead.model_validate(u) for u in users]

    async def get_user(self, user_id: int, deadline: Deadline) -> UserRead:
        user = await self.repo.get_user(user_id, deadline)
        return UserRead.model_validate(user)

    # commands
    async def create_user(self, payload: UserCreate, deadline: Deadline) -> int:
        user_id = await self.repo.create_user(payload.name, payload.email, deadline)
        logger.info(f"User {user_id} created")
        return user_id

    async def update_user(self, user_id: int, payload: UserUpdate, deadline: Deadline) -> None:
        await self.repo.update_user_by_id(user_id, payload.name, payload.email, deadline)
        logger.info(f"User {user_id} updated")

    async def delete_user(self, user_id: int, deadline: Deadline) -> None:
        await self.repo.delete_user_by_id(user_id, deadline)
        logger.info(f"User {user_id} deleted")
