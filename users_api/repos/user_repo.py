import asyncio
from typing import Any, Awaitable, Callable, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from users_api.data.models.user import UserModel
from users_api.domain.errors import StoreError, UserNotFoundError
from users_api.utils.deadline import Deadline
from users_api.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class UserRepo:
    """
    Dostep do tabeli users.
    Kazda operacja to jedno zapytanie w osobnej sesji, ograniczone deadlinem requestu.
    Wynik: wartosc, UserNotFoundError albo StoreError.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def list_users(self, deadline: Deadline) -> list[UserModel]:
        return await self._run("list_users", deadline, self._list_users)

    async def get_user(self, user_id: int, deadline: Deadline) -> UserModel:
        return await self._run("get_user", deadline, self._get_user, user_id)

    async def create_user(self, name: str, email: str, deadline: Deadline) -> int:
        return await self._run("create_user", deadline, self._create_user, name, email)

    async def update_user_by_id(
        self, user_id: int, name: str, email: str, deadline: Deadline
    ) -> None:
        await self._run(
            "update_user_by_id", deadline, self._update_user_by_id, user_id, name, email
        )

    async def delete_user_by_id(self, user_id: int, deadline: Deadline) -> None:
        await self._run("delete_user_by_id", deadline, self._delete_user_by_id, user_id)

    # zapytania

    async def _list_users(self, db: AsyncSession) -> list[UserModel]:
        result = await db.execute(select(UserModel).order_by(UserModel.id))
        return list(result.scalars().all())

    async def _get_user(self, db: AsyncSession, user_id: int) -> UserModel:
        result = await db.execute(select(UserModel).where(UserModel.id == user_id))
        user = result.scalar_one_or_none()
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def _create_user(self, db: AsyncSession, name: str, email: str) -> int:
        user = UserModel(name=name, email=email)
        db.add(user)
        await db.commit()
        return user.id

    async def _update_user_by_id(
        self, db: AsyncSession, user_id: int, name: str, email: str
    ) -> None:
        result = await db.execute(
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(name=name, email=email)
        )
        await db.commit()
        # UPDATE bez pasujacego wiersza nie zglasza bledu
        if result.rowcount == 0:
            raise UserNotFoundError(user_id)

    async def _delete_user_by_id(self, db: AsyncSession, user_id: int) -> None:
        result = await db.execute(delete(UserModel).where(UserModel.id == user_id))
        await db.commit()
        if result.rowcount == 0:
            raise UserNotFoundError(user_id)

    # wspolna obsluga sesji, deadline i bledow

    async def _run(
        self,
        operation: str,
        deadline: Deadline,
        query: Callable[..., Awaitable[T]],
        *args: Any,
    ) -> T:
        if deadline.expired():
            logger.warning(f"{operation}: deadline expired before the query started")
            raise StoreError(operation, "request deadline exceeded")

        async def in_session() -> T:
            async with self.session_factory() as db:
                return await query(db, *args)

        try:
            # wait_for anuluje zapytanie, a wyjscie z sesji oddaje polaczenie do puli
            return await asyncio.wait_for(in_session(), timeout=deadline.remaining())
        except asyncio.TimeoutError:
            logger.warning(f"{operation}: cancelled after {deadline.timeout}s deadline")
            raise StoreError(operation, "request deadline exceeded") from None
        except IntegrityError as e:
            logger.error(f"{operation}: integrity error: {e.orig}")
            raise StoreError(operation, str(e.orig)) from e
        except SQLAlchemyError as e:
            logger.error(f"{operation}: database error: {e}")
            raise StoreError(operation, str(e)) from e
