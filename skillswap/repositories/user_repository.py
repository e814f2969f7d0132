from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from skillswap.models.user import User
from skillswap.schemas.user import UserCreate, UserUpdate
from skillswap.auth import get_password_hash

class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user_data: UserCreate) -> User:
        fields = user_data.model_dump(exclude={"password"})
        db_user = User(**fields, hashed_password=get_password_hash(user_data.password))
        self.db.add(db_user)
        await self.db.commit()
        await self.db.refresh(db_user)
        return db_user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def update(self, user_id: int, user_data: UserUpdate) -> Optional[User]:
        db_user = await self.get_by_id(user_id)
        if not db_user:
            return None

        fields = user_data.model_dump(exclude_unset=True)
        # username and name are NOT NULL; an explicit null leaves them as they are
        for required in ("username", "name"):
            if required in fields and fields[required] is None:
                del fields[required]
        password = fields.pop("password", None)
        if password:
            db_user.hashed_password = get_password_hash(password)

        for field, value in fields.items():
            setattr(db_user, field, value)

        await self.db.commit()
        await self.db.refresh(db_user)
        return db_user

    async def exists_by_username(self, username: str) -> bool:
        return await self.get_by_username(username) is not None
