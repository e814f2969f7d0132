from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, or_

from skillswap.models.message import Message
from skillswap.schemas.message import MessageCreate

class MessageRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, message_data: MessageCreate, sender_id: int) -> Message:
        message = Message(
            sender_id=sender_id,
            receiver_id=message_data.receiver_id,
            content=message_data.content
        )
        self.db.add(message)
        await self.db.commit()
        await self.db.refresh(message)
        return message

    def _between(self, user_id1: int, user_id2: int):
        return or_(
            and_(Message.sender_id == user_id1, Message.receiver_id == user_id2),
            and_(Message.sender_id == user_id2, Message.receiver_id == user_id1)
        )

    async def list_between(self, user_id1: int, user_id2: int) -> List[Message]:
        """Conversation between two users, oldest first.

        Messages created within the same clock tick keep insertion order
        through the secondary sort on ``id``.
        """
        result = await self.db.execute(
            select(Message)
            .where(self._between(user_id1, user_id2))
            .order_by(Message.created_at.asc(), Message.id.asc())
        )
        return list(result.scalars().all())

