from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_
from sqlalchemy.orm import joinedload

from skillswap.models.swap_request import SwapRequest, SwapRequestStatus
from skillswap.schemas.swap_request import SwapRequestCreate

class SwapRequestRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, request_data: SwapRequestCreate, sender_id: int) -> SwapRequest:
        """New requests always start out pending"""
        swap_request = SwapRequest(
            sender_id=sender_id,
            receiver_id=request_data.receiver_id,
            skill_id=request_data.skill_id,
            message=request_data.message,
            status=SwapRequestStatus.PENDING
        )
        self.db.add(swap_request)
        await self.db.commit()
        await self.db.refresh(swap_request)
        return swap_request

    async def get_by_id(self, request_id: int) -> Optional[SwapRequest]:
        result = await self.db.execute(
            select(SwapRequest).where(SwapRequest.id == request_id)
        )
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: int) -> List[SwapRequest]:
        """Requests the user sent or received, with skill and both parties loaded"""
        result = await self.db.execute(
            select(SwapRequest).options(
                joinedload(SwapRequest.skill),
                joinedload(SwapRequest.sender),
                joinedload(SwapRequest.receiver)
            ).where(
                or_(SwapRequest.sender_id == user_id, SwapRequest.receiver_id == user_id)
            ).order_by(SwapRequest.created_at.desc(), SwapRequest.id.desc())
        )
        return list(result.scalars().all())

    async def update_status(self, swap_request: SwapRequest, status: SwapRequestStatus) -> SwapRequest:
        swap_request.status = status
        await self.db.commit()
        await self.db.refresh(swap_request)
        return swap_request
