from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.database import get_db
from skillswap.repositories.message_repository import MessageRepository
from skillswap.repositories.user_repository import UserRepository
from skillswap.schemas.message import MessageResponse, MessageCreate
from skillswap.auth import get_current_user
from skillswap.models.user import User

router = APIRouter()

@router.get("/messages/{user_id}", response_model=List[MessageResponse])
async def get_conversation(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Every message exchanged with ``user_id``, oldest first.

    Clients poll this endpoint to pick up new messages.
    """
    message_repo = MessageRepository(db)
    return await message_repo.list_between(current_user.id, user_id)

@router.post("/messages", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    message_data: MessageCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    user_repo = UserRepository(db)
    if not await user_repo.get_by_id(message_data.receiver_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Receiver not found"
        )
    
    message_repo = MessageRepository(db)
    return await message_repo.create(message_data, current_user.id)
