import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.database import get_db
from skillswap.repositories.swap_request_repository import SwapRequestRepository
from skillswap.repositories.skill_repository import SkillRepository
from skillswap.repositories.user_repository import UserRepository
from skillswap.schemas.swap_request import (
    SwapRequestCreate,
    SwapRequestResponse,
    SwapRequestStatusUpdate,
    SwapRequestWithDetailsResponse
)
from skillswap.auth import get_current_user
from skillswap.models.swap_request import SwapRequestStatus
from skillswap.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/requests", response_model=List[SwapRequestWithDetailsResponse])
async def list_requests(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Requests the current user sent or received"""
    request_repo = SwapRequestRepository(db)
    swap_requests = await request_repo.list_for_user(current_user.id)
    
    return [{
        "id": req.id,
        "sender_id": req.sender_id,
        "receiver_id": req.receiver_id,
        "skill_id": req.skill_id,
        "status": req.status,
        "message": req.message,
        "created_at": req.created_at,
        "skill": req.skill,
        "other_user": req.other_party(current_user.id)
    } for req in swap_requests]

@router.post("/requests", response_model=SwapRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_request(
    request_data: SwapRequestCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Propose a swap to another user"""
    if request_data.receiver_id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot send a swap request to yourself"
        )
    
    user_repo = UserRepository(db)
    if not await user_repo.get_by_id(request_data.receiver_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Receiver not found"
        )
    
    skill_repo = SkillRepository(db)
    if not await skill_repo.get_by_id(request_data.skill_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Skill not found"
        )
    
    request_repo = SwapRequestRepository(db)
    swap_request = await request_repo.create(request_data, current_user.id)
    logger.info(
        "Swap request %s created: %s -> %s for skill %s",
        swap_request.id, current_user.id, request_data.receiver_id, request_data.skill_id
    )
    return swap_request

@router.patch("/requests/{request_id}/status", response_model=SwapRequestResponse)
async def update_request_status(
    request_id: int,
    status_data: SwapRequestStatusUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Accept or reject a pending request (receiver only)"""
    request_repo = SwapRequestRepository(db)
    
    swap_request = await request_repo.get_by_id(request_id)
    if not swap_request:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Swap request not found"
        )
    
    if swap_request.receiver_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the receiver can respond to this request"
        )
    
    new_status = SwapRequestStatus(status_data.status)
    if not swap_request.can_transition_to(new_status):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Swap request is already {swap_request.status.value}"
        )
    
    updated = await request_repo.update_status(swap_request, new_status)
    logger.info("Swap request %s %s by user %s", request_id, new_status.value, current_user.id)
    return updated
