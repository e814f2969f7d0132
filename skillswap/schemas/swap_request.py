from pydantic import BaseModel
from typing import Optional, Literal
from datetime import datetime
from skillswap.models.swap_request import SwapRequestStatus
from skillswap.schemas.skill import SkillResponse
from skillswap.schemas.user import UserResponse

class SwapRequestCreate(BaseModel):
    receiver_id: int
    skill_id: int
    message: Optional[str] = None

class SwapRequestStatusUpdate(BaseModel):
    status: Literal["accepted", "rejected"]

class SwapRequestResponse(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    skill_id: int
    status: SwapRequestStatus
    message: Optional[str] = None
    created_at: datetime
    
    class Config:
        from_attributes = True

class SwapRequestWithDetailsResponse(SwapRequestResponse):
    skill: SkillResponse
    other_user: UserResponse
