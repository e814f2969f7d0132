from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from skillswap.models.skill import SkillType
from skillswap.schemas.user import UserResponse

class SkillBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str
    category: str = Field(..., min_length=1, max_length=50)
    type: SkillType

class SkillCreate(SkillBase):
    pass

class SkillFilter(BaseModel):
    category: Optional[str] = None
    search: Optional[str] = None
    type: Optional[SkillType] = None

class SkillResponse(SkillBase):
    id: int
    user_id: int
    created_at: datetime
    
    class Config:
        from_attributes = True

class SkillWithUserResponse(SkillResponse):
    user: UserResponse
