from pydantic import BaseModel
from datetime import datetime
from skillswap.schemas.user import UserResponse

class ReviewBase(BaseModel):
    rating: int
    feedback: str

class ReviewCreate(ReviewBase):
    target_id: int

class ReviewResponse(ReviewBase):
    id: int
    author_id: int
    target_id: int
    created_at: datetime
    
    class Config:
        from_attributes = True

class ReviewWithAuthorResponse(ReviewResponse):
    author: UserResponse
