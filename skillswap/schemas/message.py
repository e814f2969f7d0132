from pydantic import BaseModel, Field
from datetime import datetime

class MessageBase(BaseModel):
    content: str = Field(..., min_length=1)

class MessageCreate(MessageBase):
    receiver_id: int

class MessageResponse(MessageBase):
    id: int
    sender_id: int
    receiver_id: int
    created_at: datetime
    
    class Config:
        from_attributes = True
