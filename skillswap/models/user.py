from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from .base import BaseModel

class User(BaseModel):
    __tablename__ = "users"
    
    username = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    bio = Column(Text, nullable=True)
    location = Column(String(100), nullable=True)
    availability = Column(String(100), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    
    skills = relationship("Skill", back_populates="user")
    sent_requests = relationship("SwapRequest", foreign_keys="SwapRequest.sender_id", back_populates="sender")
    received_requests = relationship("SwapRequest", foreign_keys="SwapRequest.receiver_id", back_populates="receiver")
    sent_messages = relationship("Message", foreign_keys="Message.sender_id", back_populates="sender")
    received_messages = relationship("Message", foreign_keys="Message.receiver_id", back_populates="receiver")
    reviews_written = relationship("Review", foreign_keys="Review.author_id", back_populates="author")
    reviews_received = relationship("Review", foreign_keys="Review.target_id", back_populates="target")
