from sqlalchemy import Column, Integer, ForeignKey, Text
from sqlalchemy.orm import relationship
from .base import BaseModel

class Review(BaseModel):
    __tablename__ = "reviews"
    
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    target_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # No range constraint on rating
    rating = Column(Integer, nullable=False)
    feedback = Column(Text, nullable=False)
    
    author = relationship("User", foreign_keys=[author_id], back_populates="reviews_written")
    target = relationship("User", foreign_keys=[target_id], back_populates="reviews_received")
