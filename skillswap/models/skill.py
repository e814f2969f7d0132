from sqlalchemy import Column, String, Text, Enum, Integer, ForeignKey
from sqlalchemy.orm import relationship
from enum import Enum as PyEnum
from .base import BaseModel

class SkillType(str, PyEnum):
    TEACH = "teach"
    LEARN = "learn"

class Skill(BaseModel):
    __tablename__ = "skills"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(50), nullable=False, index=True)  # Tech, Design, Language, Music
    type = Column(Enum(SkillType, values_callable=lambda e: [m.value for m in e]), nullable=False, index=True)
    
    user = relationship("User", back_populates="skills")
    swap_requests = relationship("SwapRequest", back_populates="skill")
