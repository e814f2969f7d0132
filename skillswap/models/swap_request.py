from sqlalchemy import Column, Text, Enum, Integer, ForeignKey
from sqlalchemy.orm import relationship
from enum import Enum as PyEnum
from .base import BaseModel

class SwapRequestStatus(str, PyEnum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

TERMINAL_STATUSES = {SwapRequestStatus.ACCEPTED, SwapRequestStatus.REJECTED}

class SwapRequest(BaseModel):
    __tablename__ = "swap_requests"
    
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    skill_id = Column(Integer, ForeignKey("skills.id"), nullable=False, index=True)
    status = Column(
        Enum(SwapRequestStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=SwapRequestStatus.PENDING,
    )
    message = Column(Text, nullable=True)
    
    sender = relationship("User", foreign_keys=[sender_id], back_populates="sent_requests")
    receiver = relationship("User", foreign_keys=[receiver_id], back_populates="received_requests")
    skill = relationship("Skill", back_populates="swap_requests")

    def can_transition_to(self, status: SwapRequestStatus) -> bool:
        """Only a pending request may move, and only to a terminal status."""
        return self.status == SwapRequestStatus.PENDING and status in TERMINAL_STATUSES

    def other_party(self, user_id: int):
        """The counterpart of ``user_id`` in this request."""
        return self.receiver if self.sender_id == user_id else self.sender
