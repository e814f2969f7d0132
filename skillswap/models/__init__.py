from .base import Base
from .user import User
from .skill import Skill, SkillType
from .swap_request import SwapRequest, SwapRequestStatus
from .message import Message
from .review import Review

__all__ = [
    "Base",
    "User",
    "Skill",
    "SkillType",
    "SwapRequest",
    "SwapRequestStatus",
    "Message",
    "Review"
]
