from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.database import get_db
from skillswap.repositories.skill_repository import SkillRepository
from skillswap.schemas.skill import SkillCreate, SkillFilter, SkillResponse, SkillWithUserResponse
from skillswap.auth import get_current_user
from skillswap.models.user import User

router = APIRouter()

@router.get("/skills", response_model=List[SkillWithUserResponse])
async def list_skills(
    filters: SkillFilter = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """Browse skills, optionally narrowed by category, type and a search term"""
    skill_repo = SkillRepository(db)
    return await skill_repo.list_skills(
        category=filters.category,
        search=filters.search,
        skill_type=filters.type
    )

@router.post("/skills", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def create_skill(
    skill_data: SkillCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    skill_repo = SkillRepository(db)
    return await skill_repo.create(skill_data, current_user.id)
