from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, or_
from sqlalchemy.orm import joinedload

from skillswap.models.skill import Skill, SkillType
from skillswap.schemas.skill import SkillCreate

class SkillRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, skill_data: SkillCreate, user_id: int) -> Skill:
        """Create a skill owned by ``user_id``"""
        skill = Skill(user_id=user_id, **skill_data.model_dump())
        self.db.add(skill)
        await self.db.commit()
        await self.db.refresh(skill)
        return skill

    async def get_by_id(self, skill_id: int) -> Optional[Skill]:
        result = await self.db.execute(select(Skill).where(Skill.id == skill_id))
        return result.scalar_one_or_none()

    async def list_skills(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        skill_type: Optional[SkillType] = None
    ) -> List[Skill]:
        """Skills with their owners; every supplied filter must hold"""
        conditions = []
        if category:
            conditions.append(Skill.category == category)
        if skill_type:
            conditions.append(Skill.type == skill_type)
        if search:
            # % and _ in the term match literally
            conditions.append(or_(
                Skill.title.icontains(search, autoescape=True),
                Skill.description.icontains(search, autoescape=True)
            ))

        query = select(Skill).options(joinedload(Skill.user)).order_by(Skill.id.asc())
        if conditions:
            query = query.where(and_(*conditions))

        result = await self.db.execute(query)
        return list(result.scalars().all())
