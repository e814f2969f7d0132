from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import joinedload

from skillswap.models.review import Review
from skillswap.schemas.review import ReviewCreate

class ReviewRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, review_data: ReviewCreate, author_id: int) -> Review:
        review = Review(author_id=author_id, **review_data.model_dump())
        self.db.add(review)
        await self.db.commit()
        await self.db.refresh(review)
        return review

    async def list_for_target(self, target_id: int) -> List[Review]:
        result = await self.db.execute(
            select(Review).options(
                joinedload(Review.author)
            ).where(Review.target_id == target_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
        )
        return list(result.scalars().all())
