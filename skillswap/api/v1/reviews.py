from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.database import get_db
from skillswap.repositories.review_repository import ReviewRepository
from skillswap.repositories.user_repository import UserRepository
from skillswap.schemas.review import ReviewCreate, ReviewResponse, ReviewWithAuthorResponse
from skillswap.auth import get_current_user
from skillswap.models.user import User

router = APIRouter()

@router.get("/users/{user_id}/reviews", response_model=List[ReviewWithAuthorResponse])
async def list_user_reviews(
    user_id: int,
    db: AsyncSession = Depends(get_db)
):
    review_repo = ReviewRepository(db)
    return await review_repo.list_for_target(user_id)

@router.post("/reviews", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    review_data: ReviewCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    user_repo = UserRepository(db)
    if not await user_repo.get_by_id(review_data.target_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    
    review_repo = ReviewRepository(db)
    return await review_repo.create(review_data, current_user.id)
