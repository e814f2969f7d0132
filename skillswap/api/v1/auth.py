import logging
from datetime import timedelta
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.database import get_db, get_redis
from skillswap.repositories.user_repository import UserRepository
from skillswap.schemas.user import UserCreate, UserResponse, Token, UserLogin
from skillswap.auth import (
    authenticate_user,
    create_access_token,
    get_current_user,
    get_token_payload,
    revoke_token
)
from skillswap.config import settings
from skillswap.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()

def issue_token(user: User) -> dict:
    expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    token = create_access_token(data={"sub": user.username}, expires_delta=expires)
    return {
        "access_token": token,
        "token_type": "bearer",
        "expires_in": settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        "user": user
    }

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(user_data: UserCreate, db: AsyncSession = Depends(get_db)):
    user_repo = UserRepository(db)
    
    if await user_repo.exists_by_username(user_data.username):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already exists")
    
    user = await user_repo.create(user_data)
    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user

@router.post("/login", response_model=Token)
async def login_user(user_data: UserLogin, db: AsyncSession = Depends(get_db)):
    user = await authenticate_user(db, user_data.username, user_data.password)
    if not user:
        logger.warning("Failed login for %s", user_data.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    
    return issue_token(user)

@router.post("/token", response_model=Token)
async def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends(), db: AsyncSession = Depends(get_db)):
    """OAuth2 password flow, used by the interactive API docs"""
    user = await authenticate_user(db, form_data.username, form_data.password)
    if not user:
        logger.warning("Failed login for %s", form_data.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    
    return issue_token(user)

@router.post("/logout")
async def logout_user(
    payload: dict = Depends(get_token_payload),
    redis_client=Depends(get_redis)
):
    await revoke_token(redis_client, payload)
    logger.info("Logged out %s", payload["sub"])
    return {"message": "Logged out"}

@router.get("/user", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    return current_user
