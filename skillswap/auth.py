import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.config import settings
from skillswap.database import get_db, get_redis
from skillswap.models.user import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/token", auto_error=False)

REVOKED_TOKEN_PREFIX = "revoked_token:"


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Signed JWT carrying ``sub``, ``jti`` and ``exp`` claims."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire, "jti": uuid.uuid4().hex})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def authenticate_user(db: AsyncSession, username: str, password: str) -> Optional[User]:
    user = await get_user_by_username(db, username)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


async def revoke_token(redis_client, payload: dict) -> None:
    """Remember a token's ``jti`` until the token would have expired anyway."""
    ttl = int(payload["exp"] - datetime.now(timezone.utc).timestamp())
    if ttl > 0:
        await redis_client.set(f"{REVOKED_TOKEN_PREFIX}{payload['jti']}", "1", ex=ttl)


async def is_token_revoked(redis_client, jti: str) -> bool:
    return bool(await redis_client.exists(f"{REVOKED_TOKEN_PREFIX}{jti}"))


def _credentials_exception(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_token_payload(
    token: Optional[str] = Depends(oauth2_scheme),
    redis_client=Depends(get_redis),
) -> dict:
    if not token:
        raise _credentials_exception("Not authenticated")
    try:
        payload = decode_access_token(token)
    except JWTError:
        raise _credentials_exception("Invalid or expired token")

    if payload.get("sub") is None or payload.get("jti") is None:
        raise _credentials_exception("Invalid token")
    if await is_token_revoked(redis_client, payload["jti"]):
        logger.info("Rejected revoked token for %s", payload["sub"])
        raise _credentials_exception("Token has been revoked")
    return payload


async def get_current_user(
    payload: dict = Depends(get_token_payload),
    db: AsyncSession = Depends(get_db),
) -> User:
    user = await get_user_by_username(db, payload["sub"])
    if user is None:
        raise _credentials_exception("User not found")
    return user
