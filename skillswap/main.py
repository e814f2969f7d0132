import logging
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from skillswap.config import settings
from skillswap.database import async_engine, close_redis, create_tables
from skillswap.logging_config import setup_logging

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    logger.info("%s %s started", settings.APP_NAME, settings.VERSION)
    yield
    await close_redis()
    await async_engine.dispose()
    logger.info("%s stopped", settings.APP_NAME)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    description="SkillSwap marketplace API",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected invalid input on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


from skillswap.api.v1 import auth, users, skills, requests, messages, reviews

app.include_router(auth.router, prefix="/api", tags=["auth"])
app.include_router(users.router, prefix="/api", tags=["users"])
app.include_router(skills.router, prefix="/api", tags=["skills"])
app.include_router(requests.router, prefix="/api", tags=["requests"])
app.include_router(messages.router, prefix="/api", tags=["messages"])
app.include_router(reviews.router, prefix="/api", tags=["reviews"])

@app.get("/")
async def root():
    return {"message": "SkillSwap API", "version": settings.VERSION}

@app.get("/health")
async def health():
    return {"status": "ok"}
