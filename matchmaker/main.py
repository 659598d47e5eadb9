import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Load env before settings are read
if "PYTEST_CURRENT_TEST" not in os.environ:
    load_dotenv()

from matchmaker.core.config import settings, validate_config
from matchmaker.core.logging import configure_logging
from matchmaker.core.middleware.request_id import RequestIdMiddleware
from matchmaker.core.errors import (
    AppError,
    app_error_handler,
    http_error_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from matchmaker.api import health, matchmaker as matchmaker_api, personas
from matchmaker.features.integrations.provider import NullPhotoTransformer

configure_logging(settings.ENV, settings.LOG_LEVEL)
validate_config(strict=getattr(settings, "CONFIG_STRICT", False))


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("matchmaker")
    logger.info("Starting Monster Matchmaker...")
    try:
        yield
    finally:
        logging.getLogger("matchmaker").info("Stopping Monster Matchmaker...")


app = FastAPI(title="Monster Matchmaker", lifespan=lifespan)

# No transformation service by default; deployments swap in a real provider.
app.state.photo_transformer = NullPhotoTransformer()

# Middlewares
app.add_middleware(RequestIdMiddleware)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(StarletteHTTPException, http_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["Content-Type", "x-request-id"],
    expose_headers=["x-request-id"],
)

app.include_router(matchmaker_api.router, tags=["matchmaker"])
app.include_router(personas.router, tags=["personas"])
app.include_router(health.root_router, tags=["health"])
