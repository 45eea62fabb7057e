# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the care app, connects all the parts together and
# makes sure everything is ready to handle requests from the family dashboard.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: lifespan-managed database setup,
# middleware stack, repository wiring through dependency overrides, router registration
# and the exception handlers that turn application errors into ``{"error": message}``.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database
# - All module routers and repository implementations
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - tests (create_application)

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from app.api.v1 import API_TAGS
from app.api.v1.router import api_v1_router
from app.modules.care_recipients.domain.repositories.recipient_repository import RecipientRepository
from app.modules.care_recipients.infrastructure.database.recipient_repository_impl import RecipientRepositoryImpl
from app.modules.caregivers.domain.repositories.caregiver_repository import (
    CaregiverLinkRepository,
    CaregiverRepository,
)
from app.modules.caregivers.infrastructure.database.caregiver_link_repository_impl import CaregiverLinkRepositoryImpl
from app.modules.caregivers.infrastructure.database.caregiver_repository_impl import CaregiverRepositoryImpl
from app.modules.conversation_logs.domain.repositories.conversation_repository import ConversationRepository
from app.modules.conversation_logs.infrastructure.database.conversation_repository_impl import (
    ConversationRepositoryImpl,
)
from app.modules.devices.domain.repositories.device_repository import DeviceRepository
from app.modules.devices.infrastructure.database.device_repository_impl import DeviceRepositoryImpl
from app.modules.identity.domain.repositories.user_repository import UserRepository
from app.modules.identity.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.modules.reminders.domain.repositories.reminder_repository import ReminderRepository
from app.modules.reminders.infrastructure.database.reminder_repository_impl import ReminderRepositoryImpl
from app.shared.config.settings import get_settings
from app.shared.config.supabase import cleanup_supabase
from app.shared.core.actions import ActionResult, exception_to_action_result
from app.shared.core.exceptions import CareAppException, is_client_error
from app.shared.infrastructure.database import (
    close_database,
    init_database,
    initialize_sessions,
    session_manager,
)
from app.shared.utils.logging import setup_logging

settings = get_settings()

logger = setup_logging(
    log_level=settings.LOG_LEVEL,
    log_format=settings.LOG_FORMAT,
    log_file=settings.LOG_FILE,
)

# Every repository interface and the implementation FastAPI should build for it
REPOSITORY_BINDINGS = {
    UserRepository: UserRepositoryImpl,
    RecipientRepository: RecipientRepositoryImpl,
    CaregiverRepository: CaregiverRepositoryImpl,
    CaregiverLinkRepository: CaregiverLinkRepositoryImpl,
    ReminderRepository: ReminderRepositoryImpl,
    DeviceRepository: DeviceRepositoryImpl,
    ConversationRepository: ConversationRepositoryImpl,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the database pool and session factory on startup and closes them on shutdown.
    A session factory that is already initialized (for example by a test harness) is kept.
    """
    logger.info(f"{settings.APP_NAME} starting up...")

    owns_database = not session_manager.is_initialized()
    if owns_database:
        await init_database()
        logger.info("✅ Database connection initialized")
        await initialize_sessions()
        logger.info("✅ Session manager initialized")

    logger.info(f"✅ {settings.APP_NAME} startup complete")

    try:
        yield
    finally:
        logger.info(f"🔄 {settings.APP_NAME} shutting down...")
        if owns_database:
            try:
                await close_database()
                session_manager.reset()
                logger.info("✅ Database connections closed")
            except Exception as e:
                logger.error(f"❌ Shutdown error: {e}")
        await cleanup_supabase()


def create_application() -> FastAPI:
    """
    Application factory function.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        openapi_tags=API_TAGS,
        lifespan=lifespan,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    # Last added runs first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(ErrorHandlingMiddleware)

    # Whenever a service asks for a repository interface, build the SQLAlchemy implementation
    for interface, implementation in REPOSITORY_BINDINGS.items():
        app.dependency_overrides[interface] = implementation

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(CareAppException)
    async def care_app_exception_handler(request: Request, exc: CareAppException) -> JSONResponse:
        """Translate application exceptions into the uniform error result."""
        if is_client_error(exc):
            logger.info(f"{exc.error_code} on {request.url.path}: {exc.message}")
        else:
            logger.error(f"Request to {request.url.path} failed: {exc.to_dict()}")

        return JSONResponse(status_code=exc.status_code, content=exception_to_action_result(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(status_code=422, content=ActionResult.failed(message).to_response())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


app = create_application()


def main():
    """
    Run the application in development with ``python -m app.main``.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
