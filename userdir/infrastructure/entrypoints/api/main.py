import logging

from fastapi import Depends
from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from userdir import __version__
from userdir.domain.exceptions import UserDirectoryError
from userdir.domain.ports.repositories.users import UserRepository
from userdir.domain.schemas.error import ErrorResponse
from userdir.domain.types import ErrorKind
from userdir.infrastructure.config.settings.app import AppSettings
from userdir.infrastructure.config.settings.app import app_settings
from userdir.infrastructure.entrypoints.api.dependencies import get_user_repository
from userdir.infrastructure.entrypoints.api.endpoints.users import router as user_router
from userdir.infrastructure.entrypoints.api.schemas import HealthCheckResponse

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


async def user_directory_error_handler(request: Request, exc: UserDirectoryError) -> JSONResponse:
    logger.debug(f"{request.method} {request.url.path} rejected: {exc}")
    content = ErrorResponse(detail=exc.render(request.app.state.locale), error_kind=exc.error_kind)

    return JSONResponse(
        status_code=ERROR_STATUS_CODES[exc.error_kind],
        content=content.model_dump(by_alias=True, mode="json"),
    )


async def health_check(user_repository: UserRepository = Depends(get_user_repository)) -> HealthCheckResponse:
    """Health check endpoint to verify the application and its store."""
    return HealthCheckResponse(status="healthy", users=await user_repository.count())


def create_app(user_repository: UserRepository, settings: AppSettings = app_settings) -> FastAPI:
    """Builds the REST listener around the given store.

    Not-found and validation failures are turned into 404 and 400 responses
    here, once for every route.
    """
    app = FastAPI(
        title="Userdir API",
        version=__version__,
        debug=settings.DEBUG,
    )
    app.state.user_repository = user_repository
    app.state.locale = settings.LOCALE

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )
    app.add_exception_handler(UserDirectoryError, user_directory_error_handler)

    app.include_router(user_router, prefix=f"{settings.API_PREFIX}/users", tags=["users"])
    app.add_api_route("/health", health_check, methods=["GET"], name="health_check", tags=["health"])

    return app
