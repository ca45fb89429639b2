import logging
from urllib.parse import quote

from fastapi import APIRouter
from fastapi import Depends
from fastapi import FastAPI
from fastapi import Request
from fastapi import Response
from fastapi import status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from pydantic import ValidationError

from userdir import __version__
from userdir.domain.ports.repositories.users import UserRepository
from userdir.infrastructure.adapters.rpc.codec import get_codec_for_content_type
from userdir.infrastructure.adapters.rpc.exceptions import RpcDecodeError
from userdir.infrastructure.adapters.rpc.types import RPC_MESSAGE_HEADER
from userdir.infrastructure.adapters.rpc.types import RPC_STATUS_HEADER
from userdir.infrastructure.adapters.rpc.types import SERVICE_NAME
from userdir.infrastructure.adapters.rpc.types import RpcMethod
from userdir.infrastructure.adapters.rpc.types import RpcStatus
from userdir.infrastructure.config.settings.app import AppSettings
from userdir.infrastructure.config.settings.app import app_settings
from userdir.infrastructure.entrypoints.rpc.dependencies import get_rpc_service
from userdir.infrastructure.entrypoints.rpc.schemas import HealthCheckResponse
from userdir.infrastructure.entrypoints.rpc.service import UserRpcService

logger = logging.getLogger(__name__)

router = APIRouter()


def _status_response(status_code: int, rpc_status: RpcStatus, message: str) -> Response:
    return Response(
        status_code=status_code,
        headers={
            RPC_STATUS_HEADER: str(rpc_status.value),
            # Header values must stay ASCII, whatever the locale of the message.
            RPC_MESSAGE_HEADER: quote(message),
        },
    )


@router.post(f"/{SERVICE_NAME}/{{method}}", name="rpc_call")
async def rpc_call(
    method: str,
    request: Request,
    service: UserRpcService = Depends(get_rpc_service),
) -> Response:
    """Decodes one RPC frame, dispatches it and encodes the answer in the same framing."""
    try:
        rpc_method = RpcMethod(method)
    except ValueError:
        logger.debug(f"Unknown RPC method: {method}")
        return _status_response(
            status.HTTP_404_NOT_FOUND,
            RpcStatus.UNIMPLEMENTED,
            f"Method {SERVICE_NAME}/{method} is not implemented",
        )

    request_cls, handler = service.handlers[rpc_method]

    try:
        codec = get_codec_for_content_type(request.headers.get("content-type"))
        message = request_cls.model_validate(codec.decode(await request.body()))
    except (RpcDecodeError, ValidationError) as e:
        logger.debug(f"Malformed {rpc_method} payload: {e}")
        return _status_response(status.HTTP_400_BAD_REQUEST, RpcStatus.INVALID_ARGUMENT, str(e))

    try:
        response = await handler(message)
    except Exception:
        # Fatal to this call only: the listener keeps serving the others.
        logger.exception(f"Unexpected error while handling {rpc_method}")
        return _status_response(status.HTTP_500_INTERNAL_SERVER_ERROR, RpcStatus.INTERNAL, "Internal error")

    return Response(
        content=codec.encode(response.model_dump(by_alias=True, mode="json")),
        media_type=codec.content_type,
        headers={RPC_STATUS_HEADER: str(RpcStatus.OK.value)},
    )


@router.get("/", name="rpc_banner", response_class=PlainTextResponse)
async def banner() -> str:
    return f"RPC server is running. POST /{SERVICE_NAME}/<Method> to communicate."


@router.get("/health", name="rpc_health_check")
async def health_check() -> HealthCheckResponse:
    return HealthCheckResponse(status="healthy", service=SERVICE_NAME)


def create_app(user_repository: UserRepository, settings: AppSettings = app_settings) -> FastAPI:
    """Builds the RPC listener around the given store.

    The store is injected rather than imported, so the RPC and REST listeners
    of one process observe and mutate the very same records.
    """
    app = FastAPI(
        title="Userdir RPC",
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
        expose_headers=[RPC_STATUS_HEADER, RPC_MESSAGE_HEADER],
    )
    app.include_router(router)

    return app
