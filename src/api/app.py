from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from src.domain.errors import AuthServiceError
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    body = exc.to_body()
    logger.warning(f"Client error on {request.url.path}: {body['error']}")
    return JSONResponse(status_code=exc.status_code, content=body)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error on {request.url.path}: {exc.base_error.code}")
    return JSONResponse(
        status_code=exc.status_code, content=exc.to_body("Internal server error")
    )


async def handle_unmapped_auth_error(request: Request, exc: AuthServiceError):
    # A domain error no route translated is a server-side bug
    logger.exception(f"Unmapped auth error on {request.url.path}: {exc.error.code}")
    return await handle_server_error(request, ServerError(exc.error))


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="VPS Auth API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import admin, auth, health_check, sessions

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(sessions.router, tags=["Sessions"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(AuthServiceError, handle_unmapped_auth_error)

    return app
