"""
Responder - FastAPI app that echoes a status code back to the caller
"""
import re
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from tintlog import LoggerRegistry

INTEGER_PATTERN = re.compile(r'-?\d+')


def create_app(registry: Optional[LoggerRegistry] = None) -> FastAPI:
    """
    Build the responder app

    Args:
        registry: Logger registry used for request logging (default: a new
            registry writing to stderr)

    Returns:
        FastAPI application
    """
    app = FastAPI(title="Responder", description="Echoes the requested status code")
    app.state.registry = registry if registry is not None else LoggerRegistry()
    logger = app.state.registry.logger_for(app.title)

    def reject(request: Request, detail: str) -> PlainTextResponse:
        logger.warn(f"{request.method} {request.url.path} -> 400 ({detail})")
        return PlainTextResponse(detail, status_code=400)

    @app.get('/code/{code}')
    async def echo_code(code: str, request: Request):
        """
        Respond with the requested status code and an empty body.

        Any non-negative integer is echoed. Codes outside 100-599 pass through
        as-is; HTTP servers such as uvicorn answer those with a 500.
        """
        if not INTEGER_PATTERN.fullmatch(code):
            return reject(request, "code is not an integer")

        status = int(code)
        if status < 0:
            return reject(request, "code must be greater than zero")

        logger.info(f"{request.method} {request.url.path} -> {status}")
        return Response(status_code=status)

    @app.get('/code')
    @app.get('/code/')
    async def missing_code(request: Request):
        """Reject requests without a code"""
        return reject(request, "code is missing")

    return app
