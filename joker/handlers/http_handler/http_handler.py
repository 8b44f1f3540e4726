"""HTTP handlers - FastAPI routes for the content endpoint and health check."""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from joker.config import Settings
from joker.constants import ALLOWED_HEADERS, ALLOWED_METHODS
from joker.services.content_service import ContentService

logger = logging.getLogger(__name__)

# Common methods are routed to the handler; the rest reach the 405 exception handler
ROUTED_METHODS = ["GET", "OPTIONS", "POST", "PUT", "PATCH", "DELETE", "HEAD"]


def setup_routes(app: FastAPI) -> None:
    """Register HTTP routes on the FastAPI app."""

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405 and request.url.path == "/":
            return PlainTextResponse("Method not allowed", status_code=405)
        return await http_exception_handler(request, exc)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.api_route("/", methods=ROUTED_METHODS)
    async def content(request: Request):
        settings: Settings = request.app.state.workflow_data["settings"]
        origin = settings.cors_allow_origin

        if request.method == "OPTIONS":
            return Response(
                status_code=204,
                headers={
                    "Access-Control-Allow-Origin": origin,
                    "Access-Control-Allow-Methods": ALLOWED_METHODS,
                    "Access-Control-Allow-Headers": ALLOWED_HEADERS,
                },
            )

        if request.method != "GET":
            return PlainTextResponse("Method not allowed", status_code=405)

        content_service: ContentService = request.app.state.workflow_data["content_service"]

        try:
            result = await content_service.select_content()
            return JSONResponse(
                content=result.to_dict(),
                headers={"Access-Control-Allow-Origin": origin},
            )
        except Exception:
            logger.exception("Unhandled error while serving content")
            return JSONResponse(
                content={"error": "Internal server error"},
                status_code=500,
                headers={"Access-Control-Allow-Origin": origin},
            )
