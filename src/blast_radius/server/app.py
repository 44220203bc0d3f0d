"""Starlette ASGI application exposing the analyzer as JSON endpoints.

    GET  /health        liveness
    POST /analyze       {app, changedFiles, depth?, availableFiles?}
    POST /dependencies  {file, depth?}
    POST /find-files    {searchPaths, availableFiles?}

Validation failures return 400 ``{"error": "<field> is required"}``;
analysis failures return 500 ``{"error": "Analysis failed: ..."}``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from .. import __version__
from ..analyzer import BlastRadiusAnalyzer
from ..api import handle_analyze, handle_dependencies, handle_find_files
from ..exceptions import BlastRadiusError, RequestValidationError

logger = logging.getLogger(__name__)

SERVICE_NAME = "blast-radius-analyzer"


def create_app(analyzer: Optional[BlastRadiusAnalyzer] = None) -> Starlette:
    """Build the Starlette application around a shared *analyzer*.

    The analyzer holds only frozen configuration, so request handlers share
    it without locking.
    """
    analyzer = analyzer or BlastRadiusAnalyzer()

    def endpoint(handler: Callable[[Any, BlastRadiusAnalyzer], Any], name: str):
        async def handle(request: Request) -> JSONResponse:
            try:
                payload = await request.json()
            except ValueError:
                # Malformed JSON or a body that is not UTF-8
                return JSONResponse({"error": "body must be valid JSON"}, status_code=400)

            try:
                return JSONResponse(handler(payload, analyzer))
            except RequestValidationError as e:
                return JSONResponse(e.to_dict(), status_code=400)
            except BlastRadiusError as e:
                logger.error("%s failed: %s", name, e)
                return JSONResponse(e.to_dict(), status_code=500)

        return handle

    async def health(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok", "service": SERVICE_NAME, "version": __version__})

    routes = [
        Route("/health", health, methods=["GET"]),
        Route("/analyze", endpoint(handle_analyze, "analyze"), methods=["POST"]),
        Route("/dependencies", endpoint(handle_dependencies, "dependencies"), methods=["POST"]),
        Route("/find-files", endpoint(handle_find_files, "find-files"), methods=["POST"]),
    ]

    return Starlette(routes=routes)
