"""HTTP surface of the relay.

One JSON route plus static asset serving; no templating.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from ..config import CHAT_ROUTE
from ..errors import InvalidInput, UpstreamError
from .service import RelayService

logger = logging.getLogger(__name__)


def create_app(service: RelayService, static_dir: Path | None = None) -> FastAPI:
    """Create the relay application.

    Args:
        service: Relay that answers chat requests
        static_dir: Directory of client assets served at ``/`` (skipped if missing)

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await service.close()

    app = FastAPI(title="tutorchat relay", lifespan=lifespan)
    app.state.relay = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post(CHAT_ROUTE)
    async def chat(request: Request) -> JSONResponse:
        try:
            payload = await request.json()
        except ValueError:
            payload = None
        conversation = payload.get("conversation") if isinstance(payload, dict) else None

        try:
            result = await service.generate_reply(conversation)
        except InvalidInput as exc:
            return JSONResponse(status_code=400, content={"error": str(exc)})
        except UpstreamError as exc:
            return JSONResponse(status_code=500, content={"error": str(exc)})

        return JSONResponse(content={"result": result})

    if static_dir is not None:
        if static_dir.is_dir():
            app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
        else:
            logger.info("Static directory %s not found, serving the API only", static_dir)

    return app
