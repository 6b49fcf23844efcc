"""
Hair Integration Service - HTTP surface for web and kiosk clients.

Endpoints:
- GET  /health
- GET  /v1/styles
- POST /v1/hairstyle/generate
"""

import logging
import os
import time
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, File, Form, Header, HTTPException, Request, UploadFile
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from hair_integration.config import load_generation_config
from hair_integration.generation import (
    AssetEncoder,
    AssetLoadError,
    GeneratedImage,
    HairstyleClient,
    HairstyleGenerator,
    InFlightGuard,
    SessionState,
)
from hair_integration.styles import STYLE_OPTIONS, get_style

logger = logging.getLogger(__name__)

# Silence the default uvicorn access log in favour of CustomAccessLogMiddleware
uvicorn_access_logger = logging.getLogger("uvicorn.access")
uvicorn_access_logger.handlers = []
uvicorn_access_logger.propagate = False


class CustomAccessLogMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware that skips /health.
    """
    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.access_logger = logging.getLogger("hair_integration.access")
        self.access_logger.setLevel(logging.INFO)
        if not self.access_logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            handler.setFormatter(formatter)
            self.access_logger.addHandler(handler)

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time

        if request.url.path != "/health":
            client = f"{request.client.host}:{request.client.port}" if request.client else "-"
            self.access_logger.info(
                f'{client} - "{request.method} {request.url.path}" '
                f'{response.status_code} {process_time:.4f}s'
            )

        return response


class ResponsePresenter:
    """Collects orchestrator signals so they can be returned as JSON."""

    def __init__(self):
        self.loading = False
        self.image: Optional[GeneratedImage] = None
        self.error: Optional[str] = None

    async def show_loading(self, show: bool) -> None:
        self.loading = show

    async def show_result(self, image: GeneratedImage) -> None:
        self.image = image

    async def show_error(self, message: str) -> None:
        self.error = message


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = load_generation_config()
    client = HairstyleClient(
        base_url=config.proxy_base_url,
        endpoint=config.proxy_endpoint,
        timeout=config.request_timeout,
    )
    encoder = AssetEncoder(config.style_assets_dir, http_client=client.client)
    app.state.generator = HairstyleGenerator(client, encoder)
    logger.info(f"🚀 Generation proxy: {config.proxy_base_url}{config.proxy_endpoint}")
    try:
        yield
    finally:
        await client.close()


app = FastAPI(
    title="Hair Integration Service",
    version="1.0.0",
    lifespan=lifespan,
    middleware=[Middleware(CustomAccessLogMiddleware)],
)

# A web kiosk is one session: a single guard shared by all requests
generation_guard = InFlightGuard()


def get_generator(request: Request) -> HairstyleGenerator:
    return request.app.state.generator


def get_guard() -> InFlightGuard:
    return generation_guard


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


# ============================================================================
# Styles
# ============================================================================

@app.get("/v1/styles")
def list_styles() -> List[Dict[str, Any]]:
    return [
        {
            "id": style.id,
            "name": style.name,
            "description": style.description,
            "image": style.image,
        }
        for style in STYLE_OPTIONS
    ]


# ============================================================================
# Generation
# ============================================================================

@app.post("/v1/hairstyle/generate")
async def hairstyle_generate(
    style_id: int = Form(...),
    photo: UploadFile = File(...),
    x_access_code: Optional[str] = Header(None),
    generator: HairstyleGenerator = Depends(get_generator),
    guard: InFlightGuard = Depends(get_guard),
) -> Dict[str, Any]:
    """
    Generate a hairstyle simulation for the uploaded photo.
    """
    access_code = (x_access_code or "").strip()
    if not access_code:
        raise HTTPException(status_code=401, detail="Access code is required")

    style = get_style(style_id)
    if style is None:
        raise HTTPException(status_code=404, detail=f"Unknown style id {style_id}")

    session = SessionState(guard=guard)
    session.selection.select_style(style)
    try:
        session.selection.select_photo(await photo.read())
    except AssetLoadError as e:
        logger.error(f"❌ Invalid upload: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)

    logger.info(f"📸 Generation requested for style {style.name}")

    presenter = ResponsePresenter()
    result = await generator.generate(session, access_code, presenter)

    if result is None:
        return {"status": "ignored"}

    if result.ok:
        return {
            "status": "success",
            "result": {
                "mime_type": result.image.mime_type,
                "data_uri": result.image.data_uri,
            },
        }

    return {
        "status": "error",
        "error_type": result.error.error_type,
        "message": result.message,
    }


# ============================================================================
# Main Entry Point
# ============================================================================

if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger.info("Starting hair integration service")
    port_str = os.getenv("SERVICE_PORT") or "9000"
    try:
        port = int(port_str)
    except ValueError:
        logger.error(f"Invalid port '{port_str}', using default 9000.")
        port = 9000

    import uvicorn
    uvicorn.run("hair_integration.service:app", host="0.0.0.0", port=port)
