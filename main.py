"""FastAPI application entry point for the India Flood Risk Simulator service.

The service is a stateless adapter over the pure risk model in
``flood_simulator.domain``: every request recomputes from its inputs and
nothing is stored between calls.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from api.v1.routes import api_router
from flood_simulator.config import settings
from flood_simulator.domain.errors import InvalidInput
from flood_simulator.utils.logging import get_logger
import argparse
import uvicorn

logger = get_logger(__name__)


async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    """Translate domain validation failures into 422 responses."""
    logger.warning("Rejected input on %s (%s): %s", request.url.path, exc.field, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc), "field": exc.field})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Mounts the API router at the /api/v1 prefix and registers the
    ``InvalidInput`` exception handler.

    Returns
    -------
    FastAPI
        Configured FastAPI application instance ready for deployment.
    """
    app = FastAPI(title=settings.APP_NAME)
    app.include_router(api_router, prefix="/api/v1")
    app.add_exception_handler(InvalidInput, invalid_input_handler)
    return app


app = create_app()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="India Flood Risk Simulator Service")
    parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    parser.add_argument("--port", type=int, default=8008, help="Bind port")

    args = parser.parse_args()
    uvicorn.run(app, host=args.host, port=args.port)
