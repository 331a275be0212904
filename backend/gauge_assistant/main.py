"""
Gauge.io Query Assistant - FastAPI Application
==============================================
Main entry point configuring:
- uvloop for high-performance async (non-Windows)
- Application lifespan to set up logging and load the knowledge base
- CORS, error envelope handlers, and the /api query router
- Health check endpoints (/, /health)
"""

import sys
import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gauge_assistant.config import settings
from gauge_assistant.api import query
from gauge_assistant.exceptions import AssistantError, GENERIC_ERROR_MESSAGE
from gauge_assistant.logger import setup_logger
from gauge_assistant.models.schemas import HealthResponse
from gauge_assistant.services.query_service import QueryService

logger = logging.getLogger(__name__)

# Use uvloop for better async performance (Linux/macOS)
if sys.platform != "win32":
    try:
        import uvloop
        asyncio.set_event_loop_policy(uvloop.EventLoopPolicy())
        logger.info("✅ Using uvloop for enhanced async performance")
    except ImportError:
        logger.warning("⚠️ uvloop not available, using default event loop")
else:
    logger.info("ℹ️ Running on Windows - using default event loop (uvloop not supported)")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - On startup: configure logging and build the query service, which loads
      the knowledge base. A missing GROQ_API_KEY is only logged; it fails
      lazily on the first request that needs generation.
    - On shutdown: logs a shutdown message.
    """
    setup_logger(
        "gauge_assistant",
        level="DEBUG" if settings.debug_mode else settings.log_level,
        log_dir=settings.log_dir
    )
    logger.info("🚀 Starting Gauge.io Query Assistant...")

    service = query.get_query_service()
    logger.info(f"✅ Knowledge base loaded: {service.knowledge_base.source} ({len(service.knowledge_base)} chars)")

    if not service.llm.is_configured:
        logger.warning("⚠️ GROQ_API_KEY not set - generated answers will fail until it is configured")

    yield  # Application runs here

    logger.info("👋 Shutting down Gauge.io Query Assistant...")


app = FastAPI(
    title="Gauge.io Query Assistant API",
    description="Guardrailed, knowledge-grounded assistant for Gauge.io visitors",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, message: str, details: str = None) -> JSONResponse:
    content = {"error": message}
    if details is not None and settings.is_development:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(AssistantError)
async def assistant_error_handler(request: Request, exc: AssistantError):
    """Translate AssistantError subclasses to the {error, details?} envelope"""
    if exc.status_code >= 500:
        logger.error(f"Error processing {request.method} {request.url.path}: {exc}")
        return _error_response(exc.status_code, exc.public_message, str(exc))
    return _error_response(exc.status_code, exc.public_message)


@app.exception_handler(StarletteHTTPException)
async def starlette_http_error_handler(request: Request, exc: StarletteHTTPException):
    """Routing 405s for methods without a route use the same envelope as the query endpoint"""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return _error_response(exc.status_code, "Method not allowed")
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Last resort: unexpected failures get the same generic 500 envelope"""
    logger.exception(f"Unhandled error processing {request.method} {request.url.path}")
    return _error_response(500, GENERIC_ERROR_MESSAGE, str(exc))


app.include_router(query.router, prefix="/api", tags=["Query"])


@app.get("/")
async def root():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "Gauge.io Query Assistant",
        "version": "1.0.0"
    }


@app.get("/health", response_model=HealthResponse)
async def health_check(service: QueryService = Depends(query.get_query_service)):
    """Detailed health check"""
    return HealthResponse(
        status="healthy",
        llm_model=service.llm.model,
        generation_configured=service.llm.is_configured,
        knowledge_base_source=service.knowledge_base.source,
        knowledge_base_chars=len(service.knowledge_base)
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    import uvicorn
    uvicorn.run(
        "gauge_assistant.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
