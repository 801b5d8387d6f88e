from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

# Import core components
from app.core.logging_config import setup_logging
from app.core.settings import settings
from app.middleware.logging import LoggingMiddleware

# Import route modules
from app.routes import health, quiz, share_images
from app.exceptions import QuizException
from app.store import redis_client

# Set up logging first
logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup logic
    logger.info("=" * 50)
    logger.info("🚀 Web3 Personality Quiz API starting up")
    logger.info(f"📁 Environment: {settings.environment}")
    logger.info(f"🌐 CORS origins: {settings.cors_origins}")
    redis_status = "✅ configured" if redis_client is not None else "❌ not configured (results will not be stored)"
    logger.info(f"🗄️  Redis: {redis_status}")
    logger.info(f"👤 Default user fid: {settings.default_user_fid}")
    logger.info("=" * 50)
    yield
    # Shutdown logic
    if redis_client is not None:
        redis_client.close()
    logger.info("🛑 Web3 Personality Quiz API shutting down gracefully")

app = FastAPI(
    title="Web3 Personality Quiz API",
    description="Personality quiz, leaderboard and share images for the mini-app",
    version="1.0.0",
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    lifespan=lifespan,
)

# Add middleware in correct order (last added = first executed)
app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_origins != ["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/health", tags=["Health"])
app.include_router(quiz.router)
app.include_router(share_images.router)

# Exception handlers
@app.exception_handler(QuizException)
async def quiz_exception_handler(request: Request, exc: QuizException):
    correlation_id = getattr(request.state, 'correlation_id', 'unknown')
    log = logger.warning if exc.status_code < 500 else logger.error
    log(f"[{correlation_id}] {type(exc).__name__} on {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "correlation_id": correlation_id}
    )

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    correlation_id = getattr(request.state, 'correlation_id', 'unknown')
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in errors
    ) or "Invalid request"
    logger.warning(f"[{correlation_id}] Validation error on {request.url.path}: {message}")
    return JSONResponse(
        status_code=400,
        content={"error": message, "correlation_id": correlation_id}
    )

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    correlation_id = getattr(request.state, 'correlation_id', 'unknown')
    logger.error(f"[{correlation_id}] Unhandled exception on {request.url.path}: {str(exc)}", exc_info=True)

    content = {"error": "Internal server error", "correlation_id": correlation_id}
    if settings.is_development:
        content["detail"] = str(exc)
        content["type"] = type(exc).__name__
    return JSONResponse(status_code=500, content=content)

# Root endpoint
@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Web3 Personality Quiz API",
        "version": "1.0.0",
        "environment": settings.environment,
        "docs_url": "/docs" if settings.docs_enabled else None,
        "health_check": "/health",
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info" if settings.is_development else "warning"
    )
