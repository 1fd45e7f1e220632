from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from contextlib import asynccontextmanager
import logging

from app import config
from app.api.routes import router, get_store
from app.crud.strings import StringStore
from app.exceptions import StringAnalyzerError
from app.schemas.strings import HealthResponse

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)


def create_app(store: StringStore = None) -> FastAPI:
    """Build the application around a store (a fresh, empty one by default)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"{config.APP_TITLE} {config.APP_VERSION} starting with an empty in-memory store")
        yield
        app.state.store.close()
        logger.info("String store released")

    app = FastAPI(
        title=config.APP_TITLE,
        description=config.APP_DESCRIPTION,
        version=config.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else StringStore()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, tags=["strings"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": config.APP_TITLE,
            "version": config.APP_VERSION,
            "endpoints": {
                "POST /strings": "Analyze and store a string",
                "GET /strings/{string_value}": "Get specific string analysis",
                "GET /strings": "Get all strings with optional filters",
                "GET /strings/filter-by-natural-language": "Filter using natural language",
                "DELETE /strings/{string_value}": "Delete a string",
                "GET /docs": "API documentation",
            }
        }

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request):
        """Health check endpoint"""
        return HealthResponse(status="healthy", total_strings=get_store(request).count())

    # Domain error handler
    @app.exception_handler(StringAnalyzerError)
    async def string_analyzer_error_handler(request: Request, exc: StringAnalyzerError):
        logger.debug(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message}
        )

    # Validation error handler
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = {}
        for error in exc.errors():
            field = error['loc'][-1] if error['loc'] else "request"
            errors[str(field)] = error['msg']

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Validation failed",
                "details": errors
            }
        )

    # HTTPException handler
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        if isinstance(exc.detail, dict) and 'error' in exc.detail:
            return JSONResponse(
                status_code=exc.status_code,
                content=exc.detail
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)}
        )

    # Generic error handler
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {str(exc)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error"
            }
        )

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT)
