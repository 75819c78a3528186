"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quillpress.config import settings
from quillpress.exceptions import QuillPressError, Unauthorized
from quillpress.models import ContentType

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title="Quill Press API",
    description="Backend API for Quill Press - articles, blogs, taxonomy and comments",
    version="0.1.0",
)

logger = logging.getLogger(__name__)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)


@app.exception_handler(QuillPressError)
async def handle_domain_error(request: Request, exc: QuillPressError) -> JSONResponse:
    """Render domain errors as ``{"error": message}``."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc) or exc.__class__.__name__},
        headers=headers,
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Quill Press API", "version": "0.1.0"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.on_event("startup")
def log_startup() -> None:
    logger.info("Quill Press API starting (env=%s)", settings.app_env)


# Import and include routers
from quillpress.routers import admin, comments, content, settings as settings_router, taxonomy

app.include_router(
    content.build_router(ContentType.ARTICLE), prefix="/api/articles", tags=["articles"]
)
app.include_router(
    content.build_router(ContentType.BLOG), prefix="/api/blogs", tags=["blogs"]
)
app.include_router(taxonomy.categories_router, prefix="/api/categories", tags=["categories"])
app.include_router(taxonomy.tags_router, prefix="/api/tags", tags=["tags"])
app.include_router(comments.router, prefix="/api/comments", tags=["comments"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
app.include_router(settings_router.router, prefix="/api", tags=["settings"])
