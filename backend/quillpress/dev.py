"""Run the API locally with auto-reload."""
import sys
import uvicorn

from quillpress.config import settings


def main():
    """Serve ``quillpress.main:app`` on the configured host and port."""
    uvicorn.run(
        "quillpress.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.app_env == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
