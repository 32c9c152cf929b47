# blog_api/server.py

from uvicorn import run

from blog_api.configs import settings


def main() -> None:
    """Serve the API with uvicorn using the configured host, port and workers."""
    run(
        "blog_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        workers=None if settings.ENVIRONMENT == "development" else settings.WORKERS,
        log_level=settings.LOG_LEVEL.lower(),
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
