"""
Command line entry point: python -m nursery / nursery-api
Runs the API with uvicorn using HOST, PORT and LOG_LEVEL from settings
"""
import uvicorn

from nursery.core.config import settings


def main() -> None:
    uvicorn.run(
        "nursery.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
