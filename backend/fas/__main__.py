"""Run the API with uvicorn: ``python -m fas``."""

import uvicorn

from fas.config import settings


def main() -> None:
    uvicorn.run(
        "fas.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
