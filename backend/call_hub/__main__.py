import uvicorn

from call_hub.config.settings import settings


def main():
    uvicorn.run(
        "call_hub.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
