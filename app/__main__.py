import uvicorn

from .config import configure_logging, load_settings


def main():
    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
