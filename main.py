# main.py

from uvicorn import run

from wpblog.configs import settings


def main() -> None:
    run(
        "wpblog.main:app",
        host="127.0.0.1",
        port=8000,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
