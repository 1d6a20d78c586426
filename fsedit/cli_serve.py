import uvicorn

from fsedit.config.settings import settings


def main(argv: list[str] | None = None) -> int:
    # Run FastAPI app from fsedit.main:app
    uvicorn.run(
        "fsedit.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )  # type: ignore[arg-type]
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
