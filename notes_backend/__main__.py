"""Run the notes API with uvicorn: `python -m notes_backend`."""

import uvicorn

from notes_backend.config import settings


def main() -> None:
    uvicorn.run(
        "notes_backend.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
