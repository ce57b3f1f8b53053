"""Run the API with uvicorn on the configured address (default 127.0.0.1:8080)."""

import uvicorn

from tienda.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("tienda.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
