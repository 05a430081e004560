"""Run the gateway with uvicorn: ``python -m cheer_api``."""

import uvicorn

from cheer_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("cheer_api.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
