"""Run the API with uvicorn: ``python -m account_service``."""

import uvicorn

from account_service.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "account_service.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    main()
