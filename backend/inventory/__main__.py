"""Run the API with uvicorn: `python -m inventory` or `inventory-server`."""

import uvicorn

from inventory.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("inventory.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
