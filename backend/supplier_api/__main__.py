# backend/supplier_api/__main__.py
import uvicorn

from supplier_api.core.config import Settings
from supplier_api.main import create_app


def main() -> None:
    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
