"""Run the API with uvicorn: ``python -m portfolio_api``."""
import uvicorn

from portfolio_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "portfolio_api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
