"""Entry point for ``uvicorn portfolio_api.app_factory:app``."""
from portfolio_api.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
