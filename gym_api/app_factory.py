"""Entry point for uvicorn/gunicorn: ``uvicorn gym_api.app_factory:app``."""
from gym_api.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
