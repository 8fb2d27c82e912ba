"""FastAPI application factory."""

from fastapi import FastAPI

from daily_diet.api.snacks import router as snacks_router
from daily_diet.api.users import router as users_router
from daily_diet.app_logging import configure_logging
from daily_diet.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI(title="Daily Diet")
    app.state.container = container

    app.include_router(users_router)
    app.include_router(snacks_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
