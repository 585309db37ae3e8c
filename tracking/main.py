from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator
from shared.constants import Environment
from tracking.api.v1.dependencies import get_analytics_recorder
from tracking.api.v1.router import api_router
from tracking.core.config import settings
from tracking.startup import initialize_application


@asynccontextmanager
async def lifespan(app: FastAPI):
    initialize_application()
    try:
        yield
    finally:
        # Only flush a producer that a request actually created.
        if get_analytics_recorder.cache_info().currsize:
            get_analytics_recorder().flush()


def create_app() -> FastAPI:
    """Build the tracking API; interactive docs are off in production."""
    show_docs = not Environment.is_production(settings.app_environment)
    app = FastAPI(
        title="Product Event Tracking API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if show_docs else None,
        redoc_url=None,
        openapi_url="/openapi.json" if show_docs else None,
    )

    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        excluded_handlers=["/docs", "/openapi.json", "/metrics"],
        inprogress_name="tracking_inprogress",
        inprogress_labels=True,
    )
    instrumentator.instrument(app).expose(app)

    app.include_router(api_router, prefix="/v1")
    return app


app = create_app()
