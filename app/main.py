from fastapi import FastAPI
from app.core.config import get_settings
from app.core.errors import register_error_handlers
from app.core.lifespan import lifespan
from app.api.v1.routers.products import router as products_router
from app.api.v1.routers.preflight import router as preflight_router
from app.core.logging import configure_logging

from fastapi.middleware.cors import CORSMiddleware
import logging
import uvicorn

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

register_error_handlers(app)

# ------- CORS (any origin, fixed header/method lists) -------
# allow_credentials must stay False with the "*" origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=settings.cors_allowed_methods,
    allow_headers=settings.cors_allowed_headers,
)

# ------- Routes -------
app.include_router(products_router)          # GET/POST /products, PUT/DELETE /products/{id}
app.include_router(preflight_router)         # OPTIONS /*


def run():
    """HTTP listener: serve the app on HTTP_HOST:HTTP_PORT."""
    logging.getLogger(__name__).info("HTTP server starting on port %s", settings.HTTP_PORT)
    uvicorn.run(app, host=settings.HTTP_HOST, port=settings.HTTP_PORT, log_config=None)


if __name__ == "__main__":
    run()
