# file: main.py

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routes.mail import router as mail_router
from routes.notification import router as notification_router
from services.container import Services, build_services
from utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, services: Optional[Services] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title="Sabor Académico Relay")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.include_router(notification_router, tags=["notifications"])
    app.include_router(mail_router, tags=["mail"])

    if services is not None:
        app.state.services = services

    @app.get("/")
    async def root():
        return {"message": "Sabor Académico relay is running"}

    @app.on_event("startup")
    async def startup_event():
        if getattr(app.state, "services", None) is None:
            app.state.services = build_services(settings)
            logger.info("Relay services initialized.")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
