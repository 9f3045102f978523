"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roofcalc.api.routes import router
from roofcalc.errors import ValidationError


def create_app() -> FastAPI:
    app = FastAPI(
        title="Gable Roof Calculator",
        description="Gable roof geometry engine",
        version="0.1.0",
    )

    # CORS: allow the front-end dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def roof_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"field": exc.field, "detail": exc.message},
        )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
