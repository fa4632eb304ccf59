from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from reportpager.api.v1.router import router as v1_router
from reportpager.core.config import settings
from reportpager.utils.exceptions import InvalidPageNumberError


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_TITLE)
    app.include_router(v1_router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.exception_handler(InvalidPageNumberError)
    async def invalid_page_handler(_: Request, exc: InvalidPageNumberError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "requested": exc.requested, "max": exc.max},
        )

    return app


app = create_app()
