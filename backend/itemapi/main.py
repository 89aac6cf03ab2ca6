from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from itemapi.config import APP_VERSION
from itemapi.routes.items import router as items_router
from itemapi.routes.items import validation_error_response
from itemapi.schemas import HealthResponse
from itemapi.storage import ItemStore
from itemapi.validation import collect_request_errors


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return validation_error_response(collect_request_errors(exc.errors()))


def create_app(store: Optional[ItemStore] = None) -> FastAPI:
    app = FastAPI(title="Item API", version=APP_VERSION)
    app.state.store = store if store is not None else ItemStore()
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(items_router)

    @app.get("/api/health", response_model=HealthResponse)
    async def health(request: Request):
        return {
            "status": "ok",
            "version": APP_VERSION,
            "items": len(request.app.state.store),
        }

    return app


app = create_app()
