from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.routes import api_router
from app.core.config import Settings, get_settings
from app.services.dispatch_service import BulkDispatcher
from app.services.sms_service import SmsSender, build_sms_sender


def create_app(settings: Settings | None = None, sender: SmsSender | None = None) -> FastAPI:
    settings = settings or get_settings()
    sender = sender or build_sms_sender(settings)

    app = FastAPI(title=settings.app_name, version="0.1.0")
    app.state.settings = settings
    app.state.sms_sender = sender
    app.state.dispatcher = BulkDispatcher(sender, max_concurrency=settings.sms_max_concurrency)

    app.add_exception_handler(RequestValidationError, _invalid_request_handler)
    app.include_router(api_router)
    return app


async def _invalid_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON and schema mismatches are both reported as 400.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )
