from __future__ import annotations

from fastapi import Request

from app.core.config import Settings
from app.services.dispatch_service import BulkDispatcher
from app.services.sms_service import SmsSender


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_sms_sender(request: Request) -> SmsSender:
    return request.app.state.sms_sender


def get_dispatcher(request: Request) -> BulkDispatcher:
    return request.app.state.dispatcher
