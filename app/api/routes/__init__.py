from fastapi import APIRouter

from . import health, sms

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(sms.router)
