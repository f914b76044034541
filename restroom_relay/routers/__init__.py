# restroom_relay/routers/__init__.py

from fastapi import APIRouter

from . import relay_router, setting_router, command_log_router, toilet_router

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(relay_router.router)
api_router.include_router(setting_router.router)
api_router.include_router(command_log_router.router)
api_router.include_router(toilet_router.router)
