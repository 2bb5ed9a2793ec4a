# users_api/api/__init__.py
from fastapi import APIRouter
from users_api.api.routers import health, users

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(users.router)
