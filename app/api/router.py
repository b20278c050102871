from fastapi import APIRouter
from app.api.http import health_router, blocks_router, cards_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(blocks_router)
api_router.include_router(cards_router)
