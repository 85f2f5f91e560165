from fastapi import APIRouter

from app.api.v1 import deals, finance, health, market, news

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(deals.router, prefix="/deals", tags=["deals"])
api_router.include_router(market.router, prefix="/market", tags=["market"])
api_router.include_router(news.router, prefix="/news", tags=["news"])
api_router.include_router(finance.router, prefix="/finance", tags=["finance"])
