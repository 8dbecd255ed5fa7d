from fastapi import APIRouter

from .dashboard import dashboard_router
from .health import health_router
from .transactions import transactions_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(transactions_router, tags=["Transactions"])
router.include_router(dashboard_router, tags=["Dashboard"])
