from fastapi import APIRouter

from .health import health_router
from .payment_methods import payment_method_router
from .reports import report_router
from .transactions import transaction_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(transaction_router, tags=["Transactions"])
router.include_router(payment_method_router, tags=["Payment Methods"])
router.include_router(report_router, tags=["Reports"])
