from fastapi import APIRouter
from .public import router as public_router
from .admin import router as admin_router

router = APIRouter()
router.include_router(public_router, tags=['public'])
router.include_router(admin_router, prefix='/admin', tags=['admin'])
