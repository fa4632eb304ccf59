from fastapi import APIRouter
from reportpager.api.v1.pager import router as pager_router

router = APIRouter(prefix="/api/v1")
router.include_router(pager_router)
