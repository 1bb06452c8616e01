from fastapi import APIRouter

from param_normalizer.api.v1.normalize import router as normalize_router
from param_normalizer.api.v1.products import router as products_router

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


router.include_router(normalize_router)
router.include_router(products_router)
