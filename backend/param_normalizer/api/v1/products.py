from typing import Any, Dict

from fastapi import APIRouter, Depends

from param_normalizer.api.middleware import param_normalizer

router = APIRouter(tags=["products"])

PRODUCT_SCHEMA = {
    "name": {"type": "string", "required": True},
    "price": {"type": "number", "required": True},
    "in_stock": {"type": "boolean", "required": False},
    "tags": {"type": "array", "required": False},
    "attributes": {"type": "object", "required": False},
}


@router.post("/products")
def create_product(
    body: Dict[str, Any] = Depends(param_normalizer(PRODUCT_SCHEMA)),
) -> Dict[str, Any]:
    return {"product": body}
