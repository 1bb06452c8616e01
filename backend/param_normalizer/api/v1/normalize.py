from fastapi import APIRouter

from param_normalizer.domain.normalize import process_params
from param_normalizer.domain.schema import NormalizeRequest, ParamResult

router = APIRouter(tags=["normalize"])


@router.post("/normalize", response_model=ParamResult)
def normalize(req: NormalizeRequest) -> ParamResult:
    """Dry run: always 200, the outcome is in validated.status."""
    return process_params(req.params, req.param_schema)
