from fastapi import APIRouter, Request
from pydantic import BaseModel

from hr_intranet.audit import security_event
from hr_intranet.deps import get_directory, get_settings
from hr_intranet.errors import ValidationError
from hr_intranet.forms import read_payload
from hr_intranet.search.validator import INVALID_QUERY_MESSAGE, Rejected, validate

router = APIRouter(tags=["search"])


class PersonOut(BaseModel):
    id: int
    name: str


class SearchResponse(BaseModel):
    query: str
    results: list[PersonOut]


@router.post("/search", response_model=SearchResponse)
async def search(request: Request):
    payload = await read_payload(request)
    settings = get_settings(request)
    raw = payload.get("q")

    result = validate(raw, max_length=settings.search_max_length)
    if isinstance(result, Rejected):
        security_event(f"Blocked query {raw!r} ({result.reason})", request)
        raise ValidationError(INVALID_QUERY_MESSAGE.format(max_length=settings.search_max_length))

    entries = get_directory(request).search(result.value, limit=settings.search_max_results)
    return SearchResponse(
        query=result.value,
        results=[PersonOut(**entry.public()) for entry in entries],
    )
