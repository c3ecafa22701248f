"""Entry routes for the API."""

from __future__ import annotations

from fastapi import APIRouter

from career_analytics.api.schemas.entries import CareerEntryResponse
from career_analytics.api.schemas.filters import FilterEntriesRequest, FilterEntriesResponse
from career_analytics.services.entry_filters import filter_entries

router = APIRouter(prefix="/entries", tags=["entries"])


@router.post(
    "/filter",
    response_model=FilterEntriesResponse,
    summary="Filter entries",
    description="Return the entries matching every supplied filter, in input order.",
)
def post_filter_entries(payload: FilterEntriesRequest) -> FilterEntriesResponse:
    entries = [item.to_entry() for item in payload.entries]
    matches = filter_entries(entries, payload.filters.to_options())
    return FilterEntriesResponse(
        items=[CareerEntryResponse.model_validate(e, from_attributes=True) for e in matches],
        total=len(matches),
    )
