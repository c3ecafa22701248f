"""Pydantic schemas for the entry filter endpoint."""

from __future__ import annotations

from pydantic import BaseModel, Field

from career_analytics.api.schemas.entries import CareerEntryIn, CareerEntryResponse
from career_analytics.services.entry_filters import FilterOptions


class FilterOptionsIn(BaseModel):
    start_date: str = Field("", description="Inclusive lower date bound (ISO)")
    end_date: str = Field("", description="Inclusive upper date bound (ISO)")
    tags: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    projects: list[str] = Field(default_factory=list)
    search_query: str = Field("", description="Substring of description or impact")

    def to_options(self) -> FilterOptions:
        return FilterOptions(
            start_date=self.start_date,
            end_date=self.end_date,
            tags=list(self.tags),
            categories=list(self.categories),
            projects=list(self.projects),
            search_query=self.search_query,
        )


class FilterEntriesRequest(BaseModel):
    entries: list[CareerEntryIn] = Field(default_factory=list)
    filters: FilterOptionsIn = Field(default_factory=FilterOptionsIn)


class FilterEntriesResponse(BaseModel):
    items: list[CareerEntryResponse]
    total: int = Field(description="Number of matching entries")
