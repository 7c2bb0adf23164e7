from typing import Optional
from pydantic import BaseModel, Field

from jurisrank.schemas import SearchFilters


class SearchFiltersPayload(SearchFilters):
    search_term: Optional[str] = Field(default=None, alias='searchTerm', max_length=500)


class PrecedentSearchRequest(BaseModel):
    topic: str = Field(default="", max_length=500)
    context: Optional[str] = Field(default="", max_length=20000)
    filters: SearchFiltersPayload = Field(default_factory=SearchFiltersPayload)

    def has_query(self) -> bool:
        return bool(self.topic.strip()) or self.filters.is_free_text
