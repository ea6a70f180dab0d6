"""Result models for fetches and scrape summaries."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


@dataclass
class FetchResult:
    """Result of a successful page fetch.

    Attributes:
        url: URL that was requested
        html: Response body decoded as text
        status_code: HTTP status code of the final response
        fetch_time: Total time spent fetching, retries included
        attempts: Number of attempts it took

    """

    url: str
    html: str
    status_code: int | None = None
    fetch_time: float = 0.0
    attempts: int = 1


class _CamelModel(BaseModel):
    """Base model serialized with camelCase keys, matching the JSON snapshots."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SportSummary(_CamelModel):
    """Counts and flags for one sport in summary.json.

    Attributes:
        name: Display name of the sport
        results_count: Number of result tables extracted
        matches_count: Number of matches extracted
        has_standings: True if at least one standings block was extracted
        has_medals: True if at least one medal block was extracted
        error: Fetch error message, if the sport page could not be scraped

    """

    name: str
    results_count: int = 0
    matches_count: int = 0
    has_standings: bool = False
    has_medals: bool = False
    error: str | None = Field(default=None, description='Fetch error message')


class RunSummary(_CamelModel):
    """Top-level content of summary.json."""

    event_title: str
    last_updated: str
    sports: list[SportSummary] = Field(default_factory=list)
