"""Call-scoped value types for the documentation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp.types import CallToolResult, TextContent

MIN_PAGE = 1
MAX_PAGE = 10


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True, slots=True)
class DocRequest:
    """A single documentation lookup.

    ``library`` is expected to look like ``owner/repo`` but only emptiness is
    rejected; the service decides whether the identifier exists.
    """

    library: str
    topic: str | None = None
    version: str | None = None
    page: int | None = None

    def __post_init__(self) -> None:
        library = (self.library or "").strip()
        if not library:
            raise ValueError("library must not be empty")
        if self.page is not None:
            if isinstance(self.page, bool) or not isinstance(self.page, int):
                raise ValueError(f"page must be an integer, got {self.page!r}")
            if not MIN_PAGE <= self.page <= MAX_PAGE:
                raise ValueError(f"page must be between {MIN_PAGE} and {MAX_PAGE}, got {self.page}")
        object.__setattr__(self, "library", library)
        object.__setattr__(self, "topic", _blank_to_none(self.topic))
        object.__setattr__(self, "version", _blank_to_none(self.version))

    def query_params(self) -> dict[str, str]:
        """Query parameters for the docs endpoint, only for fields that are set."""
        params: dict[str, str] = {}
        if self.topic is not None:
            params["topic"] = self.topic
        if self.version is not None:
            params["version"] = self.version
        if self.page is not None:
            params["page"] = str(self.page)
        return params


@dataclass(frozen=True, slots=True)
class SearchResult:
    """One candidate library returned by the search endpoint."""

    id: str
    stars: int | None = None
    trust_score: float | None = None
    description: str | None = None

    @classmethod
    def from_json(cls, item: dict[str, Any]) -> SearchResult:
        """Build from one entry of the search response's ``results`` list.

        Raises KeyError / TypeError / ValueError on malformed entries.
        """
        library_id = item["id"]
        if not isinstance(library_id, str):
            raise TypeError(f"result id must be a string, got {type(library_id).__name__}")

        stars = item.get("stars")
        if stars is not None:
            stars = int(stars)
            if stars < 0:
                stars = None

        trust = item.get("trustScore")
        if trust is None:
            trust = item.get("trust_score")
        if trust is not None:
            trust = float(trust)

        description = item.get("description")
        if description is not None and not isinstance(description, str):
            description = str(description)

        return cls(
            id=library_id,
            stars=stars,
            trust_score=trust,
            description=description or None,
        )


@dataclass(frozen=True, slots=True)
class ToolResult:
    """The only value handed back to the tool caller."""

    text: str
    is_error: bool = False

    def to_call_result(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )
