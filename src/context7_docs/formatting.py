"""Text rendering for documentation, library suggestions and errors.

All functions here are pure: they take already-fetched data plus a
message table and return Markdown text.
"""

from __future__ import annotations

from context7_docs.errors import ErrorKind
from context7_docs.messages import CANONICAL_EXAMPLES, Messages
from context7_docs.models import DocRequest, SearchResult

_DESCRIPTION_MAX_CHARS = 100


# ---------------------------------------------------------------------------
# Documentation
# ---------------------------------------------------------------------------


def _metadata_lines(request: DocRequest, messages: Messages) -> list[str]:
    lines: list[str] = []
    if request.topic is not None:
        lines.append(messages.topic_line.format(topic=request.topic))
    if request.version is not None:
        lines.append(messages.version_line.format(version=request.version))
    if request.page is not None:
        lines.append(messages.page_line.format(page=request.page))
    return lines


def format_docs(body: str, request: DocRequest, messages: Messages) -> str:
    """Render a documentation payload as a report.

    Layout: heading, metadata lines for the supplied fields only, a ``---``
    separator, the body verbatim, then the source line.
    """
    sections = [messages.docs_title.format(library=request.library)]
    meta = _metadata_lines(request, messages)
    if meta:
        sections.append("\n".join(meta))
    sections.append("---")
    sections.append(body)
    sections.append(messages.source_line.format(library=request.library))
    return "\n\n".join(sections) + "\n"


def format_no_docs(request: DocRequest, messages: Messages) -> str:
    return messages.no_docs.format(library=request.library)


# ---------------------------------------------------------------------------
# Not-found suggestions
# ---------------------------------------------------------------------------


def format_stars(stars: int) -> str:
    """``950`` -> ``950``, ``1500`` -> ``1.5K``."""
    if stars >= 1000:
        return f"{stars / 1000:.1f}K"
    return str(stars)


def truncate_description(description: str) -> str:
    if len(description) > _DESCRIPTION_MAX_CHARS:
        return description[:_DESCRIPTION_MAX_CHARS] + "..."
    return description


def _display_id(library_id: str) -> str:
    return library_id.lstrip("/")


def format_not_found(library: str, messages: Messages) -> str:
    """Fixed message used when no candidate libraries are available."""
    examples = "\n".join(f"- `{example}`" for example in CANONICAL_EXAMPLES)
    return (
        f"{messages.not_found_title.format(library=library)}\n\n"
        f"{messages.not_found_hint}\n"
        f"{examples}\n\n"
        f"{messages.not_found_site_tip}\n"
    )


def _format_candidate(index: int, result: SearchResult, messages: Messages) -> str:
    info: list[str] = []
    if result.stars is not None:
        info.append(messages.stars_label.format(stars=format_stars(result.stars)))
    if result.trust_score is not None:
        info.append(messages.score_label.format(score=f"{result.trust_score:.1f}"))
    info_str = f" ({' | '.join(info)})" if info else ""

    entry = f"{index}. **{_display_id(result.id)}**{info_str}\n"
    if result.description:
        entry += f"   {truncate_description(result.description)}\n"
    return entry


def format_suggestions(library: str, results: list[SearchResult], messages: Messages) -> str:
    """Numbered candidate list followed by a ready-to-use retry example.

    *results* must be non-empty; the example uses the first candidate.
    """
    lines = [
        f"{messages.not_found_title.format(library=library)}\n\n",
        f"{messages.suggestions_intro}\n\n",
    ]
    for idx, result in enumerate(results, start=1):
        lines.append(_format_candidate(idx, result, messages))
        lines.append("\n")

    first_id = _display_id(results[0].id)
    lines.append("---\n\n")
    lines.append(f"{messages.retry_hint}\n")
    lines.append("```json\n")
    lines.append(f'{{ "library": "{first_id}", "topic": "core" }}\n')
    lines.append("```\n")
    return "".join(lines)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def format_error(
    kind: ErrorKind,
    messages: Messages,
    *,
    status: int | None = None,
    detail: str = "",
) -> str:
    """Human-readable message for a failed primary docs fetch."""
    if kind is ErrorKind.TRANSPORT:
        return messages.query_failed.format(
            detail=messages.transport_error.format(cause=detail)
        )

    if kind is ErrorKind.UNAUTHORIZED:
        reason = messages.unauthorized
    elif kind is ErrorKind.RATE_LIMITED:
        reason = messages.rate_limited
    elif kind is ErrorKind.REMOTE_SERVICE:
        reason = messages.service_error.format(body=detail)
    else:
        reason = detail or f"HTTP {status}"

    return messages.query_failed.format(
        detail=messages.request_failed.format(status=status, reason=reason)
    )


def format_config_error(cause: Exception, messages: Messages) -> str:
    return messages.config_error.format(cause=cause)


def format_invalid_request(reason: str, messages: Messages) -> str:
    return messages.invalid_request.format(reason=reason)
