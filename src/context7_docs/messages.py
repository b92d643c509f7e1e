"""User-facing strings, one table per locale.

Every piece of text the tool returns is looked up here so the pipeline
itself stays language-neutral.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger("context7-docs")

CANONICAL_EXAMPLES = ("vercel/next.js", "facebook/react", "spring-projects/spring-framework")


@dataclass(frozen=True, slots=True)
class Messages:
    docs_title: str
    topic_line: str
    version_line: str
    page_line: str
    source_line: str
    no_docs: str
    config_error: str
    invalid_request: str
    query_failed: str
    request_failed: str
    unauthorized: str
    rate_limited: str
    service_error: str
    transport_error: str
    not_found_title: str
    not_found_hint: str
    not_found_site_tip: str
    suggestions_intro: str
    stars_label: str
    score_label: str
    retry_hint: str


EN = Messages(
    docs_title="# {library} Documentation",
    topic_line="**Topic**: {topic}",
    version_line="**Version**: {version}",
    page_line="**Page**: {page}",
    source_line="🔗 Source: Context7 - {library}",
    no_docs="No documentation found for {library}. Try adjusting topic, version or page.",
    config_error="Configuration error: {cause}",
    invalid_request="Invalid request: {reason}",
    query_failed="Context7 query failed: {detail}",
    request_failed="API request failed (status {status}): {reason}",
    unauthorized="Invalid or expired API key, please check your configuration",
    rate_limited=(
        "Rate limit reached, configure an API key (CONTEXT7_API_KEY) "
        "for a higher rate limit"
    ),
    service_error="Context7 service error: {body}",
    transport_error="request failed: {cause}",
    not_found_title='❌ **Library "{library}" not found**',
    not_found_hint=(
        "Please check the library identifier. The expected format is `owner/repo`, "
        "for example:"
    ),
    not_found_site_tip="💡 Tip: you can search for libraries on [Context7](https://context7.com).",
    suggestions_intro=(
        "💡 **Suggestions**: these related libraries were found, "
        "retry with the full library identifier:"
    ),
    stars_label="Stars: {stars}",
    score_label="Score: {score}",
    retry_hint="Retry with the full library identifier, for example:",
)

ZH = Messages(
    docs_title="# {library} 文档",
    topic_line="**主题**: {topic}",
    version_line="**版本**: {version}",
    page_line="**页码**: {page}",
    source_line="🔗 来源: Context7 - {library}",
    no_docs="未找到 {library} 的相关文档。请尝试调整查询参数。",
    config_error="获取 Context7 配置失败: {cause}",
    invalid_request="无效请求: {reason}",
    query_failed="Context7 查询失败: {detail}",
    request_failed="API 请求失败 (状态码: {status}): {reason}",
    unauthorized="API 密钥无效或已过期，请检查配置",
    rate_limited="速率限制已达上限，建议配置 API Key (CONTEXT7_API_KEY) 以获得更高速率限制",
    service_error="Context7 服务器错误: {body}",
    transport_error="请求失败: {cause}",
    not_found_title='❌ **未找到库 "{library}"**',
    not_found_hint="请检查库标识符是否正确。正确格式为 `owner/repo`，例如：",
    not_found_site_tip="💡 提示：您可以在 [Context7](https://context7.com) 网站上搜索库。",
    suggestions_intro="💡 **建议**：以下是搜索到的相关库，请使用完整的库标识符重新查询：",
    stars_label="⭐ {stars}",
    score_label="信任分数: {score}",
    retry_hint="请使用完整的库标识符重新查询，例如：",
)

_TABLES = {"en": EN, "zh": ZH}


def get_messages(locale: str | None) -> Messages:
    """Return the message table for *locale*, falling back to English.

    Region suffixes are ignored, so ``zh-CN`` and ``zh_TW`` both select ``zh``.
    """
    key = (locale or "en").replace("_", "-").split("-")[0].lower()
    table = _TABLES.get(key)
    if table is None:
        log.warning("Unknown locale %r, using English messages", locale)
        return EN
    return table
