"""
Plain-language bill summaries from the Anthropic Messages API.

One request per bill detail, no retry. Output varies between runs.
"""
import logging
import re
from typing import Any, Optional

import httpx

from shared.normalization.ordinal import ordinal
from shared.utils.config import get_settings

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"
MAX_TOKENS = 400
MIN_SUMMARY_LENGTH = 20

_HTML_TAGS = re.compile(r"<[^>]*>")


def strip_html(text: str) -> str:
    return _HTML_TAGS.sub("", text or "")


def build_prompt(title: str, summary: str, congress: Any) -> str:
    if summary:
        return (
            f'Here is a Congressional Research Service summary of a bill called "{title}":\n\n'
            f"{strip_html(summary)}\n\n"
            "Rewrite this in 2 short paragraphs that a regular citizen can understand. "
            "Use plain, conversational English. Explain what the bill actually does in practical "
            "terms and why it matters to everyday people. Do not use legal jargon. "
            'Do not start with "This bill"; start with something more engaging. '
            'Do not include any preamble like "Here\'s a summary"; just give the summary directly.'
        )
    return (
        f'A bill called "{title}" was introduced in the {ordinal(congress)} Congress. '
        "Based only on the title, write 1-2 short paragraphs explaining what this bill likely "
        "does in plain English that a regular citizen can understand. Be honest that this is "
        "based on the title only. Do not include any preamble; just give the summary directly."
    )


class PlainLanguageSummarizer:
    """Rewrites bill summaries for a general audience"""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
    ):
        settings = get_settings()
        self.api_key = api_key or settings.anthropic_api_key
        self.base_url = (base_url or settings.anthropic_base_url).rstrip("/")
        self.model = model or settings.summary_model
        self.http = http_client

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def summarize(self, title: str, summary: str, congress: Any) -> Optional[str]:
        """
        Plain-English rewrite of a bill's summary (or its title when there is
        no summary).

        Returns:
            The rewrite, or None when not configured, nothing to summarize, or
            the model gave back too little text
        """
        if not self.enabled:
            logger.debug("No ANTHROPIC_API_KEY configured, skipping plain-language summary")
            return None
        if not (summary or title):
            return None

        response = await self.http.post(
            f"{self.base_url}/messages",
            headers={
                "Content-Type": "application/json",
                "x-api-key": self.api_key,
                "anthropic-version": ANTHROPIC_VERSION,
            },
            json={
                "model": self.model,
                "max_tokens": MAX_TOKENS,
                "messages": [{"role": "user", "content": build_prompt(title, summary, congress)}],
            },
        )
        response.raise_for_status()

        content = response.json().get("content") or []
        text = content[0].get("text", "") if content else ""
        if len(text) <= MIN_SUMMARY_LENGTH:
            logger.info(f"Discarding short plain-language summary ({len(text)} chars)")
            return None
        return text
