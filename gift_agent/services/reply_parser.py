"""Reply Parser - Turns the model's reply text into gift suggestions.

Expected line format (see prompt_builder.SYSTEM_PROMPT):

    1． 定制书名咖啡杯 - 文艺暖心

Interface Contract:
- parse_reply(text) -> list[GiftSuggestion]
- Never raises on odd content; lines that don't match are skipped
- An empty list means the reply could not be parsed
"""

from __future__ import annotations

import logging
import re

from gift_agent.models import GiftSuggestion

logger = logging.getLogger(__name__)

# Equivalent separator characters (ASCII and full-width / typographic forms)
DIGITS = "0-9０-９"
PERIODS = ".．"
DASHES = "-–—"

# `name` is greedy and `feature` excludes dashes, so the last dash on the
# line splits the two.
LINE_PATTERN = re.compile(
    rf"""
    ^(?P<number>[{DIGITS}]+)
    [{re.escape(PERIODS)}]
    \s*
    (?P<name>.+)
    [{re.escape(DASHES)}]
    (?P<feature>[^{re.escape(DASHES)}]+)
    $
    """,
    re.VERBOSE,
)


def parse_line(line: str) -> GiftSuggestion | None:
    """Parse one line, or return None if it isn't a suggestion."""
    # Digits must start the line; only trailing whitespace (incl. \r) is dropped
    match = LINE_PATTERN.match(line.rstrip())
    if not match:
        return None
    name = match.group("name").strip()
    feature = match.group("feature").strip()
    if not name or not feature:
        return None
    return GiftSuggestion(name=name, feature=feature)


def parse_reply(text: str) -> list[GiftSuggestion]:
    """Extract suggestions from reply text, in line order."""
    lines = (text or "").split("\n")
    suggestions: list[GiftSuggestion] = []
    for line in lines:
        if not line.strip():
            continue
        suggestion = parse_line(line)
        if suggestion is not None:
            suggestions.append(suggestion)
    logger.debug("[parse] lines=%d suggestions=%d", len(lines), len(suggestions))
    return suggestions
