# rfcli/llm/summarizer.py
"""
TLDR generation for one RFC.

The model sees a bounded prefix of the normalized document (abstract,
introduction, usually the table of contents) and, when it can be found, a
bounded slice starting at a named section such as "Security Considerations".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from rfcli.llm.backends import ChatBackend, Message
from rfcli.logging.logger import get_logger
from rfcli.logging.tags import TLDR

logger = get_logger(__name__)

SYSTEM_PROMPT = (
    "You are a Senior Systems Engineer. Summarize the RFC for a terminal UI. "
    "DO NOT use Markdown bolding (no asterisks). "
    "Use a simple 'TITLE: description' format for bullets. "
    "Keep the elevator pitch at the top."
)

DEFAULT_CONTEXT_LINES = 300
DEFAULT_SECTION = "Security Considerations"
DEFAULT_SECTION_LINES = 80


@dataclass(frozen=True)
class Excerpt:
    context: str
    section: Optional[str] = None
    section_text: Optional[str] = None
    section_line: Optional[int] = None


def section_heading_re(name: str) -> re.Pattern[str]:
    # "7.  Security Considerations", "Security Considerations", "10 SECURITY CONSIDERATIONS"
    return re.compile(rf"^\s*(?:\d+(?:\.\d+)*\.?\s+)?{re.escape(name)}\s*$", re.IGNORECASE)


def find_section(lines: list[str], name: str) -> Optional[int]:
    """
    Index of the line holding the `name` heading, or None.

    Table-of-contents entries usually carry dot leaders and page numbers and
    do not match; when they do, the body heading still comes later, so the
    last match wins.
    """
    pattern = section_heading_re(name)
    found = None
    for i, line in enumerate(lines):
        if pattern.match(line):
            found = i
    return found


def extract_excerpt(
    text: str,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    section: Optional[str] = DEFAULT_SECTION,
    section_lines: int = DEFAULT_SECTION_LINES,
) -> Excerpt:
    lines = text.splitlines()
    context = "\n".join(lines[:context_lines])

    if not section or section_lines <= 0:
        return Excerpt(context=context)

    start = find_section(lines, section)
    if start is None:
        logger.debug(f"{TLDR} Section '{section}' not found")
        return Excerpt(context=context)

    section_text = "\n".join(lines[start : start + section_lines])
    return Excerpt(context=context, section=section, section_text=section_text, section_line=start)


def build_messages(number: int, excerpt: Excerpt) -> list[Message]:
    user = f"Summarize RFC {number}:\n\n{excerpt.context}"
    if excerpt.section_text:
        user += f"\n\nExcerpt from the '{excerpt.section}' section:\n\n{excerpt.section_text}"

    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user},
    ]


class Summarizer:
    """
    One-shot summarization: a single backend request, no retries.

    Usage:
        summarizer = Summarizer(create_backend("groq", cfg.tldr.backends["groq"]))
        text = summarizer.summarize(2616, normalize(raw))
    """

    def __init__(
        self,
        backend: ChatBackend,
        context_lines: int = DEFAULT_CONTEXT_LINES,
        section: Optional[str] = DEFAULT_SECTION,
        section_lines: int = DEFAULT_SECTION_LINES,
    ):
        self.backend = backend
        self.context_lines = context_lines
        self.section = section
        self.section_lines = section_lines

    def summarize(self, number: int, normalized_text: str) -> str:
        """
        Raises:
            SummaryTransportError: Backend unreachable, auth or HTTP failure
            SummaryResponseError: Backend answered without a summary
        """
        excerpt = extract_excerpt(
            normalized_text,
            context_lines=self.context_lines,
            section=self.section,
            section_lines=self.section_lines,
        )
        logger.info(
            f"{TLDR} RFC {number}: {self.context_lines} context lines, "
            f"section {'found at line ' + str(excerpt.section_line) if excerpt.section_text else 'not found'}"
        )
        return self.backend.complete(build_messages(number, excerpt))
