"""Rewrite rules that make up the Markdown-to-plain-text pipeline.

Each :class:`RewriteRule` is a single regex pass over the whole text. The
order of :data:`PIPELINE` matters: later rules see the text left behind by
earlier ones (pipes are turned into spaces before the double-space collapse,
backslash escapes are resolved only after the emphasis, link and table rules
have skipped the escaped markers).

Emphasis handling is a heuristic. Nested or overlapping markers such as
``*a **b* c**`` and identifiers like ``snake_case_name`` have no guaranteed
output.
"""
from __future__ import annotations

import re
from typing import Callable

from pydantic import BaseModel, ConfigDict

Replacement = str | Callable[[re.Match], str]


class RewriteRule(BaseModel):
    """A named pattern and the text that replaces each match."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    pattern: re.Pattern
    replacement: Replacement

    def apply(self, text: str) -> str:
        """Rewrite every match of this rule in *text*."""
        return self.pattern.sub(self.replacement, text)


def _strip_fence(match: re.Match) -> str:
    """Drop the opening and closing fence markers, keep the content verbatim."""
    # Opening line carries the optional language tag
    _, newline, content = match.group(1).partition("\n")
    if not newline:
        return ""
    return content


# A marker preceded by an odd run of backslashes is escaped. The even run
# in front of an unescaped marker is captured and put back.
PIPELINE: tuple[RewriteRule, ...] = (
    RewriteRule(
        name="headings",
        description="Strip leading # markers from heading lines",
        pattern=re.compile(r"^\s*#+\s*", re.MULTILINE),
        replacement="",
    ),
    RewriteRule(
        name="strong_emphasis",
        description="**text** and __text__ become text",
        pattern=re.compile(r"(?<!\\)((?:\\\\)*)(\*\*|__)(.*?)(?<!\\)((?:\\\\)*)\2"),
        replacement=r"\1\3\4",
    ),
    RewriteRule(
        name="weak_emphasis",
        description="*text* and _text_ become text",
        pattern=re.compile(r"(?<!\\)((?:\\\\)*)(\*|_)(.*?)(?<!\\)((?:\\\\)*)\2"),
        replacement=r"\1\3\4",
    ),
    RewriteRule(
        name="links",
        description="[label](target) becomes label (target)",
        pattern=re.compile(r"(?<!\\)((?:\\\\)*)(?<!!)\[(.*?)\]\((.*?)\)"),
        replacement=r"\1\2 (\3)",
    ),
    RewriteRule(
        name="images",
        description="![alt](target) becomes alt",
        pattern=re.compile(r"(?<!\\)((?:\\\\)*)!\[(.*?)\]\(.*?\)"),
        replacement=r"\1\2",
    ),
    RewriteRule(
        name="inline_code",
        description="`code` becomes code",
        pattern=re.compile(r"(?<!\\)((?:\\\\)*)(?<!`)`([^`]+)`(?!`)"),
        replacement=r"\1\2",
    ),
    RewriteRule(
        name="fenced_code",
        description="Remove ``` fence lines, keep the block content",
        pattern=re.compile(r"```(.*?)```", re.DOTALL),
        replacement=_strip_fence,
    ),
    RewriteRule(
        name="blockquotes",
        description="Strip leading > quote markers",
        pattern=re.compile(r"^\s*>\s?", re.MULTILINE),
        replacement="",
    ),
    RewriteRule(
        name="table_pipes",
        description="Replace table pipes and the whitespace after them with a space",
        pattern=re.compile(r"(?<!\\)((?:\\\\)*)\|\s*"),
        replacement=r"\1 ",
    ),
    RewriteRule(
        name="table_spaces",
        description="Collapse runs of spaces left by pipe removal",
        pattern=re.compile(r" {2,}"),
        replacement=" ",
    ),
    RewriteRule(
        name="horizontal_rules",
        description="Empty out ---, *** and ___ lines",
        pattern=re.compile(r"^\s*(?:-{3,}|\*{3,}|_{3,})\s*$", re.MULTILINE),
        replacement="",
    ),
    RewriteRule(
        name="escapes",
        description=r"\x becomes x",
        pattern=re.compile(r"\\(.)"),
        replacement=r"\1",
    ),
    RewriteRule(
        name="unordered_lists",
        description="Strip -, * and + list markers",
        pattern=re.compile(r"^\s*[-*+]\s+", re.MULTILINE),
        replacement="",
    ),
    RewriteRule(
        name="ordered_lists",
        description="Strip 1. style list markers",
        pattern=re.compile(r"^\s*\d+\.\s+", re.MULTILINE),
        replacement="",
    ),
    RewriteRule(
        name="blank_lines",
        description="Collapse three or more newlines into a paragraph break",
        pattern=re.compile(r"\n{3,}"),
        replacement="\n\n",
    ),
)

RULE_NAMES: tuple[str, ...] = tuple(rule.name for rule in PIPELINE)


def get_rule(name: str) -> RewriteRule:
    """Look up a pipeline rule by name.

    Raises:
        KeyError: If no rule carries that name.
    """
    for rule in PIPELINE:
        if rule.name == name:
            return rule
    raise KeyError(name)
