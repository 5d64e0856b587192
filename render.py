# render.py
# Decide how each section is shown and which download (if any) sits next to it.

import html
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from models import ParsedSection, ParsedTable

FENCE_RE = re.compile(r"^```(\w+)[ \t]*\n?(.*?)\n?```$", flags=re.S)

# title keyword -> export kind; first match wins
EXPORT_KEYWORDS = [
    ("test case list", "csv"),
    ("cucumber feature skeleton", "feature"),
    ("step definition skeleton", "java"),
]


@dataclass
class SectionView:
    title: str
    kind: str                       # "table" | "code" | "text"
    body: str                       # table HTML, bare code, or markdown
    language: Optional[str] = None  # only for kind == "code"
    export: Optional[str] = None    # "csv" | "feature" | "java"


def strip_code_fence(content: str, language: Optional[str] = None) -> Tuple[str, Optional[str]]:
    """
    Unwrap a ```lang ... ``` block. With `language` given, only that fence is
    removed. Returns (code, fence language); untouched content gets None.
    """
    m = FENCE_RE.match(content.strip())
    if not m or (language and m.group(1).lower() != language.lower()):
        return content, None
    return m.group(2).strip(), m.group(1).lower()


def table_html(table: ParsedTable) -> str:
    # cells may carry <br> from the model, so they go in unescaped
    head = "".join(f"<th>{html.escape(h)}</th>" for h in table.headers)
    body = "".join(
        "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>"
        for row in table.rows
    )
    return (
        '<div class="tc-table-wrap"><table class="tc-table">'
        f"<thead><tr>{head}</tr></thead><tbody>{body}</tbody>"
        "</table></div>"
    )


def export_kind(title: str, has_table: bool) -> Optional[str]:
    t = title.lower()
    for keyword, kind in EXPORT_KEYWORDS:
        if keyword in t:
            if kind == "csv" and not has_table:
                return None
            return kind
    return None


def present_section(section: ParsedSection) -> SectionView:
    export = export_kind(section.title, section.table is not None)
    if section.table is not None:
        return SectionView(section.title, "table", table_html(section.table), export=export)
    if "skeleton" in section.title.lower():
        code, language = strip_code_fence(section.raw_content)
        if language is None and "cucumber feature" in section.title.lower():
            language = "gherkin"
        return SectionView(section.title, "code", code, language=language, export=export)
    return SectionView(section.title, "text", section.raw_content, export=export)
