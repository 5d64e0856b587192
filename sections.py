# sections.py
# Cut the model's markdown into "# Heading" sections and read the test case table.

import logging
import re
from typing import List, Optional

from models import ParsedSection, ParsedTable

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r"^#\s", flags=re.M)
TABLE_SECTION_TITLE = "test case list"


def split_sections(text: str) -> List[ParsedSection]:
    """
    Split on top-level headings, keeping the order the model wrote them in.

    Only the "Test Case List" section gets a table parse; every other section
    keeps table=None and is rendered from its raw content.
    """
    sections = []
    for fragment in HEADING_RE.split(text or ""):
        if not fragment.strip():
            continue
        title, _, content = fragment.partition("\n")
        title, content = title.strip(), content.strip()
        table = parse_markdown_table(content) if title.lower() == TABLE_SECTION_TITLE else None
        sections.append(ParsedSection(title=title, raw_content=content, table=table))
    return sections


def _split_row(line: str) -> List[str]:
    cells = [c.strip() for c in line.split("|")]
    # outer pipes leave an empty cell on each side
    if cells and cells[0] == "":
        cells = cells[1:]
    if cells and cells[-1] == "":
        cells = cells[:-1]
    return cells


def parse_markdown_table(content: str) -> Optional[ParsedTable]:
    """Return the pipe table in `content`, or None when it isn't a well-formed one."""
    lines = [l for l in (content or "").strip().splitlines() if l.strip()]
    if len(lines) < 2:
        logger.warning("Markdown table parse error: expected a header and a separator row.")
        return None

    header_line, separator_line, row_lines = lines[0], lines[1], lines[2:]
    if "---" not in separator_line or "|" not in separator_line:
        logger.warning("Markdown table parse error: missing separator row.")
        return None

    headers = _split_row(header_line)
    rows = [_split_row(l) for l in row_lines]
    if not headers or any(len(r) != len(headers) for r in rows):
        logger.warning("Markdown table parse error: Header and row length mismatch.")
        return None

    return ParsedTable(headers=headers, rows=rows)
