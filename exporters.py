# exporters.py
# Turn a rendered section into a file the browser can save.

import csv
import io
import re
from dataclasses import dataclass
from typing import List, Optional

import settings
from models import ParsedSection, ParsedTable
from render import SectionView, strip_code_fence

FEATURE_RE = re.compile(r"Feature:[ \t]*(.*)")
CLASS_RE = re.compile(r"public class\s+(\w+)")
BR_RE = re.compile(r"<br\s*/?>", flags=re.I)

CSV_HEADERS = ["Title", "Type", "Priority", "Preconditions", "Steps", "Expected Result", "Tags", "ID"]

PRIORITY_BY_RISK = {
    "high": "1-Critical",
    "medium": "2-High",
    "low": "3-Medium",
}
LOWEST_PRIORITY = "4-Low"


@dataclass
class Download:
    file_name: str
    data: str
    mime: str


# ======================= .feature =======================
def feature_file_name(content: str) -> str:
    m = FEATURE_RE.search(content)
    name = m.group(1).strip().lower() if m else ""
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"[^\w\-]", "", name)
    return f"{name or settings.DEFAULT_FEATURE_NAME}.feature"


def export_feature(content: str) -> Download:
    return Download(feature_file_name(content), content, "text/plain;charset=utf-8")


# ======================= .java =======================
def java_class_name(code: str) -> str:
    m = CLASS_RE.search(code)
    return m.group(1) if m else settings.DEFAULT_CLASS_NAME


def export_java(content: str) -> Download:
    code, _ = strip_code_fence(content, language="java")
    return Download(f"{java_class_name(code)}.java", code, "text/x-java-source;charset=utf-8")


# ======================= TestRail CSV =======================
def map_priority(risk: Optional[str]) -> str:
    """High/Medium/Low risk -> TestRail priority; anything else is the lowest tier."""
    return PRIORITY_BY_RISK.get((risk or "").strip().lower(), LOWEST_PRIORITY)


def _column(headers: List[str], name: str) -> Optional[int]:
    for i, h in enumerate(headers):
        if h.lower() == name:
            return i
    return None


def _cell(row: List[str], index: Optional[int]) -> str:
    if index is None or index >= len(row):
        return ""
    return row[index] or ""


def _lines(text: str) -> str:
    return BR_RE.sub("\n", text)


def build_csv(table: ParsedTable) -> str:
    cols = {name: _column(table.headers, name) for name in
            ("id", "title", "type", "risk", "tags", "preconditions", "steps", "expected result")}

    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for row in table.rows:
        writer.writerow([
            _cell(row, cols["title"]),
            _cell(row, cols["type"]),
            map_priority(_cell(row, cols["risk"])),
            _lines(_cell(row, cols["preconditions"])),
            _lines(_cell(row, cols["steps"])),
            _lines(_cell(row, cols["expected result"])),
            _cell(row, cols["tags"]),
            _cell(row, cols["id"]),
        ])
    return buf.getvalue()


def export_csv(table: ParsedTable) -> Download:
    return Download(settings.CSV_FILE_NAME, build_csv(table), "text/csv;charset=utf-8")


def export_for(section: ParsedSection, view: SectionView) -> Optional[Download]:
    """The single download offered for a section, if its title asks for one."""
    if view.export == "csv" and section.table is not None:
        return export_csv(section.table)
    if view.export == "feature":
        return export_feature(section.raw_content)
    if view.export == "java":
        return export_java(section.raw_content)
    return None
