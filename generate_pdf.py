# generate_pdf.py
# A printable test design: the story, the summary, the test case table
# (wrapped, zebra, split across pages) and the skeletons in monospace.

import io, re
from html import escape
from typing import List, Any
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, Preformatted
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib import colors

from models import FormState, ParsedSection
from render import strip_code_fence

PAGE = landscape(A4)
MARGIN = 36
BR_RE = re.compile(r"&lt;br\s*/?&gt;", flags=re.I)

# wide columns get twice the room of the rest
WIDE_COLUMNS = {"title", "preconditions", "steps", "expected result"}

# indigo header, light zebra body; fonts come from the Paragraph styles
GRID_STYLE = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4f46e5")),
    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#eef2ff")]),
    ("LINEBELOW", (0, 0), (-1, -1), 0.25, colors.HexColor("#c7d2fe")),
    ("BOX", (0, 0), (-1, -1), 0.5, colors.HexColor("#6366f1")),
    ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ("TOPPADDING", (0, 0), (-1, -1), 4),
    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
])


def _markup(text: str) -> str:
    """Escape for reportlab's mini-HTML but keep the model's <br> line breaks."""
    return BR_RE.sub("<br/>", escape(text or "")).replace("\n", "<br/>")


def _col_widths(headers: List[str]) -> List[float]:
    usable = PAGE[0] - 2 * MARGIN
    weights = [2 if h.lower() in WIDE_COLUMNS else 1 for h in headers]
    unit = usable / sum(weights)
    return [w * unit for w in weights]


def build_pdf(form: FormState, sections: List[ParsedSection]) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=PAGE, leftMargin=MARGIN, rightMargin=MARGIN,
                            topMargin=40, bottomMargin=36, title="AI Test Designer")
    styles = getSampleStyleSheet()
    head = ParagraphStyle("h", parent=styles["Heading2"], fontSize=14)
    body = ParagraphStyle("b", parent=styles["Normal"], fontSize=10, leading=13)
    cell = ParagraphStyle("cell", parent=styles["Normal"], fontSize=8, leading=10, wordWrap="CJK")
    th = ParagraphStyle("th", parent=cell, fontName="Helvetica-Bold", textColor=colors.white)
    code = ParagraphStyle("code", parent=styles["Code"], fontSize=7.5, leading=9)

    def grid(header, rows, widths):
        # header cells are Paragraphs too, so the header row wraps like the body
        t = Table([[Paragraph(escape(h), th) for h in header]] +
                  [[Paragraph(_markup(c), cell) for c in r] for r in rows],
                  colWidths=widths, repeatRows=1, splitByRow=1)
        t.setStyle(GRID_STYLE)
        return t

    elems: List[Any] = [Paragraph("AI Test Designer - Test Design", styles["Title"]), Spacer(1, 8)]

    elems.append(Paragraph("<b>User Story</b>", head))
    elems.append(Paragraph(_markup(form.user_story.strip()) or "—", body))
    elems.append(Spacer(1, 6))
    elems += [grid(["System Under Test", "Test Focus", "Detail Level"],
                   [[form.system_url or "—", form.test_focus.value, form.detail_level.value]],
                   [300, 150, 150]),
              Spacer(1, 12)]

    for section in sections:
        elems.append(Paragraph(f"<b>{escape(section.title)}</b>", head))
        if section.table is not None:
            elems.append(grid(section.table.headers, section.table.rows,
                              _col_widths(section.table.headers)))
        elif "skeleton" in section.title.lower():
            text, _ = strip_code_fence(section.raw_content)
            elems.append(Preformatted(text, code))
        else:
            elems.append(Paragraph(_markup(section.raw_content) or "—", body))
        elems.append(Spacer(1, 12))

    if not sections:
        elems.append(Paragraph("<b>No output was generated.</b>", styles["Normal"]))

    doc.build(elems)
    buf.seek(0); return buf.getvalue()
