"""Tabular PDF reports (A4 portrait) built with reportlab platypus.

Layout: title, subtitle and ``Fecha: ...`` line at the top, one grid table
whose header row repeats on every page, and a ``<brand> - Página i de n``
footer on every page.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from functools import partial
from io import BytesIO
from typing import Any, Mapping, Optional, Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .translations import format_long_date

log = logging.getLogger(__name__)

DEFAULT_BRAND = "NEMI NAVIGATOR"
MARGIN = 20 * mm

HEADER_COLOR = colors.Color(226 / 255, 70 / 255, 55 / 255)
BODY_COLOR = colors.Color(60 / 255, 60 / 255, 60 / 255)
BORDER_COLOR = colors.Color(200 / 255, 200 / 255, 200 / 255)
FOOTER_COLOR = colors.Color(100 / 255, 100 / 255, 100 / 255)

_TITLE = ParagraphStyle("ReportTitle", fontName="Helvetica-Bold", fontSize=18, leading=22, textColor=HEADER_COLOR)
_SUBTITLE = ParagraphStyle("ReportSubtitle", fontName="Helvetica", fontSize=14, leading=18, textColor=BODY_COLOR)
_DATE = ParagraphStyle("ReportDate", fontName="Helvetica", fontSize=10, leading=12, textColor=BODY_COLOR)
_HEAD_CELL = ParagraphStyle("HeadCell", fontName="Helvetica-Bold", fontSize=12, leading=14, textColor=colors.white)
_BODY_CELL = ParagraphStyle("BodyCell", fontName="Helvetica", fontSize=10, leading=12, textColor=BODY_COLOR)


@dataclass(frozen=True)
class ReportColumn:
    header: str
    field: str


@dataclass(frozen=True)
class ReportDocument:
    filename: str
    content: bytes
    # header row followed by one row of display strings per record
    table: list[list[str]]

    @property
    def row_count(self) -> int:
        return len(self.table) - 1


class _NumberedCanvas(canvas.Canvas):
    """Defers page output so the footer can print the final page count."""

    def __init__(self, *args, brand: str = DEFAULT_BRAND, **kwargs):
        super().__init__(*args, **kwargs)
        self._brand = brand
        self._pages: list[dict] = []

    def showPage(self):
        self._pages.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        total = len(self._pages)
        for number, state in enumerate(self._pages, start=1):
            self.__dict__.update(state)
            self._draw_footer(number, total)
            super().showPage()
        super().save()

    def _draw_footer(self, number: int, total: int) -> None:
        width, _ = self._pagesize
        self.saveState()
        self.setFont("Helvetica", 8)
        self.setFillColor(FOOTER_COLOR)
        self.drawCentredString(width / 2, 10 * mm, f"{self._brand} - Página {number} de {total}")
        self.restoreState()


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


def build_table(columns: Sequence[ReportColumn], rows: Sequence[Mapping[str, Any]]) -> list[list[str]]:
    header = [c.header for c in columns]
    body = [[_cell_text(row.get(c.field)) for c in columns] for row in rows]
    return [header, *body]


def generate_pdf(
    title: str,
    subtitle: str,
    columns: Sequence[ReportColumn],
    rows: Sequence[Mapping[str, Any]],
    filename: str,
    *,
    today: Optional[date] = None,
    brand: str = DEFAULT_BRAND,
) -> ReportDocument:
    """Render ``rows`` as a one-table PDF.

    Each row is read by column field; a missing or ``None`` value renders as an
    empty cell. With no rows the document still has the header row.
    """
    if not columns:
        raise ValueError("A report needs at least one column")

    table = build_table(columns, rows)
    today = today or date.today()

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=MARGIN,
        rightMargin=MARGIN,
        topMargin=MARGIN,
        bottomMargin=MARGIN,
        title=title,
        subject=subtitle,
        author=brand,
        creator=brand,
    )

    cells = [[Paragraph(escape(text), _HEAD_CELL) for text in table[0]]]
    cells += [[Paragraph(escape(text), _BODY_CELL) for text in row] for row in table[1:]]
    # splitInRow lets a row taller than the frame continue on the next page.
    grid = Table(cells, colWidths=[doc.width / len(columns)] * len(columns), repeatRows=1, splitInRow=1)
    grid.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
                ("GRID", (0, 0), (-1, -1), 0.3, BORDER_COLOR),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("TOPPADDING", (0, 0), (-1, -1), 3),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
            ]
        )
    )

    story = [
        Paragraph(escape(title), _TITLE),
        Spacer(1, 2 * mm),
        Paragraph(escape(subtitle), _SUBTITLE),
        Spacer(1, 2 * mm),
        Paragraph(escape(f"Fecha: {format_long_date(today)}"), _DATE),
        Spacer(1, 6 * mm),
        grid,
    ]
    doc.build(story, canvasmaker=partial(_NumberedCanvas, brand=brand))

    if not filename.endswith(".pdf"):
        filename = f"{filename}.pdf"
    log.info("Rendered %s (%s rows)", filename, len(table) - 1)
    return ReportDocument(filename=filename, content=buffer.getvalue(), table=table)
