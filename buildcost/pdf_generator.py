"""
PDF Estimate Report.

Generates a one-page cost estimate document for a stored project.
Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header + project details
2. Building parameters
3. Cost breakdown (base cost, each feature, total)
4. Notes

Built-in PDF fonts are latin-1 only, so amounts use "Rs." instead of the rupee sign.
"""

from fpdf import FPDF

from .calculators import DEFAULT_RATES
from .formatting import format_area, format_inr

CURRENCY = "Rs. "


def _fmt(amount) -> str:
    """Format an amount as Rs. X,XX,XXX"""
    try:
        return format_inr(amount, symbol=CURRENCY)
    except (ValueError, TypeError):
        return f"{CURRENCY}0"


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("₹", CURRENCY)  # rupee sign
        .replace("×", "x")       # multiplication sign
        .replace("—", " - ")     # em dash
        .replace("–", "-")       # en dash
        .replace("’", "'")       # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class EstimatePDF(FPDF):
    """PDF layout helpers for estimate reports."""

    def __init__(self):
        super().__init__()
        self.set_auto_page_break(auto=True, margin=20)

    def header(self):
        pass  # Drawn manually in generate_project_pdf

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def label_row(self, label, value):
        self.set_font("Helvetica", "", 10)
        self.cell(60, 6, _safe(label))
        self.set_font("Helvetica", "B", 10)
        self.cell(0, 6, _safe(str(value)), new_x="LMARGIN", new_y="NEXT")

    def amount_row(self, label, amount, bold=False):
        self.set_font("Helvetica", "B" if bold else "", 10)
        self.cell(130, 6, _safe(label))
        self.cell(60, 6, _fmt(amount), align="R")
        self.ln()


def generate_project_pdf(project, company_name: str = "", rates=DEFAULT_RATES) -> bytes:
    """
    Generate a PDF estimate for a stored project.

    Args:
        project: schemas.Project
        company_name: printed in the header
        rates: used only to label feature lines; amounts come from the project snapshot

    Returns:
        PDF bytes
    """
    breakdown = project.cost_breakdown

    pdf = EstimatePDF()
    pdf.alias_nb_pages()
    pdf.add_page()

    # ── SECTION 1: Header ──
    if company_name:
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(100, 100, 100)
        pdf.cell(0, 5, _safe(company_name), new_x="LMARGIN", new_y="NEXT")
        pdf.set_text_color(0, 0, 0)

    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 10, _safe(project.project_name), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, _safe(project.location), new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Estimate date: {project.created_at.strftime('%B %d, %Y')}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Reference: {project.id}", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(6)

    # ── SECTION 2: Parameters ──
    pdf.section_header("BUILDING PARAMETERS")
    pdf.label_row("Floor area", format_area(project.floor_area))
    pdf.label_row("Number of floors", project.number_of_floors)
    pdf.label_row("Material type", f"{project.material_type} ({_fmt(breakdown.material_multiplier)}/sq ft)")
    pdf.label_row("Additional features", ", ".join(project.additional_features) or "None")
    pdf.ln(4)

    # ── SECTION 3: Cost breakdown ──
    pdf.section_header("COST BREAKDOWN")
    pdf.amount_row(
        f"Base cost ({project.floor_area} x {project.number_of_floors} x {_fmt(breakdown.material_multiplier)})",
        breakdown.base_cost,
    )
    for feature in project.additional_features:
        pdf.amount_row(f"  {feature}", rates.feature_cost(feature))
    pdf.amount_row("Additional features", breakdown.additional_features_cost, bold=True)

    pdf.ln(2)
    pdf.set_fill_color(45, 55, 72)
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(130, 10, "  ESTIMATED TOTAL", fill=True)
    pdf.cell(60, 10, f"{_fmt(project.estimated_cost)}  ", fill=True, align="R")
    pdf.set_text_color(0, 0, 0)
    pdf.ln(14)

    # ── SECTION 4: Notes ──
    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(100, 100, 100)
    pdf.cell(0, 4, "Rates are as of the estimate date. Stored estimates are not repriced.", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 4, "Excludes land, permits, design fees and taxes.", new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)

    return bytes(pdf.output())
