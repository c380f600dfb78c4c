"""
PDF ROI Summary.

One-page Hard-Cem ROI summary from a CalculationResult and its
FormattedResult. Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header + Project Inputs
2. Investment
3. Lifecycle (conventional floor)
4. Return
5. Assumptions
"""

from datetime import datetime

from fpdf import FPDF

from .schemas import CalculationInput, CalculationResult, FormattedResult

INDUSTRY_NAMES = {
    "manufacturing": "Manufacturing",
    "automotive": "Automotive",
    "datacenter": "Data Center",
    "hydro": "Hydroelectric",
    "custom": "Custom",
}


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("—", " - ")  # em dash
        .replace("–", "-")    # en dash
        .replace("’", "'")
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class ROISummaryPDF(FPDF):
    """PDF layout for ROI summaries."""

    def __init__(self, company_name=""):
        super().__init__()
        self.company_name = company_name
        self.set_auto_page_break(auto=True, margin=20)

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

    def value_row(self, label, value, bold=False):
        """Label on the left, value right-aligned."""
        self.set_font("Helvetica", "B" if bold else "", 9)
        self.cell(120, 6, _safe(label))
        self.cell(70, 6, _safe(str(value)), align="R", new_x="LMARGIN", new_y="NEXT")


def generate_roi_pdf(
    inputs: CalculationInput,
    result: CalculationResult,
    formatted: FormattedResult,
    company_name: str = "Hard-Cem",
) -> bytes:
    """
    Generate the ROI summary document.

    Returns:
        PDF bytes
    """
    pdf = ROISummaryPDF(company_name=company_name)
    pdf.alias_nb_pages()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 10, _safe(f"{company_name} ROI Summary"), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, f"Date: {datetime.utcnow().strftime('%B %d, %Y')}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Currency: {formatted.currency.value}", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    industry = getattr(inputs.industry, "value", inputs.industry)
    pdf.section_header("PROJECT")
    pdf.value_row("Floor area", f"{inputs.area_sq_ft:,.0f} sq ft")
    pdf.value_row("Slab thickness", f"{inputs.thickness_in:g} in")
    pdf.value_row("Facility life", f"{inputs.facility_life_years:g} years")
    pdf.value_row("Industry", INDUSTRY_NAMES.get(industry, industry.title()))
    pdf.value_row("Dosage", f"{inputs.dosage_percent:g}% of standard")
    pdf.value_row("Markup", f"{inputs.markup_percent:g}%")
    pdf.value_row("Pricing model", result.pricing_strategy.title())
    pdf.ln(4)

    # ── SECTION 2: Investment ──
    pdf.section_header("INVESTMENT")
    pdf.value_row("Hard-Cem material", formatted.total_material_cost)
    pdf.value_row("Cost per sq ft", formatted.unit_cost_per_sq_ft)
    pdf.value_row(f"Freight (to {formatted.freight_destination})", formatted.freight_cost)
    pdf.value_row("Total investment", formatted.total_investment, bold=True)
    pdf.ln(4)

    # ── SECTION 3: Lifecycle ──
    pdf.section_header("CONVENTIONAL FLOOR LIFECYCLE")
    pdf.value_row("Resurfacing interval", formatted.resurfacing_interval)
    pdf.value_row("Resurfacing events", formatted.resurfacing_events)
    pdf.value_row("Downtime loss per event", formatted.downtime_loss_per_event)
    pdf.value_row("Total resurfacing cost", formatted.total_resurfacing_cost)
    pdf.value_row("Total downtime cost", formatted.total_downtime_cost)
    pdf.ln(4)

    # ── SECTION 4: Return ──
    pdf.section_header("RETURN")
    pdf.value_row("Estimated ROI", formatted.roi, bold=True)
    pdf.value_row("Lifetime savings", formatted.lifetime_savings, bold=True)
    pdf.value_row("Annual savings", formatted.annualized_savings)
    pdf.ln(4)

    # ── SECTION 5: Assumptions ──
    if result.assumptions:
        pdf.section_header("ASSUMPTIONS")
        pdf.set_font("Helvetica", "", 8)
        for a in result.assumptions:
            pdf.set_x(pdf.l_margin)
            pdf.multi_cell(pw, 4.5, _safe(f"  - {a}"), new_x="LMARGIN", new_y="NEXT")

    return bytes(pdf.output())
