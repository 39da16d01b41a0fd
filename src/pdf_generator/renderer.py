"""PDF layout for account statements."""

from dataclasses import dataclass
from datetime import datetime
from typing import List, NamedTuple, Optional, Sequence

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from src.config.settings import CURRENCY_SYMBOL
from src.pdf_generator.formatter import format_currency
from src.statement.models import AccountStatement
from src.utils.exceptions import FileOpenError
from src.utils.logger import get_logger
from src.utils.validators import validate_file_path

FONT_FAMILY = "Helvetica"
ROW_HEIGHT = 10
PAGE_BREAK_MARGIN = 20
# section title, header row and one body row
TABLE_MIN_HEIGHT = 3 * ROW_HEIGHT

LOGO_X = 10
LOGO_Y = 10
LOGO_WIDTH = 30

STATEMENT_TITLE = "USD Statement"
SUMMARY_TITLE = "Balance Summary"
TRANSACTIONS_TITLE = "Account Statement For Transactions In The Month So Far"


class Column(NamedTuple):
    """Fixed layout of one table column."""

    title: str
    width: float
    header_align: str
    cell_align: str


SUMMARY_COLUMNS = (
    Column("Product", 40, "C", "L"),
    Column("Opening balance", 40, "C", "R"),
    Column("Money Out", 40, "C", "R"),
    Column("Money In", 40, "C", "R"),
    Column("Closing balance", 40, "C", "R"),
)

TRANSACTION_COLUMNS = (
    Column("Date", 40, "C", "L"),
    Column("Description", 70, "L", "L"),
    Column("Money out", 30, "L", "R"),
    Column("Money in", 30, "L", "R"),
    Column("Balance", 30, "L", "R"),
)


def pdf_safe_text(text: Optional[str]) -> str:
    """Reduce text to Latin-1 so the core fonts can encode it."""
    if text is None:
        return ""
    return str(text).encode("latin-1", "replace").decode("latin-1")


@dataclass
class RenderResult:
    """A fully drawn canvas plus what was drawn on it."""

    pdf: FPDF
    summary_rows: int
    transaction_rows: int
    pages: int


class StatementRenderer:
    """Draws an AccountStatement onto an A4 portrait canvas in millimetres.

    Tables repeat their header row when a row would cross the automatic
    page break.
    """

    def __init__(
        self,
        logo_path: Optional[str] = None,
        currency_symbol: str = CURRENCY_SYMBOL,
        creation_date: Optional[datetime] = None
    ) -> None:
        """Initialize statement renderer.

        Args:
            logo_path: Image placed at the top left of page one. No logo when None.
            currency_symbol: Symbol prefixed to monetary cells.
            creation_date: Fixed document creation date. Library default when None.
        """
        self.logger = get_logger(__name__)
        self.logo_path = logo_path
        self.currency_symbol = currency_symbol
        self.creation_date = creation_date

    def create_canvas(self, statement: AccountStatement) -> FPDF:
        """Create an empty A4 document with metadata set."""
        pdf = FPDF(orientation="P", unit="mm", format="A4")
        pdf.set_auto_page_break(auto=True, margin=PAGE_BREAK_MARGIN)
        pdf.set_title(pdf_safe_text(f"{statement.account_name} {statement.account_number}".strip()))
        pdf.set_author(pdf_safe_text(statement.company_name))
        if self.creation_date is not None:
            pdf.set_creation_date(self.creation_date)
        return pdf

    def render(self, statement: AccountStatement) -> RenderResult:
        """Draw the whole statement.

        Raises:
            FileOpenError: If the logo cannot be opened.
        """
        if self.logo_path is not None:
            validate_file_path(self.logo_path)

        pdf = self.create_canvas(statement)
        pdf.add_page()

        self.draw_header(pdf, statement)
        self.draw_customer(pdf, statement)
        self.draw_banner(pdf, statement)
        summary_rows = self.draw_balance_summary(pdf, statement)
        transaction_rows = self.draw_transactions(pdf, statement)

        result = RenderResult(
            pdf=pdf,
            summary_rows=summary_rows,
            transaction_rows=transaction_rows,
            pages=pdf.page_no(),
        )
        self.logger.info(
            f"Rendered {result.summary_rows} summary rows and "
            f"{result.transaction_rows} transactions on {result.pages} page(s)"
        )
        return result

    def draw_header(self, pdf: FPDF, statement: AccountStatement) -> None:
        """Logo, issuer name and issuer address."""
        if self.logo_path is not None:
            try:
                pdf.image(self.logo_path, x=LOGO_X, y=LOGO_Y, w=LOGO_WIDTH)
            except (OSError, ValueError) as e:
                raise FileOpenError(self.logo_path, str(e))
        pdf.ln(10)

        pdf.set_font(FONT_FAMILY, "B", 16)
        pdf.cell(0, 10, pdf_safe_text(statement.company_name))
        pdf.ln(10)
        pdf.set_font(FONT_FAMILY, "", 12)
        self._multi_line(pdf, statement.company_address)
        pdf.ln(10)

    def draw_customer(self, pdf: FPDF, statement: AccountStatement) -> None:
        """Customer name and address."""
        pdf.set_font(FONT_FAMILY, "B", 12)
        pdf.cell(0, 10, pdf_safe_text(f"Customer: {statement.customer_name}"))
        pdf.ln(10)
        pdf.set_font(FONT_FAMILY, "", 12)
        self._multi_line(pdf, statement.customer_address)
        pdf.ln(10)

    def draw_banner(self, pdf: FPDF, statement: AccountStatement) -> None:
        """Statement title, generation timestamp and issuer restatement."""
        pdf.set_font(FONT_FAMILY, "B", 14)
        pdf.cell(0, 20, STATEMENT_TITLE)
        pdf.ln(10)
        pdf.set_font(FONT_FAMILY, "I", 8)
        pdf.cell(0, 10, pdf_safe_text(f"Generated on: {statement.report_generation_date}"))
        pdf.ln(10)
        pdf.cell(0, 10, pdf_safe_text(f"issued by: {statement.company_name}"))
        pdf.ln(25)

    def draw_balance_summary(self, pdf: FPDF, statement: AccountStatement) -> int:
        """Draw the balance summary table. Returns the number of rows drawn."""
        rows = [
            [
                summary.product,
                self._money(summary.opening_balance),
                self._money(summary.money_out),
                self._money(summary.money_in),
                self._money(summary.closing_balance),
            ]
            for summary in statement.balance_summary
        ]
        return self._draw_table(pdf, SUMMARY_TITLE, SUMMARY_COLUMNS, rows)

    def draw_transactions(self, pdf: FPDF, statement: AccountStatement) -> int:
        """Draw the transactions table. Returns the number of rows drawn."""
        rows = [
            [
                transaction.date,
                transaction.description,
                self._money(transaction.money_out),
                self._money(transaction.money_in),
                self._money(transaction.balance),
            ]
            for transaction in statement.transactions
        ]
        return self._draw_table(pdf, TRANSACTIONS_TITLE, TRANSACTION_COLUMNS, rows)

    def _draw_table(
        self,
        pdf: FPDF,
        title: str,
        columns: Sequence[Column],
        rows: List[List[str]]
    ) -> int:
        # keep the title on the same page as the start of its table
        if pdf.will_page_break(TABLE_MIN_HEIGHT):
            pdf.add_page()

        pdf.set_font(FONT_FAMILY, "B", 12)
        pdf.cell(0, 10, title)
        pdf.ln(10)

        pdf.set_font(FONT_FAMILY, "", 8)
        self._draw_header_row(pdf, columns)

        drawn = 0
        for row in rows:
            if pdf.will_page_break(ROW_HEIGHT):
                pdf.add_page()
                self._draw_header_row(pdf, columns)
                self.logger.debug(f"'{title}' continued on page {pdf.page_no()}")
            for column, value in zip(columns, row):
                pdf.cell(column.width, ROW_HEIGHT, pdf_safe_text(value), border=1, align=column.cell_align)
            pdf.ln(ROW_HEIGHT)
            drawn += 1

        return drawn

    def _draw_header_row(self, pdf: FPDF, columns: Sequence[Column]) -> None:
        for column in columns:
            pdf.cell(column.width, ROW_HEIGHT, column.title, border=1, align=column.header_align)
        pdf.ln(ROW_HEIGHT)

    def _multi_line(self, pdf: FPDF, text: str) -> None:
        pdf.multi_cell(0, 10, pdf_safe_text(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def _money(self, amount) -> str:
        return format_currency(amount, self.currency_symbol)
