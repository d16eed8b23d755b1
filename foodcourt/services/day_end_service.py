"""
Day-end export and purge.

Every order currently stored is flattened into one spreadsheet row, the
workbook is written to the reports directory as a backup, and only then are
the exported orders and their lines deleted in a single transaction.
"""
import io
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from sqlalchemy.orm import Session

from foodcourt import crud
from foodcourt.core.config import settings
from foodcourt.core.exceptions import DayEndExportError, NotFoundError
from foodcourt.database import unit_of_work
from foodcourt.db.models.order import Order, OrderItem

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

HEADERS = [
    "Order ID",
    "Table Number",
    "Total",
    "Created At",
    "Customer Name",
    "Customer Phone",
    "Waiter Name",
    "Waiter Phone",
    "Items",
]
COLUMN_WIDTHS = [10, 12, 12, 20, 20, 15, 15, 15, 50]
SHEET_TITLE = "Orders"
ITEMS_SEPARATOR = " | "


@dataclass
class DayEndReport:
    filename: str
    path: str
    content: bytes
    order_count: int
    purged_count: int


def cents_to_amount(cents: int) -> float:
    return round(cents / 100, 2)


def isoformat_utc(value: datetime) -> str:
    # Mesmo formato do toISOString(): milissegundos e sufixo Z
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


class DayEndService:
    def __init__(self, reports_dir: Optional[str] = None, currency_symbol: Optional[str] = None):
        self._reports_dir = reports_dir
        self._currency_symbol = currency_symbol

    @property
    def reports_dir(self) -> str:
        return self._reports_dir or settings.REPORTS_DIR

    @property
    def currency_symbol(self) -> str:
        if self._currency_symbol is not None:
            return self._currency_symbol
        return settings.CURRENCY_SYMBOL

    # --- Montagem das linhas ---
    def format_line(self, line: OrderItem) -> str:
        amount = line.price_cents_at_order * line.quantity / 100
        return f"{line.name} x {line.quantity} = {self.currency_symbol}{amount:.2f}"

    def build_row(self, db_order: Order) -> list:
        created_at = isoformat_utc(db_order.created_at) if db_order.created_at else ""
        return [
            db_order.id,
            db_order.table_number,
            cents_to_amount(db_order.total_cents),
            created_at,
            db_order.customer_name or "",
            db_order.customer_phone or "",
            db_order.waiter_name or "",
            db_order.waiter_phone or "",
            ITEMS_SEPARATOR.join(self.format_line(line) for line in db_order.items),
        ]

    def build_rows(self, orders: Sequence[Order]) -> List[list]:
        return [self.build_row(db_order) for db_order in orders]

    # --- Planilha ---
    def build_workbook(self, rows: Sequence[list]) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_TITLE

        ws.append(HEADERS)
        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
        for cell in ws[1]:
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center")

        for row in rows:
            ws.append(row)

        for index, width in enumerate(COLUMN_WIDTHS, start=1):
            ws.column_dimensions[get_column_letter(index)].width = width

        output = io.BytesIO()
        wb.save(output)
        return output.getvalue()

    def report_filename(self, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        timestamp = now.strftime("%Y-%m-%dT%H-%M-%S") + f"-{now.microsecond // 1000:03d}"
        return f"day_end_{timestamp}.xlsx"

    def write_report(self, filename: str, content: bytes) -> str:
        """
        Write the backup without ever replacing an existing one; a name
        already taken gets a numeric suffix. Returns the path written.
        """
        os.makedirs(self.reports_dir, exist_ok=True)
        stem, ext = os.path.splitext(filename)
        candidate = filename
        suffix = 0
        while True:
            path = os.path.join(self.reports_dir, candidate)
            try:
                with open(path, "xb") as fh:
                    fh.write(content)
                return path
            except FileExistsError:
                suffix += 1
                candidate = f"{stem}_{suffix}{ext}"

    # --- Operação completa ---
    def run(self, db: Session, *, now: Optional[datetime] = None) -> DayEndReport:
        """
        Export every order then purge exactly the exported ones.

        The purge only starts once the backup file is on disk; if building
        or writing the workbook fails, DayEndExportError is raised and no
        row is deleted. A purge failure propagates after rollback and leaves
        the backup file in place. Orders created while the export runs are
        not deleted; they belong to the next day-end.
        """
        orders = crud.order.get_all_for_export(db)
        filename = self.report_filename(now)
        try:
            content = self.build_workbook(self.build_rows(orders))
            path = self.write_report(filename, content)
            filename = os.path.basename(path)
        except Exception as e:
            logger.error(f"Falha ao exportar fechamento do dia {filename}: {e}")
            raise DayEndExportError("day-end export failed") from e

        logger.info("Fechamento do dia: %s pedidos exportados para %s", len(orders), path)

        try:
            with unit_of_work(db):
                purged = crud.order.purge(db, order_ids=[db_order.id for db_order in orders])
        except Exception as e:
            logger.error(f"Exportação {path} gravada mas limpeza dos pedidos falhou: {e}")
            raise

        logger.info("Fechamento do dia: %s pedidos removidos", purged)
        return DayEndReport(
            filename=filename,
            path=path,
            content=content,
            order_count=len(orders),
            purged_count=purged,
        )

    # --- Backups gravados ---
    def list_reports(self) -> List[dict]:
        if not os.path.isdir(self.reports_dir):
            return []
        reports = []
        for entry in os.scandir(self.reports_dir):
            if entry.is_file() and entry.name.startswith("day_end_") and entry.name.endswith(".xlsx"):
                stat = entry.stat()
                reports.append({
                    "filename": entry.name,
                    "size_bytes": stat.st_size,
                    "modified_at": datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                })
        # O nome carrega o timestamp, então a ordem alfabética é cronológica
        return sorted(reports, key=lambda r: r["filename"], reverse=True)

    def report_path(self, filename: str) -> str:
        base = os.path.abspath(self.reports_dir)
        path = os.path.abspath(os.path.join(base, filename))
        if os.path.dirname(path) != base or not os.path.isfile(path):
            raise NotFoundError("report", filename)
        return path


day_end_service = DayEndService()
