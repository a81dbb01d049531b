"""Order export functionality."""

import io
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import pandas as pd

from ..config import EXPORT_COLUMNS, config, get_logger
from ..listview.models import Order

logger = get_logger("export")

# Format name -> file extension
EXPORT_FORMATS: Dict[str, str] = {
    "csv": "csv",
    "tsv": "xls",
    "json": "json",
    "xlsx": "xlsx",
}

MEDIA_TYPES: Dict[str, str] = {
    "csv": "text/csv",
    "tsv": "application/vnd.ms-excel",
    "json": "application/json",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}

COLUMN_WIDTHS: Dict[str, int] = {
    "ref": 10,
    "created": 18,
    "customer": 24,
    "products": 32,
    "start": 18,
    "end": 18,
    "distribution": 26,
    "delivery": 16,
    "price": 14,
    "department": 20,
}


class OrderExporter:
    """Export orders to CSV, tab-delimited, JSON and Excel payloads."""

    def __init__(self, output_dir: Optional[Path] = None):
        """
        Initialize exporter.

        Args:
            output_dir: Directory for file exports.
        """
        self.output_dir = Path(output_dir or config.data.exports_path)

    def to_dataframe(self, orders: Iterable[Order], columns: Optional[List[str]] = None) -> pd.DataFrame:
        """
        Build a DataFrame of orders in export column order.

        Args:
            orders: Orders to export, in the order they should appear.
            columns: Columns to include (the standard export columns if None).
        """
        columns = columns or EXPORT_COLUMNS
        records = [order.to_record() for order in orders]
        df = pd.DataFrame.from_records(records, columns=columns)
        return df.astype(object).where(df.notna(), "")

    def export_to_csv_buffer(self, orders: Iterable[Order]) -> io.StringIO:
        """Comma-separated export with a header row."""
        buffer = io.StringIO()
        self.to_dataframe(orders).to_csv(buffer, index=False, lineterminator="\n")
        buffer.seek(0)
        return buffer

    def export_to_tsv_buffer(self, orders: Iterable[Order]) -> io.StringIO:
        """Tab-delimited export, opened by spreadsheet tools as .xls."""
        buffer = io.StringIO()
        self.to_dataframe(orders).to_csv(buffer, index=False, sep="\t", lineterminator="\n")
        buffer.seek(0)
        return buffer

    def export_to_json_buffer(self, orders: Iterable[Order]) -> io.StringIO:
        """Full order records as a pretty-printed JSON array."""
        records = [order.to_record() for order in orders]
        buffer = io.StringIO()
        pd.DataFrame.from_records(records).to_json(
            buffer, orient="records", indent=2, force_ascii=False
        )
        buffer.seek(0)
        return buffer

    def export_to_excel_buffer(self, orders: Iterable[Order], sheet_name: str = "Orders") -> io.BytesIO:
        """
        Export orders to a formatted Excel workbook in memory.

        Args:
            orders: Orders to export.
            sheet_name: Worksheet name.

        Returns:
            BytesIO buffer with Excel data.
        """
        df = self.to_dataframe(orders)
        buffer = io.BytesIO()

        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=sheet_name, index=False)
            self._format_sheet(writer.sheets[sheet_name], COLUMN_WIDTHS)

        buffer.seek(0)
        return buffer

    def export(self, orders: Iterable[Order], fmt: str) -> Union[io.StringIO, io.BytesIO]:
        """
        Export orders in a named format.

        Raises:
            ValueError: If the format is not supported.
        """
        writers = {
            "csv": self.export_to_csv_buffer,
            "tsv": self.export_to_tsv_buffer,
            "json": self.export_to_json_buffer,
            "xlsx": self.export_to_excel_buffer,
        }
        if fmt not in writers:
            raise ValueError(f"Unsupported export format: {fmt}")
        orders = list(orders)
        buffer = writers[fmt](orders)
        logger.info(f"Exported {len(orders)} orders as {fmt}")
        return buffer

    def export_to_file(
        self,
        orders: Iterable[Order],
        fmt: str = "csv",
        filename: Optional[str] = None,
    ) -> Path:
        """
        Export orders to a file in the export directory.

        Args:
            orders: Orders to export.
            fmt: One of csv, tsv, json, xlsx.
            filename: Output filename (``orders.<ext>`` if None).

        Returns:
            Path to exported file.
        """
        buffer = self.export(orders, fmt)
        filename = filename or self.generate_filename(extension=EXPORT_FORMATS[fmt], include_timestamp=False)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.output_dir / filename
        if isinstance(buffer, io.BytesIO):
            filepath.write_bytes(buffer.getvalue())
        else:
            filepath.write_text(buffer.getvalue(), encoding="utf-8")

        logger.info(f"Wrote export to {filepath}")
        return filepath

    def _format_sheet(self, worksheet, column_widths: Dict[str, int]) -> None:
        """Apply formatting to Excel worksheet."""
        from openpyxl.styles import Alignment, Font, PatternFill

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color="1F2937", end_color="1F2937", fill_type="solid")

        for cell in worksheet[1]:
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center")
            width = column_widths.get(cell.value)
            if width:
                worksheet.column_dimensions[cell.column_letter].width = width

        worksheet.freeze_panes = "A2"
        worksheet.auto_filter.ref = worksheet.dimensions

    def generate_filename(
        self,
        base_name: str = "orders",
        extension: str = "csv",
        include_timestamp: bool = True,
    ) -> str:
        """Generate export filename."""
        if include_timestamp:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            return f"{base_name}_{timestamp}.{extension}"
        return f"{base_name}.{extension}"
