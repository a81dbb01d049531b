"""Tests for order export module."""

import io
import json

import pytest
from openpyxl import load_workbook

from orderbrowser.analysis import OrderExporter
from orderbrowser.config import EXPORT_COLUMNS


@pytest.fixture
def exporter(tmp_path):
    return OrderExporter(output_dir=tmp_path)


class TestOrderExporter:
    """Tests for OrderExporter class."""

    def test_dataframe_columns(self, exporter, order_pair):
        df = exporter.to_dataframe(order_pair)
        assert list(df.columns) == EXPORT_COLUMNS
        assert list(df["ref"]) == ["A1", "A2"]

    def test_csv_buffer(self, exporter, sample_store):
        """Test CSV export keeps column order and quotes commas."""
        orders = [sample_store.get("TS49"), sample_store.get("QH29")]
        buffer = exporter.export_to_csv_buffer(orders)

        assert isinstance(buffer, io.StringIO)
        lines = buffer.getvalue().strip().split("\n")
        assert lines[0] == ",".join(EXPORT_COLUMNS)
        assert lines[1].startswith("TS49,13 Jul 2020 20:00,Merethe Meinig,")
        assert '"Elite Direto XR, Schwalbe Ins…"' in lines[1]
        assert lines[2].startswith("QH29,")

    def test_empty_csv_has_header_only(self, exporter):
        content = exporter.export_to_csv_buffer([]).getvalue().strip()
        assert content == ",".join(EXPORT_COLUMNS)

    def test_missing_tag_is_blank(self, exporter, make_order):
        line = exporter.export_to_csv_buffer([make_order("N1", product_tag=None)]).getvalue().split("\n")[1]
        assert line.endswith(",Camilla,")

    def test_tsv_buffer(self, exporter, order_pair):
        lines = exporter.export_to_tsv_buffer(order_pair).getvalue().strip().split("\n")
        assert lines[0] == "\t".join(EXPORT_COLUMNS)
        assert lines[2].split("\t")[0] == "A2"

    def test_json_buffer_has_full_records(self, exporter, order_pair):
        data = json.loads(exporter.export_to_json_buffer(order_pair).getvalue())
        assert [record["ref"] for record in data] == ["A1", "A2"]
        assert data[0]["createdBy"] == "Camilla"
        assert "notes" in data[0]

    def test_excel_buffer(self, exporter, order_pair):
        buffer = exporter.export_to_excel_buffer(order_pair)
        assert isinstance(buffer, io.BytesIO)

        sheet = load_workbook(buffer)["Orders"]
        assert [cell.value for cell in sheet[1]] == EXPORT_COLUMNS
        assert sheet["A2"].value == "A1"
        assert sheet.freeze_panes == "A2"
        assert sheet["A1"].font.bold

    def test_unsupported_format(self, exporter, order_pair):
        with pytest.raises(ValueError):
            exporter.export(order_pair, "pdf")

    @pytest.mark.parametrize("fmt, name", [("csv", "orders.csv"), ("tsv", "orders.xls"), ("xlsx", "orders.xlsx")])
    def test_export_to_file(self, exporter, order_pair, tmp_path, fmt, name):
        path = exporter.export_to_file(order_pair, fmt)
        assert path == tmp_path / name
        assert path.stat().st_size > 0

    def test_generate_filename(self, exporter):
        assert exporter.generate_filename(extension="json", include_timestamp=False) == "orders.json"
        assert exporter.generate_filename().startswith("orders_")
