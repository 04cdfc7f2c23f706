from __future__ import annotations

import io
import unittest

from revenue_pipeline.stage1.table import Table
from revenue_pipeline.stage2.renderer import NO_DATA_MESSAGE, TITLE, TableRenderer


def make_table(*rows) -> Table:
    table = Table()
    table.set_header(["ItemID", "Price", "UnitsSold"])
    for row in rows:
        table.append_row(row)
    return table


class RendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self.renderer = TableRenderer()

    def test_empty_table_renders_only_message(self) -> None:
        self.assertEqual(self.renderer.render_lines(Table()), [NO_DATA_MESSAGE])

    def test_header_without_rows_still_renders_only_message(self) -> None:
        self.assertEqual(self.renderer.render(make_table()), NO_DATA_MESSAGE + "\n")

    def test_fixed_width_layout(self) -> None:
        lines = self.renderer.render_lines(make_table(["101", "49.99", "150"]))
        self.assertEqual(lines[0], TITLE)
        self.assertEqual(lines[1], "ItemID".ljust(15) + "Price".ljust(15) + "UnitsSold".ljust(15))
        self.assertEqual(lines[2], "-" * 45)
        self.assertEqual(lines[3], "101".ljust(15) + "49.99".ljust(15) + "150".ljust(15))

    def test_long_cells_are_not_truncated(self) -> None:
        long_cell = "A-very-long-category-name"
        lines = self.renderer.render_lines(make_table([long_cell, "1", "2"]))
        self.assertTrue(lines[3].startswith(long_cell))
        self.assertEqual(lines[3], long_cell + "1".ljust(15) + "2".ljust(15))

    def test_short_row_prints_only_its_cells(self) -> None:
        lines = self.renderer.render_lines(make_table(["101"]))
        self.assertEqual(lines[3], "101".ljust(15))

    def test_long_row_prints_extra_cells(self) -> None:
        lines = self.renderer.render_lines(make_table(["1", "2", "3", "4"]))
        self.assertEqual(len(lines[3]), 60)
        self.assertEqual(lines[3][45:], "4".ljust(15))

    def test_empty_row_renders_blank_line(self) -> None:
        lines = self.renderer.render_lines(make_table([]))
        self.assertEqual(lines[3], "")

    def test_column_width_is_configurable(self) -> None:
        renderer = TableRenderer(config={"column_width": 8})
        lines = renderer.render_lines(make_table(["101", "49.99", "150"]))
        self.assertEqual(lines[2], "-" * 24)
        self.assertEqual(lines[3], "101     49.99   150     ")

    def test_print_table_writes_to_stream(self) -> None:
        out = io.StringIO()
        table = make_table(["101", "49.99", "150"])
        self.renderer.print_table(table, out)
        self.assertEqual(out.getvalue(), self.renderer.render(table))
        self.assertTrue(out.getvalue().endswith("\n"))


if __name__ == "__main__":
    unittest.main()
