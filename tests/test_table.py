from __future__ import annotations

import unittest

from revenue_pipeline.errors import TableFrozenError
from revenue_pipeline.stage1.table import Table


def make_table() -> Table:
    table = Table()
    table.set_header(["ItemID", "Category", "Price", "UnitsSold", "Location"])
    table.append_row(["101", "Electronics", "49.99", "150", "East"])
    table.append_row(["102", "Books", "19.50", "300", "West"])
    return table


class TableTests(unittest.TestCase):
    def test_new_table_is_empty(self) -> None:
        table = Table()
        self.assertTrue(table.is_empty())
        self.assertEqual(table.row_count(), 0)
        self.assertEqual(table.header, ())

    def test_rows_keep_insertion_order(self) -> None:
        table = make_table()
        self.assertEqual(table.row_count(), 2)
        self.assertFalse(table.is_empty())
        self.assertEqual(table.row(0)[0], "101")
        self.assertEqual(table.row(1)[0], "102")

    def test_set_header_overwrites(self) -> None:
        table = Table()
        table.set_header(["a"])
        table.set_header(["b", "c"])
        self.assertEqual(table.header, ("b", "c"))

    def test_column_index_returns_zero_based_position(self) -> None:
        table = make_table()
        self.assertEqual(table.column_index("ItemID"), 0)
        self.assertEqual(table.column_index("Price"), 2)
        self.assertEqual(table.column_index("Location"), 4)

    def test_column_index_is_case_sensitive_and_exact(self) -> None:
        table = make_table()
        self.assertIsNone(table.column_index("price"))
        self.assertIsNone(table.column_index("Price "))
        self.assertIsNone(table.column_index("Revenue"))

    def test_column_index_returns_first_duplicate(self) -> None:
        table = Table()
        table.set_header(["Price", "Units", "Price"])
        self.assertEqual(table.column_index("Price"), 0)

    def test_column_index_on_empty_header(self) -> None:
        self.assertIsNone(Table().column_index("Price"))

    def test_ragged_rows_are_accepted(self) -> None:
        table = make_table()
        table.append_row(["103"])
        table.append_row(["104", "Clothing", "35.75", "220", "East", "extra"])
        self.assertEqual(len(table.row(2)), 1)
        self.assertEqual(len(table.row(3)), 6)

    def test_frozen_table_rejects_writes(self) -> None:
        table = make_table()
        table.freeze()
        self.assertTrue(table.frozen)
        with self.assertRaises(TableFrozenError):
            table.append_row(["999"])
        with self.assertRaises(TableFrozenError):
            table.set_header(["x"])
        self.assertEqual(table.row_count(), 2)

    def test_rows_are_not_aliased_to_caller_lists(self) -> None:
        cells = ["101", "Books"]
        table = Table()
        table.append_row(cells)
        cells[0] = "changed"
        self.assertEqual(table.row(0), ("101", "Books"))

    def test_to_dataframe_keeps_strings_and_pads_ragged_rows(self) -> None:
        table = make_table()
        table.append_row(["103", "Books"])
        table.append_row(["104", "Clothing", "35.75", "220", "East", "extra"])

        df = table.to_dataframe()

        self.assertEqual(len(df), 4)
        self.assertEqual(list(df.columns)[:5], ["ItemID", "Category", "Price", "UnitsSold", "Location"])
        self.assertEqual(list(df.columns)[5], 5)
        self.assertEqual(df.loc[0, "Price"], "49.99")
        self.assertIsNone(df.loc[2, "Price"])
        self.assertEqual(df.loc[3, 5], "extra")

    def test_to_dataframe_of_empty_table(self) -> None:
        df = Table().to_dataframe()
        self.assertEqual(len(df), 0)
        self.assertEqual(len(df.columns), 0)


if __name__ == "__main__":
    unittest.main()
