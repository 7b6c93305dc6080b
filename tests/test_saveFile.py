import contextlib
import io
import os
import shutil
import sys
import tempfile
import unittest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from catalan import catalan_number
from matrix_chain_multiplication import matrix_chain_order, min_cost, optimal_parens
from saveFile import (
    cost_table_frame,
    display_tables,
    format_report,
    save_report,
    split_table_frame,
)


class TestTables(unittest.TestCase):
    def setUp(self):
        self.m, self.s = matrix_chain_order([10, 20, 30, 40, 30])

    def test_cost_frame(self):
        frame = cost_table_frame(self.m)
        self.assertEqual(list(frame.index), [1, 2, 3, 4])
        self.assertEqual(list(frame.columns), [1, 2, 3, 4])
        self.assertEqual(frame.loc[1, 4], 30000)
        self.assertEqual(frame.loc[2, 2], 0)
        self.assertEqual(frame.loc[3, 1], "-")

    def test_split_frame(self):
        frame = split_table_frame(self.s)
        self.assertEqual(frame.loc[1, 4], 3)
        self.assertEqual(frame.loc[1, 3], 2)
        self.assertEqual(frame.loc[2, 2], "-")
        self.assertEqual(frame.loc[4, 1], "-")

    def test_display_tables(self):
        out = io.StringIO()
        display_tables(self.m, self.s, show=True, out=out)
        text = out.getvalue()
        self.assertIn("30000", text)
        self.assertIn("Bảng m", text)
        self.assertIn("Bảng s", text)

    def test_display_tables_hidden(self):
        out = io.StringIO()
        display_tables(self.m, self.s, show=False, out=out)
        self.assertEqual(out.getvalue(), "")

    def test_display_tables_default_stdout(self):
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            display_tables(self.m, self.s)
        self.assertIn("30000", buffer.getvalue())


class TestReport(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_format_order(self):
        lines = format_report([10, 20, 30], 6000, "(A1 × A2)", 2).splitlines()
        self.assertEqual(lines[0], "Matrix dimensions (P): 10 20 30")
        self.assertEqual(lines[1], "")
        self.assertEqual(lines[2], "Minimum multiplication cost: 6000")
        self.assertEqual(lines[3], "Optimal parenthesization: (A1 × A2)")
        self.assertEqual(lines[4], "Catalan number (n = 2): 2")

    def test_save_report(self):
        p = [10, 20, 30, 40, 30]
        m, s = matrix_chain_order(p)
        filename = os.path.join(self.tmpdir, "result.txt")
        save_report(filename, p, min_cost(m), optimal_parens(s, 1, 4), catalan_number(4))

        with open(filename, encoding="utf-8") as f:
            content = f.read()
        self.assertTrue(content.startswith("Matrix dimensions (P): 10 20 30 40 30\n\n"))
        self.assertIn("Minimum multiplication cost: 30000", content)
        self.assertIn("Catalan number (n = 4): 14", content)

    def test_unwritable_path(self):
        filename = os.path.join(self.tmpdir, "missing", "result.txt")
        with self.assertRaises(OSError):
            save_report(filename, [10, 20], 0, "A1", 1)


if __name__ == "__main__":
    unittest.main()
