import unittest
from layout import Cell, Chars, Glue, NEWLINE, CellBuilder, format_cell, \
    format_cells

class CellTest(unittest.TestCase):
    def testLength(self):
        cell = Cell(0, 10, [Chars("ab"), Glue(" ", 0), Chars("cde")])
        self.assertEqual(5, cell.length)

    def testNoGlue(self):
        # Without glue, a cell is never stretched or shrunk.
        for end in (0, 2, 10, 100):
            cell = Cell(0, end, [Chars("ab"), Chars("c")])
            self.assertEqual("abc", format_cell(cell))
            self.assertEqual([], cell.widths)

    def testDistribute(self):
        for (space, n) in ((3, 2), (7, 3), (17, 4), (10, 5), (1, 3)):
            elements = [Glue(" ", i) for i in range(n)]
            cell = Cell(4, 4 + space, elements)
            widths = cell.distribute()
            self.assertEqual(space, sum(widths))
            self.assertEqual([space // n] * (n - 1), widths[:-1])
            self.assertEqual(space // n + space % n, widths[-1])

    def testNoSpace(self):
        cell = Cell(0, 3, [Glue(" ", 0), Chars("abcd"), Glue(".", 1)])
        self.assertEqual([0, 0], cell.distribute())
        self.assertEqual("abcd", format_cell(cell))

    def testFill(self):
        cell = Cell(0, 6, [Glue(".", 0), Chars("ab"), Glue("-", 1)])
        self.assertEqual("..ab--", format_cell(cell))
        cell = Cell(0, 7, [Glue(".", 0), Chars("ab"), Glue("-", 1)])
        self.assertEqual("..ab---", format_cell(cell))

    def testNewline(self):
        self.assertEqual("\n", format_cell(NEWLINE))

    def testFormatCells(self):
        cells = [Cell(0, 5, [Chars("a"), Glue(" ", 0)]),
                 Cell(5, 8, [Glue(" ", 0), Chars("b")]),
                 NEWLINE,
                 Cell(0, 0, [Chars("c")])]
        self.assertEqual("a      b\nc", format_cells(cells))

class CellBuilderTest(unittest.TestCase):
    def testEmptyCells(self):
        builder = CellBuilder()
        builder.column(4)
        builder.relative_column(2)
        self.assertEqual([], builder.finish())
        self.assertEqual(6, builder.tab)

    def testColumns(self):
        builder = CellBuilder()
        builder.chars("a")
        builder.glue()
        builder.column(4)
        builder.glue("*")
        builder.chars("")
        builder.relative_column(3)
        self.assertEqual([Cell(0, 4, [Chars("a"), Glue(" ", 0)]),
                          Cell(4, 7, [Glue("*", 0)])],
                         builder.finish())

    def testNewlines(self):
        builder = CellBuilder()
        builder.column(8)
        builder.chars("x")
        builder.newlines(2)
        self.assertEqual(0, builder.tab)
        builder.chars("y")
        self.assertEqual([Cell(8, 8, [Chars("x")]), NEWLINE, NEWLINE,
                          Cell(0, 0, [Chars("y")])],
                         builder.finish())

if __name__ == "__main__":
    unittest.main()
