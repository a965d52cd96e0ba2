"""Cells, glue, and the layout pass that turns them into text.

A format string is first broken into cells: the stretches of output
between two tab stops.  A cell holds fixed text (Chars) and elastic fill
(Glue).  How wide each piece of glue becomes is only known once the whole
cell has been seen, so the parser merely records a slot number for every
glue element; format_cell later fills in the cell's slots and renders."""

from collections import namedtuple

__all__ = ["Chars", "Glue", "Cell", "NEWLINE", "CellBuilder",
           "format_cell", "format_cells"]

Chars = namedtuple("Chars", "text")
Glue = namedtuple("Glue", "fill slot")

class Newline(object):
    """Sentinel for an explicit line break between cells."""

    def __repr__(self):
        return "NEWLINE"

NEWLINE = Newline()

class Cell(object):
    """The elements between the tab stops at columns start and end."""

    def __init__(self, start, end, elements):
        self.start = start
        self.end = end
        self.elements = tuple(elements)
        self.widths = [None] * sum(1 for e in self.elements
                                   if isinstance(e, Glue))

    def __repr__(self):
        return "Cell(%d, %d, %r)" % (self.start, self.end, list(self.elements))

    def __eq__(self, other):
        return isinstance(other, Cell) and \
            (self.start, self.end, self.elements) == \
            (other.start, other.end, other.elements)

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    @property
    def length(self):
        """Total length of the fixed text in this cell."""
        return sum(len(e.text) for e in self.elements if isinstance(e, Chars))

    def distribute(self):
        """Resolve the glue slots: share the free space evenly, giving any
        remainder to the last piece of glue.  Without free space, all glue
        collapses to nothing."""
        n = len(self.widths)
        if n == 0:
            return self.widths
        space = self.end - self.start - self.length
        if space <= 0:
            self.widths[:] = [0] * n
        else:
            (width, extra) = divmod(space, n)
            self.widths[:] = [width] * n
            self.widths[-1] += extra
        return self.widths

class CellBuilder(object):
    """Accumulates elements into cells as directives are applied.

    The builder tracks the current tab stop and the elements of the cell
    that is still open; a tab stop or newline closes that cell."""

    def __init__(self):
        self.tab = 0
        self.elements = []
        self.glue_count = 0
        self.cells = []

    def chars(self, text):
        if text:
            self.elements.append(Chars(text))

    def glue(self, fill=" "):
        self.elements.append(Glue(fill, self.glue_count))
        self.glue_count += 1

    def close(self, end):
        """Close the open cell at column end, if it has any elements."""
        if self.elements:
            self.cells.append(Cell(self.tab, end, self.elements))
        self.elements = []
        self.glue_count = 0

    def column(self, n):
        """Place a tab stop at column n."""
        self.close(n)
        self.tab = n

    def relative_column(self, n):
        """Place a tab stop n columns after the previous one."""
        self.column(self.tab + n)

    def newlines(self, n=1):
        self.close(self.tab)
        self.cells.extend([NEWLINE] * n)
        self.tab = 0

    def finish(self):
        self.close(self.tab)
        return self.cells

def format_element(element, cell):
    if isinstance(element, Glue):
        return element.fill * cell.widths[element.slot]
    else:
        return element.text

def format_cell(cell):
    """Return the text of a single cell or newline."""
    if cell is NEWLINE:
        return "\n"
    cell.distribute()
    return "".join([format_element(e, cell) for e in cell.elements])

def format_cells(cells):
    return "".join([format_cell(cell) for cell in cells])
