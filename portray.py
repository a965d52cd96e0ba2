"""Print terms, and in particular clauses, as readable source text.

Clause bodies are laid out one goal per line.  Conjunctions keep the
indentation of their context; disjunctions and if-then-else are
bracketed, with their branches indented past the opening bracket:

    h(A) :-
       (  a(A) ->
          b
       ;  c
       ).

Indentation is produced by format_ with the directive ~t~*|, i.e., glue
stretched up to a tab stop."""

import sys
from io import StringIO
from loguru import logger
from format import format_
from terms import Struct, variable_names
from termwriter import write_term
import printervars

__all__ = ["ClausePrinter", "portray_clause", "portray_clause_"]

logger.disable(__name__)

def is_control(term, name):
    return isinstance(term, Struct) and term.indicator == (name, 2)

class ClausePrinter(object):
    """Render a single term, naming its variables A, B, ... in order of
    appearance."""

    bracket = "(  "
    alternative = ";  "

    def __init__(self, term):
        self.term = term
        self.variable_names = variable_names(term)
        self.stream = StringIO()

    def write(self, string):
        self.stream.write(string)

    def literal(self, term):
        self.write(write_term(term, quoted=True,
                              variable_names=self.variable_names))

    def indent_to(self, column, indent):
        self.write(format_("~t~*|", [indent - column]))

    def portray(self):
        """Return the text of the term, terminated by a full stop and a
        newline."""
        term = self.term
        if is_control(term, ":-") or is_control(term, "-->"):
            (head, body) = term.args
            self.literal(head)
            self.write(" %s\n" % term.name)
            self.body(body, 0, printervars.clause_indent)
        else:
            self.literal(term)
        self.write(".\n")
        return self.stream.getvalue()

    def body(self, term, column, indent):
        """Write a body goal, the cursor being at column and the goal
        belonging at indent."""
        if is_control(term, ","):
            (a, b) = term.args
            self.body(a, column, indent)
            self.write(",\n")
            self.body(b, 0, indent)
        elif is_control(term, ";"):
            (a, b) = term.args
            self.indent_to(column, indent)
            self.write(self.bracket)
            inner = indent + len(self.bracket)
            if is_control(a, "->"):
                (condition, then) = a.args
                self.body(condition, inner, inner)
                self.write(" ->\n")
                self.body(then, 0, inner)
            else:
                self.body(a, inner, inner)
            self.write("\n")
            self.else_branch(b, inner, indent)
        else:
            self.indent_to(column, indent)
            self.literal(term)

    def else_branch(self, term, column, indent):
        self.indent_to(0, indent)
        self.write(self.alternative)
        self.body(term, column, column)
        self.write("\n")
        self.indent_to(0, indent)
        self.write(")")

def portray_clause_(term):
    """Return term as clause text, ending in ".\\n"."""
    return ClausePrinter(term).portray()

def portray_clause(term, stream=None):
    """Write term as a clause to stream, printervars.output, or standard
    output."""
    s = portray_clause_(term)
    if stream is None:
        stream = printervars.output if printervars.output is not None \
                                    else sys.stdout
    logger.debug("portraying {} lines to {!r}", s.count("\n"), stream)
    stream.write(s)
