"""A small model of logic-program terms.

Atoms are represented by Python strings, numbers by ints and floats, and
proper lists by Python lists.  Variables are Var instances, compared by
identity; compound terms are Struct instances, compared structurally.
Lists may also be built from "."/2 cells, which allows partial lists:

    Struct(".", "a", Struct(".", "b", T))    # [a,b|T]
"""

from itertools import count

__all__ = ["Var", "Struct", "term_variables", "fabricate_var_name",
           "variable_names", "clause", "rule", "conjunction", "disjunction",
           "if_then_else", "operators", "prefix_operators"]

class Var(object):
    """A logic variable."""

    serials = count()

    def __init__(self):
        self.serial = next(Var.serials)

    def __repr__(self):
        return "_%d" % self.serial

class Struct(object):
    """A compound term name(args...)."""

    def __init__(self, name, *args):
        if not isinstance(name, str):
            raise TypeError("functor name must be an atom")
        if not args:
            raise ValueError("compound terms need at least one argument")
        self.name = name
        self.args = args

    @property
    def arity(self):
        return len(self.args)

    @property
    def indicator(self):
        return (self.name, len(self.args))

    def __eq__(self, other):
        return isinstance(other, Struct) and \
            self.name == other.name and self.args == other.args

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.name, self.args))

    def __repr__(self):
        return "Struct(%s)" % ", ".join(map(repr, (self.name,) + self.args))

def subterms(term):
    """Yield term and all of its subterms, depth-first, left to right."""
    stack = [term]
    while stack:
        t = stack.pop()
        yield t
        if isinstance(t, Struct):
            stack.extend(reversed(t.args))
        elif isinstance(t, (list, tuple)):
            stack.extend(reversed(t))

def term_variables(term):
    """Return the distinct variables of term in order of first
    occurrence."""
    seen = set()
    variables = []
    for t in subterms(term):
        if isinstance(t, Var) and id(t) not in seen:
            seen.add(id(t))
            variables.append(t)
    return variables

def fabricate_var_name(n):
    """Return the n-th variable name of the sequence A, B, ..., Z, A1, ...,
    Z1, A2, ..."""
    (suffix, letter) = divmod(n, 26)
    return chr(ord("A") + letter) + (str(suffix) if suffix else "")

def variable_names(term):
    """Map each variable of term to a fresh name, numbered from 0 in order
    of first occurrence."""
    return dict((v, fabricate_var_name(i))
                for (i, v) in enumerate(term_variables(term)))

def conjunction(*goals):
    """Return the right-nested conjunction of goals; true if there are
    none."""
    if not goals:
        return "true"
    body = goals[-1]
    for goal in reversed(goals[:-1]):
        body = Struct(",", goal, body)
    return body

def disjunction(*goals):
    """Return the right-nested disjunction of goals; fail if there are
    none."""
    if not goals:
        return "fail"
    body = goals[-1]
    for goal in reversed(goals[:-1]):
        body = Struct(";", goal, body)
    return body

def if_then_else(condition, then, otherwise):
    return Struct(";", Struct("->", condition, then), otherwise)

def clause(head, *goals):
    """Return the clause head :- goals, or head itself for a fact."""
    return Struct(":-", head, conjunction(*goals)) if goals else head

def rule(head, *body):
    """Return the grammar rule head --> body."""
    return Struct("-->", head, conjunction(*body))

# Operator table: name -> (priority, type).
operators = {
    ":-": (1200, "xfx"), "-->": (1200, "xfx"),
    ";": (1100, "xfy"), "|": (1100, "xfy"),
    "->": (1050, "xfy"), "*->": (1050, "xfy"),
    ",": (1000, "xfy"),
    ":=": (990, "xfx"),
    "=": (700, "xfx"), "\\=": (700, "xfx"), "==": (700, "xfx"),
    "\\==": (700, "xfx"), "@<": (700, "xfx"), "@>": (700, "xfx"),
    "@=<": (700, "xfx"), "@>=": (700, "xfx"), "=..": (700, "xfx"),
    "is": (700, "xfx"), "=:=": (700, "xfx"), "=\\=": (700, "xfx"),
    "<": (700, "xfx"), ">": (700, "xfx"), "=<": (700, "xfx"),
    ">=": (700, "xfx"),
    ":": (600, "xfy"),
    "+": (500, "yfx"), "-": (500, "yfx"), "/\\": (500, "yfx"),
    "\\/": (500, "yfx"), "xor": (500, "yfx"),
    "*": (400, "yfx"), "/": (400, "yfx"), "//": (400, "yfx"),
    "rem": (400, "yfx"), "mod": (400, "yfx"), "div": (400, "yfx"),
    "<<": (400, "yfx"), ">>": (400, "yfx"),
    "rdiv": (400, "yfx"),
    "**": (200, "xfx"), "^": (200, "xfy"),
}

prefix_operators = {
    ":-": (1200, "fx"), "?-": (1200, "fx"),
    "\\+": (900, "fy"),
    "-": (200, "fy"), "+": (200, "fy"), "\\": (200, "fy"),
}
