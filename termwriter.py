"""Write terms as text, optionally quoted so that they can be read back."""

import re
from terms import Var, Struct, operators, prefix_operators

__all__ = ["write_term", "number_chars", "atom_needs_quotes"]

symbol_chars = "#$&*+-./:<=>?@^~\\"
solo_atoms = frozenset(["[]", "{}", "!", ";"])
letter_digit_atom = re.compile(r"[a-z][a-zA-Z0-9_]*\Z")
symbol_char_atom = re.compile(r"[#$&*+\-./:<=>?@^~\\]+\Z")

control_escapes = {
    "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\a": "\\a", "\b": "\\b",
    "\f": "\\f", "\r": "\\r", "\v": "\\v", "\0": "\\0\\",
}
for code in list(range(32)) + [127]:
    control_escapes.setdefault(chr(code), "\\x%x\\" % code)
atom_escapes = str.maketrans(dict(control_escapes, **{"'": "\\'"}))
string_escapes = str.maketrans(dict(control_escapes, **{'"': '\\"'}))

def atom_needs_quotes(name):
    if name in solo_atoms or letter_digit_atom.match(name):
        return False
    return not (symbol_char_atom.match(name) and name != ".")

def number_chars(n):
    """Return the canonical text of the number n: decimal digits for
    integers, the shortest round-trip representation for floats."""
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise TypeError("expected a number, got %r" % (n,))
    if isinstance(n, int):
        return str(n)
    s = repr(n)
    if "e" in s:
        (mantissa, exponent) = s.split("e")
        if "." not in mantissa:
            mantissa += ".0"
        s = "%se%d" % (mantissa, int(exponent))
    return s

def fuse(left, right):
    """Would left and right run together into a single token?"""
    return bool(left and right) and \
        left[-1] in symbol_chars and right[0] in symbol_chars

class TermWriter(object):
    def __init__(self, quoted=False, variable_names=None):
        self.quoted = quoted
        self.variable_names = variable_names or {}

    def atom(self, name):
        if self.quoted and atom_needs_quotes(name):
            return "'%s'" % name.translate(atom_escapes)
        return name

    def write(self, term, priority=1200):
        if isinstance(term, Var):
            return self.variable_names.get(term) or repr(term)
        elif isinstance(term, bool):
            return "true" if term else "false"
        elif isinstance(term, (int, float)):
            return number_chars(term)
        elif isinstance(term, str):
            return self.atom(term)
        elif isinstance(term, (list, tuple)):
            return self.write_list(list(term), "[]")
        elif isinstance(term, Struct):
            if term.indicator == (".", 2):
                return self.cons(term)
            elif term.indicator == ("{}", 1):
                return "{%s}" % self.write(term.args[0])
            elif term.arity == 2 and term.name in operators:
                return self.infix(term, priority)
            elif term.arity == 1 and term.name in prefix_operators:
                return self.prefix(term, priority)
            else:
                return "%s(%s)" % (self.atom(term.name),
                                   ",".join([self.write(arg, 999)
                                             for arg in term.args]))
        else:
            raise TypeError("cannot write %r as a term" % (term,))

    def cons(self, term):
        items = []
        while isinstance(term, Struct) and term.indicator == (".", 2):
            items.append(term.args[0])
            term = term.args[1]
        if isinstance(term, list):
            items.extend(term)
            term = "[]"
        return self.write_list(items, term)

    def write_list(self, items, tail):
        if not items:
            return self.write(tail, 999)
        if self.quoted and tail == "[]" and \
                all(isinstance(x, str) and len(x) == 1 for x in items):
            return '"%s"' % "".join(items).translate(string_escapes)
        s = ",".join([self.write(x, 999) for x in items])
        if tail != "[]":
            s += "|" + self.write(tail, 999)
        return "[%s]" % s

    def operand(self, term, priority):
        s = self.write(term, priority)
        if isinstance(term, str) and \
                (term in operators or term in prefix_operators):
            return "(%s)" % s
        return s

    def infix(self, term, priority):
        (p, type) = operators[term.name]
        left = self.operand(term.args[0], p - 1 if type[0] == "x" else p)
        right = self.operand(term.args[1], p - 1 if type[2] == "x" else p)
        if term.name in (",", "|"):
            op = term.name
        else:
            op = self.atom(term.name)
        if letter_digit_atom.match(op):
            s = "%s %s %s" % (left, op, right)
        else:
            s = left + (" " if fuse(left, op) else "") + op
            s += (" " if fuse(op, right) else "") + right
        return "(%s)" % s if p > priority else s

    def prefix(self, term, priority):
        (p, type) = prefix_operators[term.name]
        (arg,) = term.args
        operand = self.operand(arg, p - 1 if type == "fx" else p)
        op = self.atom(term.name)
        if (isinstance(arg, (int, float)) and not isinstance(arg, bool)) or \
                fuse(op, operand) or operand.startswith("("):
            s = op + " " + operand
        else:
            s = op + operand
        return "(%s)" % s if p > priority else s

def write_term(term, quoted=False, variable_names=None):
    """Return the text of term.  With quoted, atoms and strings are quoted
    where necessary to read them back; variable_names maps variables to
    the names to print for them."""
    return TermWriter(quoted, variable_names).write(term)
