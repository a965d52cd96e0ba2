"""Format strings with tab stops and glue.

A format string is rendered in two passes.  The directives of the string
are applied left to right, consuming arguments and collecting text and glue
into cells (see the layout module); then each cell is laid out, stretching
its glue to reach the cell's tab stop.  The directives are:

    ~w    the next argument, written as by write/1
    ~q    the next argument, written as by writeq/1
    ~a    the next argument, which must be an atom
    ~s    the next argument, which must be a string (a list of chars)
    ~Nd   the next argument, an integer, with the last N digits after a
          decimal point; no decimal point if N is 0 or omitted
    ~ND   like ~Nd, with the digits to the left of the decimal point in
          comma-separated groups of three
    ~f    the next argument, a number, in its natural representation
    ~Nf   the next argument, a number, with exactly N digits after the
          decimal point (truncated or padded with zeros)
    ~i    ignore the next argument
    ~Nn   N newlines (default 1)
    ~N|   a tab stop at column N (default: the previous tab stop)
    ~N+   a tab stop N columns after the previous one (default 0)
    ~t    glue: fill the space of the cell with spaces
    ~`Ct  glue, filled with the character C
    ~~    the literal ~

The numeric argument N may instead be written *, which takes it from the
next argument.

    >>> format_("~s~n~`.t~w!~12|", ["hello", "there"])
    'hello\\n......there!'
"""

import decimal
import sys
from loguru import logger
from layout import CellBuilder, format_cells
from termwriter import write_term, number_chars
import printervars

__all__ = ["Formatter", "format", "format_", "cells", "fixed_point",
           "grouped", "float_fixed", "FormatError", "DomainError",
           "ArgumentMismatch", "UnknownDirective", "TypeMismatch"]

logger.disable(__name__)

class FormatError(Exception):
    """Base class for errors raised while formatting.  Like the error terms
    of Prolog, each carries the type of error and the culprit."""

    kind = "format_error"

    def __init__(self, type, culprit):
        super(FormatError, self).__init__(type, culprit)
        self.type = type
        self.culprit = culprit

    def __str__(self):
        return "%s(%s, %r)" % (self.kind, self.type, self.culprit)

class DomainError(FormatError, ValueError):
    kind = "domain_error"

class ArgumentMismatch(DomainError):
    """The format string and the argument list disagree: either arguments
    remain once the string is exhausted, or a directive needs an argument
    when there are none left."""

class UnknownDirective(DomainError):
    def __init__(self, directive):
        super(UnknownDirective, self).__init__("format_string", directive)

class TypeMismatch(FormatError, TypeError):
    kind = "type_error"

class ArgumentsExhausted(Exception):
    pass

class Arguments(object):
    """A container for format arguments, consumed from left to right."""

    def __init__(self, args):
        self.args = args
        self.len = len(self.args)
        self.cur = 0

    def __len__(self): return self.len

    def next(self):
        cur = self.cur
        if cur == self.len:
            raise ArgumentsExhausted()
        self.cur = cur + 1
        return self.args[cur]

    @property
    def empty(self):
        return self.cur == self.len

    def rest(self):
        return list(self.args[self.cur:])

# Numeric formatting

def is_integer(n):
    return isinstance(n, int) and not isinstance(n, bool)

def is_number(n):
    return isinstance(n, (int, float)) and not isinstance(n, bool)

def split_sign(s):
    return ("-", s[1:]) if s.startswith("-") else ("", s)

def commafy(s, commachar=",", comma_interval=3):
    """Add commachars between groups of comma_interval digits."""
    first = len(s) % comma_interval
    a = [s[0:first]] if first > 0 else []
    for i in range(first, len(s), comma_interval):
        a.append(s[i:i + comma_interval])
    return commachar.join(a)

def fixed_point(n, digits=0):
    """Return the digits of the integer n with the last digits of them
    after a decimal point, padding with zeros as needed.  No decimal point
    is used if digits is 0.

    This is a split of the digit string, not a computation: fixed_point(5, 3)
    is "0.005" and fixed_point(314, 2) is "3.14"."""
    if not is_integer(n):
        raise TypeMismatch("integer", n)
    if digits < 0:
        raise DomainError("not_less_than_zero", digits)
    (sign, s) = split_sign(number_chars(n))
    if digits == 0:
        return sign + s
    elif len(s) <= digits:
        return sign + "0." + "0" * (digits - len(s)) + s
    else:
        point = len(s) - digits
        return sign + s[:point] + "." + s[point:]

def grouped(n, digits=0):
    """Like fixed_point, with the integer part in groups of three."""
    (sign, s) = split_sign(fixed_point(n, digits))
    (whole, point, fraction) = s.partition(".")
    return sign + commafy(whole) + point + fraction

def float_fixed(x, digits):
    """Return the number x with exactly digits digits after the decimal
    point.  The digits are those of the shortest representation of x:
    extra digits are cut off, and missing ones are zeros rather than more
    precise digits of the float."""
    if not is_number(x):
        raise TypeMismatch("number", x)
    if digits < 0:
        raise DomainError("not_less_than_zero", digits)
    s = number_chars(x)
    if isinstance(x, float) and "e" in s:
        s = "{:f}".format(decimal.Decimal(repr(x)))
    (whole, point, fraction) = s.partition(".")
    if digits == 0:
        return whole
    return whole + "." + fraction[:digits].ljust(digits, "0")

# Directives

class Directive(object):
    """Base class for all format directives.  The control-string parser
    creates instances of (subclasses of) this class, which add elements to
    a CellBuilder via their format methods.

    Subclasses list the parameters they accept in the class attribute
    parameters: None for no parameter, "numeric" for ~N or ~*, and
    "character" for ~`C."""

    variable_parameter = object()
    parameters = (None,)

    def __init__(self, params, control, start, end):
        self.params = params
        self.control = control; self.start = start; self.end = end

    def __str__(self): return self.control[self.start:self.end]
    def __len__(self): return self.end - self.start
    def __repr__(self): return "<%s %s>" % (type(self).__name__, self)

    @property
    def token(self):
        """The tilde and the character following it, used to identify the
        directive in errors."""
        return self.control[self.start:self.start + 2]

    def format(self, cells, args):
        """Consume zero or more arguments, adding output to cells."""
        pass

    def param(self, args, default=None):
        if not self.params:
            return default
        p = self.params[0]
        if p is Directive.variable_parameter:
            p = args.next()
            if not is_integer(p):
                raise TypeMismatch("integer", p)
        return p

    def count(self, args, default):
        n = self.param(args, default)
        if n < 0:
            raise DomainError("not_less_than_zero", n)
        return n

class Unknown(Directive):
    parameters = (None, "numeric", "character")

    def format(self, cells, args):
        raise UnknownDirective(self.token)

class ConstantChar(Directive):
    """Directives that produce a constant string are replaced by that
    string when the control string is parsed."""

    def __new__(cls, params, *args):
        return cls.character

class Tilde(ConstantChar):
    character = "~"

# Argument insertion

class Write(Directive):
    quoted = False

    def format(self, cells, args):
        cells.chars(write_term(args.next(), quoted=self.quoted))

class Quoted(Write):
    quoted = True

class Atomic(Directive):
    def format(self, cells, args):
        arg = args.next()
        if isinstance(arg, str):
            cells.chars(arg)
        elif isinstance(arg, bool):
            cells.chars("true" if arg else "false")
        elif is_number(arg):
            cells.chars(number_chars(arg))
        else:
            raise TypeMismatch("atom", arg)

class CharList(Directive):
    def format(self, cells, args):
        arg = args.next()
        if isinstance(arg, str):
            cells.chars(arg)
        elif isinstance(arg, (list, tuple)) and \
                all(isinstance(c, str) and len(c) == 1 for c in arg):
            cells.chars("".join(arg))
        else:
            raise TypeMismatch("chars", arg)

class Decimal(Directive):
    parameters = (None, "numeric")

    def convert(self, n, digits):
        return fixed_point(n, digits)

    def format(self, cells, args):
        digits = self.count(args, 0)
        cells.chars(self.convert(args.next(), digits))

class GroupedDecimal(Decimal):
    def convert(self, n, digits):
        return grouped(n, digits)

class Float(Directive):
    parameters = (None, "numeric")

    def format(self, cells, args):
        if self.params:
            digits = self.count(args, 0)
            cells.chars(float_fixed(args.next(), digits))
        else:
            arg = args.next()
            if not is_number(arg):
                raise TypeMismatch("number", arg)
            cells.chars(number_chars(arg))

class Ignore(Directive):
    def format(self, cells, args):
        args.next()

# Layout control

class Newline(Directive):
    parameters = (None, "numeric")

    def format(self, cells, args):
        cells.newlines(self.count(args, 1))

class ColumnStop(Directive):
    parameters = (None, "numeric")

    def format(self, cells, args):
        column = self.param(args)
        cells.column(cells.tab if column is None else column)

class RelativeStop(Directive):
    parameters = (None, "numeric")

    def format(self, cells, args):
        cells.relative_column(self.param(args, 0))

class Fill(Directive):
    parameters = (None, "character")

    def format(self, cells, args):
        cells.glue(self.params[0] if self.params else " ")

format_directives = dict()

def register_directive(char, cls):
    assert len(char) == 1, "only single-character directives allowed"
    assert issubclass(cls, Directive), "invalid format directive class"
    format_directives[char] = cls

for (char, cls) in {
    "~": Tilde, "w": Write, "q": Quoted, "a": Atomic, "s": CharList,
    "d": Decimal, "D": GroupedDecimal, "f": Float, "i": Ignore,
    "n": Newline, "|": ColumnStop, "+": RelativeStop, "t": Fill,
}.items():
    register_directive(char, cls)

digits = "0123456789"

def parse_control_string(control):
    """Yield a list of strings and Directive instances corresponding to the
    given control string.

    Parsing never fails: a malformed or unknown directive yields an Unknown
    directive, which raises an error only when it is applied.  Errors are
    thus reported in the order in which the directives are reached."""

    assert isinstance(control, str), "control string must be a string"

    i = 0
    end = len(control)
    while i < end:
        tilde = control.find("~", i)
        if tilde == -1:
            yield control[i:end]
            break
        elif tilde > i:
            yield control[i:tilde]
        i = tilde + 1

        params = []
        kind = None
        if i < end and control[i] == "*":
            # "variable" parameter
            params.append(Directive.variable_parameter)
            kind = "numeric"
            i += 1
        elif i < end and control[i] in digits:
            # numeric parameter
            mark = i
            while i < end and control[i] in digits:
                i += 1
            params.append(int(control[mark:i]))
            kind = "numeric"
        elif i + 1 < end and control[i] == "`":
            # fill character
            params.append(control[i+1])
            kind = "character"
            i += 2

        char = control[i:i+1]
        i += len(char)
        cls = format_directives.get(char, Unknown)
        if kind not in cls.parameters:
            cls = Unknown
        yield cls(params, control, tilde, i)

def apply_directives(cells, directives, args):
    for x in directives:
        if isinstance(x, str):
            cells.chars(x)
        else:
            try:
                x.format(cells, args)
            except ArgumentsExhausted:
                raise ArgumentMismatch("format_string", x.token)

class Formatter(object):
    """A parsed control string, which may be applied to any number of
    argument lists."""

    def __init__(self, control):
        if isinstance(control, (list, tuple)):
            if not all(isinstance(c, str) and len(c) == 1 for c in control):
                raise TypeMismatch("chars", control)
            control = "".join(control)
        elif not isinstance(control, str):
            raise TypeMismatch("chars", control)
        self.control = control
        self.directives = tuple(parse_control_string(control))
        logger.trace("parsed {!r} into {} directives",
                     control, len(self.directives))

    def __repr__(self):
        return "Formatter(%r)" % self.control

    def cells(self, args=()):
        """Apply the directives to args, returning the list of cells and
        newlines to be laid out."""
        if not isinstance(args, (list, tuple)):
            raise TypeMismatch("list", args)
        args = Arguments(args)
        builder = CellBuilder()
        apply_directives(builder, self.directives, args)
        if not args.empty:
            raise ArgumentMismatch("no_remaining_arguments", args.rest())
        return builder.finish()

    def __call__(self, args=()):
        return format_cells(self.cells(args))

def cells(control, args=()):
    f = control if isinstance(control, Formatter) else Formatter(control)
    return f.cells(args)

def format_(control, args=()):
    """Return the text described by the control string and arguments."""
    f = control if isinstance(control, Formatter) else Formatter(control)
    return f(args)

def format(control, args=(), stream=None):
    """Write the text described by the control string and arguments to
    stream, printervars.output, or standard output, in that order of
    preference.  Nothing is written if formatting fails."""
    s = format_(control, args)
    if stream is None:
        stream = printervars.output if printervars.output is not None \
                                    else sys.stdout
    logger.debug("writing {} characters to {!r}", len(s), stream)
    stream.write(s)
