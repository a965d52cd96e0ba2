"""Dynamic variables that control the format and portray modules.

The values here are read at call time, so they may be rebound for the
extent of a with-statement:

    with bindings(output=stream, clause_indent=4):
        portray_clause(term)
"""

import sys

# Default destination for format() and portray_clause(); None means
# sys.stdout as of the time of the call.
output = None

# Column at which the first goal of a clause body is placed.
clause_indent = 3

_variables = ("output", "clause_indent")

class bindings(object):
    """Bind a set of variables of this module to the given values in the
    dynamic scope of a with-statement.  Only existing printer variables may
    be bound."""

    def __init__(self, **bindings):
        for name in bindings:
            if name not in _variables:
                raise AttributeError("no printer variable named %r" % name)
        self.symbols = sys.modules[__name__].__dict__
        self.bindings = bindings

    def __enter__(self):
        self.old_bindings = dict((name, self.symbols[name])
                                 for name in self.bindings)
        self.symbols.update(self.bindings)
        return self

    def __exit__(self, *exc_info):
        self.symbols.update(self.old_bindings)
