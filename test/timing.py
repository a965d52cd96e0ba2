import timeit

setup = """
from format import format_, Formatter, parse_control_string
from portray import portray_clause_
from terms import Var, Struct, clause, if_then_else, disjunction

table = "~w~t~10|~t~2f~20|~t~D~32|~n"
row = ["widget", 3.14159, 1234567]
f = Formatter(table)
X = Var()
c = clause(Struct("h", X), "a",
           if_then_else(disjunction(Struct("b", X), "c"), "d", "e"), "f")
"""[1:]
stmts = (("parse", """tuple(parse_control_string(table))"""),
         ("format", """format_(table, row)"""),
         ("formatter", """f(row)"""),
         ("portray", """portray_clause_(c)"""))
for name, stmt in stmts:
    print(">> %s" % name)
    timeit.main(["-s", setup, stmt])
    print()
