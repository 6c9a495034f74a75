"""Registry of combinators for the bprog evaluator.

Combinators differ from primitives in that they also read their body from the
remaining token stream and may evaluate synthesized source text. The evaluator
consults this table before the primitive table.
"""

from bprog.evaluation.combinators.if_form import if_form
from bprog.evaluation.combinators.map_form import map_form, each_form
from bprog.evaluation.combinators.foldl_form import foldl_form
from bprog.evaluation.combinators.times_form import times_form

COMBINATORS = {
    "if": if_form,
    "map": map_form,
    "each": each_form,
    "foldl": foldl_form,
    "times": times_form,
}
