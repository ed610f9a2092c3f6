from .version import __version__

from .core.tape import Tape
from .core.expr import Expr, Symbol
from .core.expr import add, sub, mul, div, pow, neg
from .core.stdlib import recip, exp, ln, sin, cos, tan, sinh, cosh, tanh
from .core.operator import operator, set_exact_derivatives
from .core.evaluator import set_raise_internal_errors

from .lib.functional import gradient, gradient_cached, build
