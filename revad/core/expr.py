"""
    Symbolic expressions.

    An expression describes a scalar function with ordinary arithmetic
    before any tape exists. It holds no values; compile it onto a tape
    to evaluate and differentiate it.

    Composition supports an expression on either side of an operator,
    and a literal real number on either side:

    ==========  ==============  ==========================  ======================
    expression  expr, expr      literal, expr               expr, literal
    ==========  ==============  ==========================  ======================
    a + b       add(a, b)       addf(a, b)                  addf(b, a)
    a - b       sub(a, b)       addf(a, mulf(-1, b))        subf(a, b)
    a * b       mul(a, b)       mulf(a, b)                  mulf(b, a)
    a / b       div(a, b)       recip(b) if a == 1          mulf(1 / b, a)
                                else mulf(a, recip(b))
    a ** b      pow(a, b)       exp(mulf(log(a), b))        powi(a, b) if integer
                                                            else powf(a, b)
    -a          neg(a)
    ==========  ==============  ==========================  ======================

"""
import numbers
import numpy

from . import get_compiler
from . import stdlib
from .error import BadArgument

class Expr(object):
    """ An immutable node of an expression tree.

        args are the arguments of the operator in order; operands
        are sub-expressions and the others are literal constants.
    """
    __slots__ = ('operator', 'args')

    # let numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    def __init__(self, operator, args):
        object.__setattr__(self, 'operator', operator)
        object.__setattr__(self, 'args', tuple(args))

    def __setattr__(self, name, value):
        raise AttributeError("expressions are immutable")

    def __delattr__(self, name):
        raise AttributeError("expressions are immutable")

    @property
    def children(self):
        """ The sub-expressions, in argument order. """
        return tuple(arg for argname, arg in zip(self.operator.argnames, self.args)
                if argname in self.operator.ain)

    def arguments(self, operands):
        """ The arguments of the operator with the sub-expressions
            replaced by `operands`, in order.
        """
        operands = iter(operands)
        return tuple(next(operands) if argname in self.operator.ain else arg
                for argname, arg in zip(self.operator.argnames, self.args))

    def compile(self, tape):
        """ Lower the expression onto a tape; returns the index of the root. """
        return get_compiler().compile(self, tape)

    def __repr__(self):
        return "%s(%s)" % (self.operator.name, ', '.join(repr(arg) for arg in self.args))

    def __add__(self, other): return add(self, other)
    def __radd__(self, other): return add(other, self)
    def __sub__(self, other): return sub(self, other)
    def __rsub__(self, other): return sub(other, self)
    def __mul__(self, other): return mul(self, other)
    def __rmul__(self, other): return mul(other, self)
    def __truediv__(self, other): return div(self, other)
    def __rtruediv__(self, other): return div(other, self)
    def __pow__(self, other, modulo=None):
        if modulo is not None:
            raise ValueError("pow with modulo is not supported")
        return pow(self, other)
    def __rpow__(self, other): return pow(other, self)

    def __floordiv__(self, other): raise TypeError("floor div is not supported in autodiff")
    def __rfloordiv__(self, other): raise TypeError("floor div is not supported in autodiff")

    def __neg__(self): return neg(self)
    def __pos__(self): return self

class Symbol(Expr):
    """ A leaf naming a position on a tape, usually a declared variable. """
    __slots__ = ('index', )

    def __init__(self, index):
        if not isinstance(index, numbers.Integral) or isinstance(index, bool):
            raise BadArgument("a symbol names a tape index, got %s" % repr(index))
        Expr.__init__(self, None, ())
        object.__setattr__(self, 'index', int(index))

    @property
    def children(self):
        return ()

    def __repr__(self):
        return "x%d" % self.index

def isliteral(obj):
    return isinstance(obj, numbers.Real) and not isinstance(obj, bool)

def _kind(a, b, opname):
    """ one of 'ee', 'le', 'el' for the shapes of the operands of opname """
    if isinstance(a, Expr) and isinstance(b, Expr):
        return 'ee'
    if isliteral(a) and isinstance(b, Expr):
        return 'le'
    if isinstance(a, Expr) and isliteral(b):
        return 'el'
    raise BadArgument("unsupported operands for %s: %s and %s"
            % (opname, type(a).__name__, type(b).__name__))

def add(a, b):
    kind = _kind(a, b, 'add')
    if kind == 'ee': return stdlib.add(a, b)
    if kind == 'le': return stdlib.addf(a, b)
    return stdlib.addf(b, a)

def sub(a, b):
    kind = _kind(a, b, 'sub')
    if kind == 'ee': return stdlib.sub(a, b)
    if kind == 'le': return stdlib.addf(a, stdlib.mulf(-1.0, b))
    return stdlib.subf(a, b)

def mul(a, b):
    kind = _kind(a, b, 'mul')
    if kind == 'ee': return stdlib.mul(a, b)
    if kind == 'le': return stdlib.mulf(a, b)
    return stdlib.mulf(b, a)

def div(a, b):
    kind = _kind(a, b, 'div')
    if kind == 'ee': return stdlib.div(a, b)
    if kind == 'le':
        if a == 1:
            return stdlib.recip(b)
        return stdlib.mulf(a, stdlib.recip(b))
    return stdlib.mulf(numpy.reciprocal(numpy.float64(b)), a)

def pow(a, b):
    kind = _kind(a, b, 'pow')
    if kind == 'ee': return stdlib.pow(a, b)
    if kind == 'le':
        if a <= 0:
            raise BadArgument("the literal base of pow must be positive, got %s" % repr(a))
        return stdlib.exp(stdlib.mulf(float(numpy.log(a)), b))
    if isinstance(b, numbers.Integral):
        return stdlib.powi(a, b)
    return stdlib.powf(a, b)

def neg(a):
    if not isinstance(a, Expr):
        raise BadArgument("unsupported operand for neg: %s" % type(a).__name__)
    return stdlib.neg(a)
