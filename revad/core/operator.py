"""
    Routines to define an operator

    use @operator decorator on a class to define an operator.

    Example: see the source code of :class:`revad.core.stdlib.operators.add`

    An operator is the tag of a node on the tape, together with its
    forward formula (apl) and its backward formula (vjp).

    Calling an operator builds an expression node;
    accessing an operator through a Tape instance (tape.add) gives a
    bound operator that appends a node to the tape.

"""
import numbers

from .error import BadArgument, BrokenOperator

_exact_derivatives = False

def set_exact_derivatives(flag):
    """ If exact_derivatives is set to True, operators that define
        an `exact_vjp` use it for back-propagation instead of `vjp`.

        This affects `neg` and `pow`, whose default vjp formulas
        are kept for compatibility with existing results:

            neg : _x = -_y * x           (exact: -_y)
            pow : _x2 = log(x1) * x1 ** (x2 - 1) * _y
                                         (exact: x1 ** x2 * log(x1) * _y)
    """
    global _exact_derivatives
    _exact_derivatives = flag

def get_exact_derivatives():
    return _exact_derivatives

class Operator(object):
    def __init__(self, prototype):
        self.prototype = prototype
        self.name = prototype.__name__
        self.ain = _to_tuple(prototype.ain)

        self.argnames = _argnames(prototype.apl)
        for argname in self.ain:
            if argname not in self.argnames:
                raise BrokenOperator("operand %s of %s is not an argument of apl" % (argname, self.name))

        # operands are always kept in the order of the arguments
        self.ain = tuple(a for a in self.argnames if a in self.ain)

        # arguments that are not operands are literal constants
        self.literals = tuple(a for a in self.argnames if a not in self.ain)
        self.literal_type = getattr(prototype, 'literal_type', numbers.Real)

        self._apl = prototype.apl
        self._vjp = _Backward(self, prototype.vjp)

        if hasattr(prototype, 'exact_vjp'):
            self._exact_vjp = _Backward(self, prototype.exact_vjp)
        else:
            self._exact_vjp = self._vjp

    @property
    def arity(self):
        return len(self.ain)

    @property
    def apl(self):
        return self._apl

    @property
    def vjp(self):
        if _exact_derivatives:
            return self._exact_vjp
        return self._vjp

    def __call__(self, *args):
        """ Build an expression node. Operands must be expressions. """
        from .expr import Expr

        self.check_args(args)
        for argname, arg in zip(self.argnames, args):
            if argname in self.ain and not isinstance(arg, Expr):
                raise BadArgument("operand %s of %s must be an expression, got %s"
                        % (argname, self.name, repr(arg)))
        return Expr(self, args)

    def __get__(self, instance, owner):
        if instance is not None:
            return InstanceOperator(self, instance)
        else:
            return self

    def check_args(self, args):
        if len(args) != len(self.argnames):
            raise BadArgument("%s takes %d arguments (%s), got %d"
                    % (self.name, len(self.argnames), ', '.join(self.argnames), len(args)))

        for argname, arg in zip(self.argnames, args):
            if argname in self.literals and not _is_literal(arg, self.literal_type):
                raise BadArgument("literal %s of %s must be of type %s, got %s"
                        % (argname, self.name, self.literal_type.__name__, repr(arg)))

    def __repr__(self):
        return "<operator %s(%s)>" % (self.name, ', '.join(self.argnames))

class InstanceOperator(object):
    """ An operator bound to a tape; calling it appends a node. """
    def __init__(self, base, instance):
        self.base = base
        self.instance = instance

    def __call__(self, *args):
        return self.instance.append(self.base, *args)

    def __getattr__(self, attrname):
        return getattr(self.base, attrname)

    def __repr__(self):
        return "<operator %s bound to %r>" % (self.base.name, self.instance)

class _Backward(object):
    """ A vjp function and the names of the values it reads.

        The upstream gradient is always named '_y'; the other
        argnames are operands or literals of the node.
    """
    def __init__(self, opr, impl):
        self.impl = impl
        self.argnames = tuple(a for a in _argnames(impl) if a != '_y')
        for argname in self.argnames:
            if argname not in opr.argnames:
                raise BrokenOperator("%s of %s reads %s, which is not an argument of apl"
                        % (impl.__name__, opr.name, argname))
        self.needs = tuple(a for a in self.argnames if a in opr.ain)

    def __call__(self, node, **kwargs):
        return self.impl(node, **kwargs)

def _argnames(impl):
    # skip the first argument, which is the node
    return impl.__code__.co_varnames[1:impl.__code__.co_argcount]

def _to_tuple(ain):
    if isinstance(ain, (list, tuple)):
        return tuple(ain)
    return (ain, )

def _is_literal(value, literal_type):
    if isinstance(value, bool):
        return False
    return isinstance(value, literal_type)

def operator(kls):
    """ Decorator to declare an operator object from an operator class.

        The decorator is similar to a constructor. It produces a
        new object of type Operator.

        An operator class must define `ain` and the apl, vjp functions.

        ain : names of the operands of the operator; an operand is a
              position on the tape (or a sub-expression in an expression).

        literal_type : the type of the non-operand arguments of apl,
              numbers.Real if omitted.

        apl : function(node, ...) the forward formula; the arguments are
              named after `ain` and the literals of the node, in the order
              of the arguments of the node. Returns the value.

        vjp : function(node, _y, ...) the vector jacobian product. The
              convention is to use '_' + argname as the name of the
              gradient of an operand; _y is the upstream gradient.
              Only operands named in the arguments are evaluated before
              calling vjp. Returns a dict of gradients of the operands.

        exact_vjp : optional, same as vjp; used instead of vjp
              after set_exact_derivatives(True).

    """
    return Operator(kls)
