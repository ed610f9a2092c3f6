from . import get_compiler
from . import evaluator
from . import stdlib
from .error import NotCompiled, BindError, BadIndex, BadArgument
from .expr import Symbol
from .node import Node, Variable

import numbers
import numpy
import logging

logger = logging.getLogger(__name__)

class Tape(object):
    """ A tape of operations, in the order of creation.

        The tape holds three buffers of the same length, indexed by
        the tape index:

        nodes    : the operation at each index.
        value    : the value at each index; None if not yet computed.
        gradient : the accumulated gradient at each index.

        A node only refers to indices before its own; indices are stable
        and nodes are never removed.

        Variables are leaves whose value is bound by the caller;
        they are registered in the order of declaration.

        Operations are appended with the operator methods, e.g.

        >>> tape = Tape()
        >>> x = tape.var(3.0)
        >>> y = tape.mul(x, x)
        >>> float(tape.forward(y))
        9.0

        or by compiling an expression:

        >>> root = tape.compile(2.0 + tape.symbol(0) * tape.symbol(0))
        >>> float(tape.forward())
        11.0

    """
    # operators, appending a node when accessed on a tape
    add = stdlib.add
    sub = stdlib.sub
    mul = stdlib.mul
    div = stdlib.div
    pow = stdlib.pow

    addf = stdlib.addf
    subf = stdlib.subf
    mulf = stdlib.mulf
    powf = stdlib.powf
    powi = stdlib.powi

    neg = stdlib.neg
    recip = stdlib.recip
    exp = stdlib.exp
    ln = stdlib.ln
    sin = stdlib.sin
    cos = stdlib.cos
    tan = stdlib.tan
    sinh = stdlib.sinh
    cosh = stdlib.cosh
    tanh = stdlib.tanh

    def __init__(self):
        self.nodes = []
        self.value = []
        self.gradient = []

        self._vin = []
        self._compiled = None

    def __len__(self):
        return len(self.nodes)

    def __getitem__(self, index):
        return self.nodes[index]

    def __iter__(self):
        return iter(self.nodes)

    def __repr__(self):
        return "<Tape: %d nodes, %d variables, compiled=%s>" % (
                len(self.nodes), len(self._vin), self._compiled)

    @property
    def nvars(self):
        return len(self._vin)

    @property
    def compiled(self):
        """ The index of the compiled root; None if nothing is compiled. """
        return self._compiled

    def _push(self, node, value=None):
        index = len(self.nodes)
        self.nodes.append(node)
        self.value.append(value)
        self.gradient.append(0.0)
        return index

    def var(self, value):
        """ Declare a variable bound to value.

            Returns
            -------
            index : the tape index of the variable.
        """
        index = len(self.nodes)
        self._push(Variable(index), _asvalue(value))
        self._vin.append(index)
        return index

    def declare_vars(self, n):
        """ Declare n variables without values; bind them later.

            Returns
            -------
            indices : list of the tape indices of the variables.
        """
        start = len(self.nodes)
        for index in range(start, start + n):
            self._push(Variable(index))
            self._vin.append(index)

        logger.debug("declared %d variables at %d", n, start)
        return list(range(start, start + n))

    def get_var(self, order):
        """ The tape index of the variable declared at position `order`. """
        if not 0 <= order < len(self._vin):
            raise BadIndex("variable %d is not declared; %d variables are declared"
                    % (order, len(self._vin)))
        return self._vin[order]

    def get_vars(self):
        return list(self._vin)

    def symbol(self, order):
        """ An expression leaf for the variable declared at position `order`. """
        return Symbol(self.get_var(order))

    def symbols(self):
        return [Symbol(index) for index in self._vin]

    def bind(self, index, value):
        """ Bind a value to the variable at tape index `index`. """
        if not 0 <= index < len(self.nodes) or not isinstance(self.nodes[index], Variable):
            raise BadIndex("index %d is not a variable" % index)
        self.value[index] = _asvalue(value)

    def bind_all(self, values):
        """ Bind values to variables, in the order of declaration.

            Fewer values than variables may be supplied;
            the remaining variables are left untouched.
        """
        values = list(values)
        if len(values) > len(self._vin):
            raise BindError("%d values are supplied but only %d variables are declared"
                    % (len(values), len(self._vin)))

        for index, value in zip(self._vin, values):
            self.value[index] = _asvalue(value)

    def append(self, operator, *args):
        """ Append a node of operator; returns its tape index.

            args are the arguments of the operator in order;
            operands are tape indices created before, others are
            literal constants.
        """
        operator.check_args(args)

        varin = []
        hyper = {}
        for argname, arg in zip(operator.argnames, args):
            if argname in operator.ain:
                if not isinstance(arg, numbers.Integral) or isinstance(arg, bool):
                    raise BadArgument("operand %s of %s must be a tape index, got %s"
                            % (argname, operator.name, repr(arg)))
                if not 0 <= arg < len(self.nodes):
                    raise BadIndex("operand %s of %s refers to %d, not on a tape of %d nodes"
                            % (argname, operator.name, arg, len(self.nodes)))
                varin.append(int(arg))
            else:
                hyper[argname] = arg

        return self._push(Node(operator, tuple(varin), hyper))

    def compile(self, expr):
        """ Lower an expression onto the tape and make its root the
            compiled root, replacing any previous one.

            Returns
            -------
            index : the tape index of the root.
        """
        self._compiled = get_compiler().compile(expr, self)
        return self._compiled

    def _get_compiled(self):
        if self._compiled is None:
            raise NotCompiled("No compiled expression")
        return self._compiled

    def forward(self, index=None, monitor=None):
        """ Evaluate the compiled root, or the node at index. """
        if index is None:
            index = self._get_compiled()
        return evaluator.forward(self, index, monitor=monitor)

    def backward(self, index=None, seed=1.0, monitor=None):
        """ Accumulate gradients of the compiled root, or of the node
            at index, seeded with `seed`. """
        if index is None:
            index = self._get_compiled()
        evaluator.backward(self, index, seed=seed, monitor=monitor)

    def reset(self):
        """ Forget computed values and gradients.

            The structure of the tape and the values bound to
            variables are kept.
        """
        for i, node in enumerate(self.nodes):
            if not isinstance(node, Variable):
                self.value[i] = None
            self.gradient[i] = 0.0

    def value_of(self, index):
        """ The computed or bound value at index, None if unknown. """
        evaluator._check_index(self, index)
        return self.value[index]

    def gradient_of(self, index):
        evaluator._check_index(self, index)
        return self.gradient[index]

    def gradients(self):
        """ Gradients of the variables, in the order of declaration. """
        return numpy.array([self.gradient[index] for index in self._vin], dtype='f8')

def _asvalue(value):
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise BadArgument("a variable is bound to a real number, got %s" % repr(value))
    return numpy.float64(value)
