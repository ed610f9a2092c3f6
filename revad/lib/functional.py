from revad.core.tape import Tape
from revad.core.expr import Expr
from revad.core.error import BadArgument

def _trace(f, tape):
    symbols = tape.symbols()
    expr = f(symbols)
    if not isinstance(expr, Expr):
        raise BadArgument("the function must return an expression of its symbolic inputs, got %s"
                % repr(expr))
    tape.compile(expr)
    return tape

def build(f, nvars):
    """ Build a tape for f with nvars unbound variables.

        Parameters
        ----------
        f : callable(symbols) -> Expr, symbols is a list of Symbol,
            one per variable.
        nvars : int, the number of inputs of f.

        Returns
        -------
        tape : a compiled Tape, to be used with gradient_cached.
    """
    tape = Tape()
    tape.declare_vars(nvars)
    return _trace(f, tape)

def gradient(f, x):
    """ The gradient of f at x, on a fresh tape.

        Parameters
        ----------
        f : callable(symbols) -> Expr
        x : sequence of real numbers, one per input of f.

        Returns
        -------
        gradient : array of partial derivatives, in the order of x.
    """
    tape = Tape()
    for value in x:
        tape.var(value)

    _trace(f, tape)
    tape.forward()
    tape.backward()

    return tape.gradients()

def gradient_cached(tape, x):
    """ The value and gradient of a compiled tape at x.

        The tape is reset and the values of x are bound to the variables
        in the order of declaration; no node is added to the tape.

        Returns
        -------
        value, gradient
    """
    tape.reset()
    tape.bind_all(x)
    value = tape.forward()
    tape.backward()

    return value, tape.gradients()
