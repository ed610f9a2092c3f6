from revad.lib.functional import gradient_cached
from revad.core.error import BindError

import numpy
import scipy.optimize

def minimize(tape, x0, method='BFGS', **kwargs):
    """ Minimize the compiled expression of a tape starting from x0.

        The tape is reused for every evaluation; see gradient_cached.

        Parameters
        ----------
        tape : a compiled Tape, e.g. from revad.lib.functional.build.
        x0 : initial values of the variables, in the order of declaration.
        method : a gradient based method of scipy.optimize.minimize.
        kwargs : passed to scipy.optimize.minimize.

        Returns
        -------
        result : scipy.optimize.OptimizeResult
    """
    x0 = numpy.asarray(x0, dtype='f8')
    if len(x0) != tape.nvars:
        raise BindError("%d initial values for a tape of %d variables" % (len(x0), tape.nvars))

    def fun(x):
        y, g = gradient_cached(tape, x)
        return float(y), g

    return scipy.optimize.minimize(fun, x0, jac=True, method=method, **kwargs)
