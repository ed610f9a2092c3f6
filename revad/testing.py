from revad.core.tape import Tape
from revad.core import operator
from numpy.testing import assert_allclose

import numpy

class BaseScalarTest:
    """ Basic correctness of the value and the gradient of a model
        against central differences.

        Subclass and override x, model and y.
    """

    x = (1.0, 2.0)        # free variables, one value per variable

    epsilon = 1e-5        # step of the central differences
    rtol = 1e-6
    atol = 1e-8

    exact_derivatives = False

    def model(self, *x):
        return x[0] * x[1] # override to build an expression of the symbols x

    def y(self, *x):
        return x[0] * x[1] # expected value computed with numpy;
                           # return NotImplemented to bypass the value comparison

    def setup_method(self):
        self._saved_exact = operator.get_exact_derivatives()
        operator.set_exact_derivatives(self.exact_derivatives)

        tape = Tape()
        tape.declare_vars(len(self.x))
        tape.compile(self.model(*tape.symbols()))
        self.tape = tape

        y_ = []
        for i in range(len(self.x)):
            # run a step along the i-th variable
            x_ = numpy.zeros(len(self.x))
            x_[i] = self.epsilon * 0.5

            yl = self.compute(numpy.array(self.x) - x_)
            yr = self.compute(numpy.array(self.x) + x_)

            y_.append((yr - yl) / self.epsilon)

        self.y_ = numpy.array(y_)

        if numpy.allclose(self.y_, 0):
            raise AssertionError("The test case is not powerful enough, since all derivatives at this point are zeros")

    def teardown_method(self):
        operator.set_exact_derivatives(self._saved_exact)

    def compute(self, x):
        self.tape.reset()
        self.tape.bind_all(x)
        return self.tape.forward()

    def test_opr(self):
        y1 = self.compute(self.x)

        y = self.y(*self.x)
        if y is not NotImplemented:
            assert_allclose(y1, y, rtol=1e-12)

    def test_vjp_finite(self):
        self.compute(self.x)
        self.tape.backward()

        _x = self.tape.gradients()
        assert len(_x) == len(self.x)
        assert_allclose(_x, self.y_, rtol=self.rtol, atol=self.atol)

    def test_reset(self):
        # a second cycle on the same tape reproduces a fresh tape
        self.compute(numpy.array(self.x) + 0.25)
        self.tape.backward()

        y1 = self.compute(self.x)
        self.tape.backward()

        tape = Tape()
        for value in self.x:
            tape.var(value)
        tape.compile(self.model(*tape.symbols()))
        y2 = tape.forward()
        tape.backward()

        assert_allclose(y1, y2, rtol=0)
        assert_allclose(self.tape.gradients(), tape.gradients(), rtol=0)
