from revad.core import stdlib
from revad.testing import BaseScalarTest

import numpy

class UnaryScalarTest(BaseScalarTest):
    ufunc = None
    x = (0.7, )

    def y(self, x):
        return type(self).ufunc.prototype.f(x)

    def model(self, x):
        return type(self).ufunc(x)

class Test_exp(UnaryScalarTest):
    ufunc = stdlib.exp
    x = (-0.3, )

class Test_ln(UnaryScalarTest):
    ufunc = stdlib.ln
    x = (2.5, )

class Test_sin(UnaryScalarTest):
    ufunc = stdlib.sin

class Test_cos(UnaryScalarTest):
    ufunc = stdlib.cos

class Test_tan(UnaryScalarTest):
    ufunc = stdlib.tan
    x = (0.4, )

class Test_sinh(UnaryScalarTest):
    ufunc = stdlib.sinh

class Test_cosh(UnaryScalarTest):
    ufunc = stdlib.cosh

class Test_tanh(UnaryScalarTest):
    ufunc = stdlib.tanh
    x = (-0.5, )

class Test_recip(BaseScalarTest):
    x = (1.5, )
    def model(self, x): return stdlib.recip(x)
    def y(self, x): return 1 / x

class Test_neg_exact(BaseScalarTest):
    exact_derivatives = True
    x = (1.5, )
    def model(self, x): return stdlib.neg(x)
    def y(self, x): return -x

class Test_composite(BaseScalarTest):
    x = (0.3, 1.1)
    def model(self, x, y):
        return stdlib.exp(stdlib.sin(x) * y) / stdlib.cosh(x + y) + stdlib.ln(y * y)
    def y(self, x, y):
        return numpy.exp(numpy.sin(x) * y) / numpy.cosh(x + y) + numpy.log(y * y)
