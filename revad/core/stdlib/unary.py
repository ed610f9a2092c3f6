from revad.core.operator import operator
import numpy

class unary_ufunc:
    """ A function of one operand, given by the ufunc f and its
        derivative fprime. """
    ain = 'x'

    f = staticmethod(lambda x: x)
    fprime = staticmethod(lambda x: 1.0)

    def apl(node, x):
        return node.operator.prototype.f(x)

    def vjp(node, _y, x):
        return dict(_x = node.operator.prototype.fprime(x) * _y)

@operator
class exp(unary_ufunc):
    f = staticmethod(numpy.exp)
    fprime = staticmethod(numpy.exp)

@operator
class ln(unary_ufunc):
    f = staticmethod(numpy.log)
    fprime = staticmethod(numpy.reciprocal)

@operator
class sin(unary_ufunc):
    f = staticmethod(numpy.sin)
    fprime = staticmethod(numpy.cos)

@operator
class cos(unary_ufunc):
    f = staticmethod(numpy.cos)
    fprime = staticmethod(lambda x: -numpy.sin(x))

@operator
class tan(unary_ufunc):
    f = staticmethod(numpy.tan)
    fprime = staticmethod(lambda x: 1 + numpy.tan(x) ** 2)

@operator
class sinh(unary_ufunc):
    f = staticmethod(numpy.sinh)
    fprime = staticmethod(numpy.cosh)

@operator
class cosh(unary_ufunc):
    f = staticmethod(numpy.cosh)
    fprime = staticmethod(numpy.sinh)

@operator
class tanh(unary_ufunc):
    f = staticmethod(numpy.tanh)
    fprime = staticmethod(lambda x: 1 - numpy.tanh(x) ** 2)
