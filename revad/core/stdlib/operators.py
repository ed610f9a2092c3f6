from revad.core.operator import operator
import numbers
import numpy

class unary:
    ain = 'x'

class binary:
    ain = 'x1', 'x2'

class mixed:
    ain = 'x'

@operator
class add(binary):
    def apl(node, x1, x2):
        return x1 + x2

    def vjp(node, _y):
        return dict(_x1 = _y, _x2 = _y)

@operator
class sub(binary):
    def apl(node, x1, x2):
        return x1 - x2

    def vjp(node, _y):
        return dict(_x1 = _y, _x2 = -_y)

@operator
class mul(binary):
    def apl(node, x1, x2):
        return x1 * x2

    def vjp(node, _y, x1, x2):
        return dict(_x1 = x2 * _y,
                    _x2 = x1 * _y)

@operator
class div(binary):
    def apl(node, x1, x2):
        return x1 / x2

    def vjp(node, _y, x1, x2):
        return dict(_x1 = _y / x2,
                    _x2 = -_y * x1 / x2 ** 2)

@operator
class pow(binary):
    def apl(node, x1, x2):
        return x1 ** x2

    def vjp(node, _y, x1, x2):
        fac = x1 ** (x2 - 1)
        return dict(_x1 = x2 * fac * _y,
                    _x2 = numpy.log(x1) * fac * _y)

    def exact_vjp(node, _y, x1, x2):
        fac = x1 ** (x2 - 1)
        return dict(_x1 = x2 * fac * _y,
                    _x2 = x1 ** x2 * numpy.log(x1) * _y)

# mixed operators: one literal constant and one operand.

@operator
class addf(mixed):
    def apl(node, c, x):
        return c + x

    def vjp(node, _y):
        return dict(_x = _y)

@operator
class subf(mixed):
    def apl(node, x, c):
        return x - c

    def vjp(node, _y):
        return dict(_x = _y)

@operator
class mulf(mixed):
    def apl(node, c, x):
        return c * x

    def vjp(node, _y, c):
        return dict(_x = c * _y)

@operator
class powf(mixed):
    def apl(node, x, c):
        return x ** c

    def vjp(node, _y, x, c):
        return dict(_x = c * x ** (c - 1) * _y)

@operator
class powi(mixed):
    literal_type = numbers.Integral

    def apl(node, x, n):
        return x ** n

    def vjp(node, _y, x, n):
        return dict(_x = n * x ** (n - 1) * _y)

@operator
class neg(unary):
    def apl(node, x):
        return -x

    def vjp(node, _y, x):
        return dict(_x = -_y * x)

    def exact_vjp(node, _y):
        return dict(_x = -_y)

@operator
class recip(unary):
    def apl(node, x):
        return 1.0 / x

    def vjp(node, _y, x):
        return dict(_x = -_y / x ** 2)
