import revad
from numpy.testing import assert_allclose
import numpy
import pytest

def test_version():
    assert revad.__version__

def test_toplevel_tape():
    tape = revad.Tape()
    x, y = tape.declare_vars(2)
    tape.bind_all([0.0, 5.0])
    tape.compile(revad.sin(tape.symbol(0)) * tape.symbol(1))
    assert tape.forward() == 0.0
    tape.backward()
    assert list(tape.gradients()) == [5.0, 0.0]

def test_toplevel_free_functions():
    x = revad.Symbol(0)
    assert revad.add(x, 1.0).operator.name == 'addf'
    assert revad.sub(1.0, x).operator.name == 'addf'
    assert revad.mul(x, x).operator.name == 'mul'
    assert revad.div(x, 2.0).operator.name == 'mulf'
    assert revad.pow(x, 2).operator.name == 'powi'
    assert revad.neg(x).operator.name == 'neg'

def test_toplevel_gradient():
    def f(x):
        return revad.exp(x[0] * x[1]) + revad.tanh(x[2]) / x[0]

    x = [0.3, -0.7, 1.2]
    g = revad.gradient(f, x)

    a, b, c = x
    expected = [b * numpy.exp(a * b) - numpy.tanh(c) / a ** 2,
                a * numpy.exp(a * b),
                (1 - numpy.tanh(c) ** 2) / a]
    assert_allclose(g, expected, rtol=1e-10)

def test_toplevel_gradient_cached():
    tape = revad.build(lambda x: x[0] ** 3 + revad.cos(x[1]), 2)
    y, g = revad.gradient_cached(tape, [2.0, 0.0])
    assert_allclose(y, 9.0)
    assert_allclose(g, [12.0, 0.0])

def test_toplevel_custom_operator():
    @revad.operator
    class square:
        ain = 'x'
        def apl(node, x):
            return x * x
        def vjp(node, _y, x):
            return dict(_x = 2 * x * _y)

    g = revad.gradient(lambda x: square(x[0]) + x[1], [3.0, 1.0])
    assert_allclose(g, [6.0, 1.0])

def test_toplevel_switches():
    revad.set_exact_derivatives(True)
    try:
        g = revad.gradient(lambda x: -x[0], [4.0])
        assert_allclose(g, [-1.0])
    finally:
        revad.set_exact_derivatives(False)

    g = revad.gradient(lambda x: -x[0], [4.0])
    assert_allclose(g, [-4.0])

    revad.set_raise_internal_errors(False)
    try:
        with numpy.errstate(divide='raise'):
            with pytest.raises(FloatingPointError):
                revad.gradient(lambda x: revad.ln(x[0]), [0.0])
    finally:
        revad.set_raise_internal_errors(True)
