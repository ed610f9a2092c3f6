from revad.core.tape import Tape
from revad.core.node import Variable
from revad.core.error import BindError, BadIndex, BadArgument, NotCompiled
from revad.core import stdlib

import numpy
import pytest

def test_tape_var():
    tape = Tape()
    a = tape.var(1.0)
    b = tape.var(2)
    assert (a, b) == (0, 1)
    assert len(tape) == 2
    assert tape.nvars == 2
    assert isinstance(tape[a], Variable)
    assert tape.value_of(b) == 2.0
    assert isinstance(tape.value_of(b), numpy.float64)
    assert tape.gradient_of(a) == 0.0

def test_tape_declare_vars():
    tape = Tape()
    tape.var(1.0)
    indices = tape.declare_vars(3)
    assert indices == [1, 2, 3]
    assert tape.get_vars() == [0, 1, 2, 3]
    assert tape.get_var(2) == 2
    assert tape.value_of(3) is None

def test_tape_vars_after_nodes():
    tape = Tape()
    x = tape.var(1.0)
    tape.mulf(2.0, x)
    y = tape.var(3.0)
    assert y == 2
    assert tape.get_vars() == [0, 2]
    assert tape.get_var(1) == 2
    assert [s.index for s in tape.symbols()] == [0, 2]
    assert tape.symbol(1).index == 2

def test_tape_bind():
    tape = Tape()
    x = tape.var(1.0)
    y = tape.exp(x)
    tape.bind(x, 2.5)
    assert tape.value_of(x) == 2.5

    with pytest.raises(BadIndex):
        tape.bind(y, 1.0)

    with pytest.raises(BadIndex):
        tape.bind(10, 1.0)

    with pytest.raises(BadArgument):
        tape.bind(x, 'a')

    with pytest.raises(BadArgument):
        tape.bind(x, True)

def test_tape_bind_all():
    tape = Tape()
    tape.declare_vars(3)
    tape.bind_all([1.0, 2.0])
    assert tape.value == [1.0, 2.0, None]

    tape.bind_all(numpy.array([4.0, 5.0, 6.0]))
    assert tape.value == [4.0, 5.0, 6.0]

    with pytest.raises(BindError):
        tape.bind_all([1.0, 2.0, 3.0, 4.0])

def test_tape_append():
    tape = Tape()
    x = tape.var(3.0)
    y = tape.mul(x, x)
    assert y == 1
    assert tape[y].operator is stdlib.mul
    assert tape[y].varin == (0, 0)

    z = tape.mulf(2.0, y)
    assert tape[z].hyper == dict(c=2.0)
    assert tape[z].varin == (1, )

def test_tape_append_errors():
    tape = Tape()
    x = tape.var(3.0)

    # operands must exist before the node
    with pytest.raises(BadIndex):
        tape.add(x, 1)

    with pytest.raises(BadArgument):
        tape.add(x)

    with pytest.raises(BadArgument):
        tape.add(x, 0.5)

    with pytest.raises(BadArgument):
        tape.mulf(x, x + 0.5)

    with pytest.raises(BadArgument):
        tape.powi(x, 2.0)

    assert len(tape) == 1

def test_tape_repr():
    tape = Tape()
    x = tape.var(3.0)
    y = tape.mulf(2.0, x)
    tape.add(x, y)
    assert repr(tape[0]) == 'var(0)'
    assert repr(tape[1]) == 'mulf(2.0, [0])'
    assert repr(tape[2]) == 'add([0], [1])'
    assert 'compiled=None' in repr(tape)

def test_tape_not_compiled():
    tape = Tape()
    tape.var(1.0)
    assert tape.compiled is None

    with pytest.raises(NotCompiled):
        tape.forward()

    with pytest.raises(NotCompiled):
        tape.backward()

def test_tape_reset():
    tape = Tape()
    x = tape.var(3.0)
    root = tape.compile(tape.symbol(0) * tape.symbol(0))
    tape.forward()
    tape.backward()
    assert tape.gradient_of(x) == 6.0

    n = len(tape)
    tape.reset()
    assert len(tape) == n
    assert tape.compiled == root
    assert tape.value_of(x) == 3.0
    assert tape.value_of(root) is None
    assert all(g == 0.0 for g in tape.gradient)

def test_tape_gradients():
    tape = Tape()
    tape.declare_vars(2)
    tape.bind_all([2.0, 5.0])
    tape.compile(tape.symbol(1) * 3.0 + tape.symbol(0))
    tape.forward()
    tape.backward()

    g = tape.gradients()
    assert g.dtype == numpy.dtype('f8')
    assert list(g) == [1.0, 3.0]

def test_tape_iter():
    tape = Tape()
    x = tape.var(1.0)
    tape.sin(x)
    assert [node.name for node in tape] == ['var', 'sin']

def test_tape_accessors_bad_index():
    tape = Tape()
    x = tape.var(1.0)
    tape.exp(x)

    for index in [-1, 2, 10]:
        with pytest.raises(BadIndex):
            tape.value_of(index)

        with pytest.raises(BadIndex):
            tape.gradient_of(index)

    with pytest.raises(BadIndex):
        tape.get_var(-1)

    with pytest.raises(BadIndex):
        tape.get_var(1)

    with pytest.raises(BadIndex):
        tape.symbol(1)
