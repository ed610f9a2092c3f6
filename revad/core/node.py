class Node(object):
    """ A node on the tape.

        A node records the operator and the tape indices of its
        operands; literal constants of the operator are kept in `hyper`.

        A node only refers to operands created before it, so the order
        of the tape is a topological order.
    """
    __slots__ = ('operator', 'varin', 'hyper')

    def __init__(self, operator, varin, hyper):
        self.operator = operator
        self.varin = varin
        self.hyper = hyper

    @property
    def name(self):
        return self.operator.name

    def kwargs(self, values):
        """ Arguments of the operator formulas, given the operand values. """
        kwargs = dict(zip(self.operator.ain, values))
        kwargs.update(self.hyper)
        return kwargs

    def __repr__(self):
        args = []
        varin = iter(self.varin)
        for argname in self.operator.argnames:
            if argname in self.hyper:
                args.append(repr(self.hyper[argname]))
            else:
                args.append('[%d]' % next(varin))
        return "%s(%s)" % (self.name, ', '.join(args))

class Variable(Node):
    """ A leaf on the tape; the value is supplied by binding. """
    __slots__ = ('index', )

    def __init__(self, index):
        Node.__init__(self, None, (), {})
        self.index = index

    @property
    def name(self):
        return 'var'

    def __repr__(self):
        return "var(%d)" % self.index
