"""
    Forward evaluation and reverse-mode propagation over a tape.

    Both traversals use explicit stacks, so the depth of an expression
    is not limited by the recursion limit of the interpreter.
"""
from .error import makeExecutionError, UnboundVariable, BadIndex
from .node import Variable

_raise_internal_errors = True

def set_raise_internal_errors(flag):
    """ If raise_internal_errors is set to True, then the errors in
        node execution are directly raised.

        If False, we will produce a wrapped messsage,
        which contains the tape index and the node where the error
        occured. The wrapped error is still an instance of the
        exception type of the failure.
    """
    global _raise_internal_errors
    _raise_internal_errors = flag

def _check_index(tape, index):
    if not 0 <= index < len(tape.nodes):
        raise BadIndex("index %d is not on a tape of %d nodes" % (index, len(tape.nodes)))

def _call(node, index, impl, kwargs):
    if _raise_internal_errors:
        return impl(node, **kwargs)

    try:
        return impl(node, **kwargs)
    except Exception as e:
        raise makeExecutionError(
            "Error computing node [%d] : %s" % (index, node), e)

def forward(tape, index, monitor=None):
    """ Evaluate the value at `index`, memoized on the tape.

        Values already known on the tape are reused; every node
        is computed at most once until the tape is reset.

        monitor : callable(index, node, value), called after a node
                  is computed.
    """
    _check_index(tape, index)

    nodes = tape.nodes
    value = tape.value

    stack = [index]
    while stack:
        i = stack[-1]
        if value[i] is not None:
            stack.pop()
            continue

        node = nodes[i]
        if isinstance(node, Variable):
            raise UnboundVariable("Variable [%d] is read before a value is bound" % i)

        pending = [j for j in node.varin if value[j] is None]
        if pending:
            stack.extend(pending)
            continue

        kwargs = node.kwargs([value[j] for j in node.varin])
        value[i] = _call(node, i, node.operator.apl, kwargs)
        stack.pop()

        if monitor is not None:
            monitor(i, node, value[i])

    return value[index]

def reachable(tape, index):
    """ Tape indices that `index` depends on, including itself,
        in decreasing order. """
    _check_index(tape, index)

    nodes = tape.nodes
    seen = set([index])
    stack = [index]
    while stack:
        i = stack.pop()
        for j in nodes[i].varin:
            if j not in seen:
                seen.add(j)
                stack.append(j)

    return sorted(seen, reverse=True)

def backward(tape, index, seed=1.0, monitor=None):
    """ Propagate the gradient `seed` at `index` to its operands.

        Nodes are visited in reverse tape order, so the gradient of a node
        is complete before it is passed on. Contributions of an operand that
        is referenced more than once are summed. The gradients of the
        variables reached are then added to the gradient buffer of the tape;
        calling backward twice without a reset accumulates twice. Slots of
        derived nodes are not touched.

        Operand values are taken from the memoized forward evaluation;
        missing values are computed on demand.

        monitor : callable(index, node, gradient), called with the gradient
                  of this call at every node reached, in reverse tape order.
    """
    order = reachable(tape, index)

    nodes = tape.nodes

    adjoint = {index: seed}
    for i in order:
        node = nodes[i]
        if isinstance(node, Variable):
            continue

        vjp = node.operator.vjp
        kwargs = {}
        for argname in vjp.argnames:
            if argname in node.hyper:
                kwargs[argname] = node.hyper[argname]

        for argname, j in zip(node.operator.ain, node.varin):
            if argname in vjp.needs:
                kwargs[argname] = forward(tape, j, monitor=None)

        kwargs['_y'] = adjoint[i]
        r = _call(node, i, vjp, kwargs)

        for argname, j in zip(node.operator.ain, node.varin):
            if j in adjoint:
                adjoint[j] = adjoint[j] + r['_' + argname]
            else:
                adjoint[j] = r['_' + argname]

    gradient = tape.gradient
    for i in order:
        if isinstance(nodes[i], Variable):
            gradient[i] += adjoint[i]
        if monitor is not None:
            monitor(i, nodes[i], adjoint[i])
