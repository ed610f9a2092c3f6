"""
    Lowering expressions onto a tape.

    The expression is walked in post-order, children first and left
    to right, with an explicit stack; each node is appended to the tape
    after its operands. A Symbol resolves to the tape index it names.

    No sharing is performed: an expression object that appears twice
    in a tree is lowered twice, into distinct tape nodes.
"""
import logging

from .expr import Expr, Symbol
from .error import BadIndex, BadArgument

logger = logging.getLogger(__name__)

def compile(expr, tape):
    """ Lower `expr` onto `tape`.

        Returns the tape index of the root of the expression.
    """
    if not isinstance(expr, Expr):
        raise BadArgument("can only compile an expression, got %s" % repr(expr))

    start = len(tape)

    stack = [(expr, False)]
    results = []
    while stack:
        e, expanded = stack.pop()

        if isinstance(e, Symbol):
            if not 0 <= e.index < len(tape):
                raise BadIndex("Symbol %s does not exist on a tape of %d nodes" % (e, len(tape)))
            results.append(e.index)
            continue

        if not expanded:
            stack.append((e, True))
            for child in reversed(e.children):
                stack.append((child, False))
            continue

        n = e.operator.arity
        operands = results[len(results) - n:]
        del results[len(results) - n:]
        results.append(tape.append(e.operator, *e.arguments(operands)))

    root, = results

    logger.debug("compiled %d nodes onto the tape, root at %d", len(tape) - start, root)
    return root
