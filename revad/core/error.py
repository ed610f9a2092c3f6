class TapeError(Exception): pass

class NotCompiled(TapeError): pass
class BindError(TapeError): pass
class UnboundVariable(TapeError): pass
class BadIndex(TapeError, IndexError): pass
class BadArgument(TapeError, TypeError): pass
class BrokenOperator(TapeError): pass

class ExecutionError(TapeError):
    def __init__(self, msg, reason):
        self.reason = reason
        TapeError.__init__(self, msg)

def makeExecutionError(msg, reason):
    """ Wrap `reason` into an error that is both an ExecutionError
        and an instance of the type of `reason`, such that
        callers catching that type still catch it.
    """
    errortype = type("ExecutionError(%s)" % type(reason).__name__,
            (type(reason), ExecutionError), {})
    e = errortype(msg)
    e.reason = reason
    return e
