"""Composition of unary transforms"""


def _identity(value):
    return value


def pipe(funcs):
    """Compose a sequence of unary functions into one.

    The returned function feeds its argument through every function in order,
    the output of each stage being the input of the next, and returns the
    output of the last stage. An empty sequence gives the identity.

    The sequence is copied, so later changes to it do not affect the result.
    """
    funcs = tuple(funcs)
    if not len(funcs):
        return _identity

    def piped(value):
        result = value
        for func in funcs:
            result = func(result)
        return result

    return piped
