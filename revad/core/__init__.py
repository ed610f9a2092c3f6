def get_compiler(_compiler=[]):
    if not _compiler:
        from . import compiler
        _compiler.append(compiler)
    return _compiler[0]
