
class XlispError(Exception):
    """ Base class for all xlisp errors"""
    pass

class XlispInvalidSymbol(XlispError):
    """ Raised when a symbol is malformed, e.g. a/b/c"""
    pass

class XlispResolutionError(XlispError):
    """ Raised when an operand cannot be resolved to a usable value"""
    pass

class XlispUnboundSymbol(XlispResolutionError):
    """ Raised when a symbol is not bound in the current or base namespace"""
    pass

class XlispAccessError(XlispError):
    """ Raised when binding outside the current namespace while checking is on"""

class XlispBindingError(XlispError):
    """ Raised when a bindings vector is malformed"""

class XlispSyntaxError(XlispError):
    """ Raised when the reader cannot parse its input"""

class XlispArityError(XlispError):
    """ Raised when a construct receives the wrong number of arguments"""

class XlispTypeError(XlispError):
    """ Raised when a value is used in a role its shape does not support"""

class XlispNoMatchError(XlispError):
    """ Raised when case finds no matching clause and has no default"""

class XlispFutureError(XlispError):
    """ Raised by deref when the future's computation failed"""

class XlispThrownError(XlispError):
    """ Raised by (throw ...) from Lisp code"""
