class SchemeError(Exception):
    """ Base class for all minischeme errors"""
    pass

class SchemeUndefinedSymbol(SchemeError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""
    pass

class SchemeSyntaxError(SchemeError):
    """ Raised on wrong arity, malformed special forms, non-lists where a list
    is required and reader errors"""

class SchemeTypeError(SchemeError):
    """ Raised when an operator or argument has the wrong kind of value"""

class SchemeArithmeticError(SchemeError, ArithmeticError):
    """ Raised on division by zero"""

class SchemeInternalError(SchemeError):
    """ Raised when a non-Scheme object reaches the value model"""

class SchemeReadError(SchemeSyntaxError):
    """ Raised by the reader; `offset` is the character position of the problem"""

    def __init__(self, message: str, offset: int):
        super().__init__(message)
        self.offset = offset
