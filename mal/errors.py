
class MalError(Exception):
    """ Base class for all mal errors"""
    pass

class MalTypeError(MalError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class MalArityError(MalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class MalIOError(MalError):
    """ Raised when a file cannot be read"""

class MalSyntaxError(MalError):
    """ Raised when the reader cannot parse source text"""

class MalReaderError(MalError):
    """ Raised when read-string is used without a reader installed"""

class MalEqualityError(MalTypeError):
    """ Raised when two values have no equality rule"""

class MalZeroDivisionError(MalError):
    """ Raised on division by zero"""

class MalRecursionError(MalError):
    """ Raised when a value nests deeper than the configured limit"""

class MalNameError(MalError):
    """ Raised when an operator name is not in the namespace"""
