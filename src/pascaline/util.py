from functools import wraps


class PascalineError(Exception):
    '''
    Base of every error a user can provoke. None of them is fatal.
    '''


class UnknownOperatorSymbol(PascalineError):
    def __init__(self, symbol):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self):
        return "Failed to create operator from symbol: {!r}".format(self.symbol)


class ArityMismatch(PascalineError):
    def __init__(self, operator, expected, found):
        super().__init__(operator, expected, found)
        self.operator = operator
        self.expected = expected
        self.found = found

    def __str__(self):
        return 'Operator {} expects {} operand(s), found {}'.format(
            self.operator, self.expected, self.found)


class TypeMismatch(PascalineError):
    pass


class DivisionByZero(PascalineError):
    def __str__(self):
        return 'Division by zero'


class DomainError(PascalineError):
    pass


class StackOverflow(PascalineError):
    def __init__(self, capacity):
        super().__init__(capacity)
        self.capacity = capacity

    def __str__(self):
        return 'Stack is full ({} elements)'.format(self.capacity)


class EmptyStack(PascalineError):
    def __str__(self):
        return 'Empty stack'


class NoLastOperator(PascalineError):
    def __str__(self):
        return self.args[0] if self.args else 'No operator applied yet'


class NotYetSupported(PascalineError):
    def __init__(self, operator):
        super().__init__(operator)
        self.operator = operator

    def __str__(self):
        return 'Operator {} is not supported yet'.format(self.operator)


def wrap_math_errors(fmt):
    '''
    Decorator converting Python's arithmetic exceptions to Pascaline ones.

    Passes through PascalineErrors. ``fmt`` is formatted with the decorated
    function's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except PascalineError:
                raise
            except ZeroDivisionError as e:
                raise DivisionByZero() from e
            except (ValueError, OverflowError) as e:
                raise DomainError(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
