class ClassifierError(Exception):
    """Base class for errors raised by the argument classifier."""


class EmptyInputError(ClassifierError, ValueError):
    """Raised when the classifier is called without any tokens."""


class BalanceInvariantError(ClassifierError, AssertionError):
    """Raised when the option/value bookkeeping gets out of step."""
