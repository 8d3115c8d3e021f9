from loguru import logger

from cliargs.classifier import classify, is_long_option, is_option, is_short_option
from cliargs.exceptions import BalanceInvariantError, ClassifierError, EmptyInputError
from cliargs.models.parsed import ParsedArgs

__version__ = "0.1.0"

# silent as a library; setup_logging turns it back on
logger.disable("cliargs")

__all__ = [
    "classify",
    "is_short_option",
    "is_long_option",
    "is_option",
    "ParsedArgs",
    "ClassifierError",
    "EmptyInputError",
    "BalanceInvariantError",
]
