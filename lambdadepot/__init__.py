"""
lambdadepot: Functional Programming Primitives

Fixed-arity Function, Predicate and Consumer wrappers (arity 0 to 4), a
tri-state Result (success / failure / empty), an Option type and null-safe
chained property access.
"""

__version__ = "1.0.0"

# Import core components for easy access
from .error_handling import (
    LambdaDepotError, NullArgumentError, NoSuchElementError, UnresolvedFailureError,
    require_non_null
)
from .result import Result, Success, Failure
from .option import Option, Present
from .functions import (
    Function0, Function1, Function2, Function3, Function4,
    as_function0, as_function1, as_function2, as_function3, as_function4, lift
)
from .predicates import (
    Predicate0, Predicate1, Predicate2, Predicate3, Predicate4,
    as_predicate0, as_predicate1, as_predicate2, as_predicate3, as_predicate4,
    all_of, any_of, none_of, instance_of
)
from .consumers import (
    Consumer0, Consumer1, Consumer2, Consumer3, Consumer4,
    as_consumer0, as_consumer1, as_consumer2, as_consumer3, as_consumer4
)
from .safe_access import SafeGetter, SafeSetter, attr, item

# Logging and configuration setup
from .logging_utils import initialize_logger
from .config_parser import load_config, configure_from_file
