"""
Core math modules для fibcalc

Алгоритмы вычисления fib(n) произвольной величины с гарантией точности.
"""

# Index Guard
from fibcalc.core.math.index_guard import (
    InvalidIndexError,
    validate_index,
)

# Bit-Scanner
from fibcalc.core.math.bit_scanner import (
    NO_BITS,
    iter_bits_msb_first,
    msb_position,
)

# Integer engines
from fibcalc.core.math.fast_doubling import fib_fast_doubling
from fibcalc.core.math.lucas_doubling import fib_lucas_doubling
from fibcalc.core.math.fib_lucas_recursive import (
    LucasScratch,
    fib_luc,
    fib_recursive,
)
from fibcalc.core.math.gmp_builtin import fib_builtin
from fibcalc.core.math.reference import (
    fib_reference,
    luc_reference,
)

# Binet (mpmath)
from fibcalc.core.math.binet import (
    DEFAULT_PRECISION_POLICY,
    MIN_PRECISION_BITS,
    POWER_FUNCTIONS,
    PRECISION_BITS_DENOMINATOR,
    PRECISION_BITS_NUMERATOR,
    PRECISION_GUARD_BITS,
    FixedPrecisionPolicy,
    PowerStrategy,
    PrecisionPolicy,
    ScaledPrecisionPolicy,
    binet_precision_bits,
    fib_binet,
    power_builtin,
    power_by_multiplication,
    power_by_squaring,
    resolve_power,
)

# Rendering & registry
from fibcalc.core.math.decimal_render import to_decimal_string
from fibcalc.core.math.methods import (
    ENGINES,
    EXACT_METHODS,
    FibonacciMethod,
    compute,
    compute_decimal,
    get_engine,
)

__all__ = [
    # Index Guard
    "InvalidIndexError",
    "validate_index",
    # Bit-Scanner
    "NO_BITS",
    "iter_bits_msb_first",
    "msb_position",
    # Integer engines
    "fib_fast_doubling",
    "fib_lucas_doubling",
    "LucasScratch",
    "fib_luc",
    "fib_recursive",
    "fib_builtin",
    "fib_reference",
    "luc_reference",
    # Binet: Constants
    "DEFAULT_PRECISION_POLICY",
    "MIN_PRECISION_BITS",
    "POWER_FUNCTIONS",
    "PRECISION_BITS_DENOMINATOR",
    "PRECISION_BITS_NUMERATOR",
    "PRECISION_GUARD_BITS",
    # Binet: Types
    "FixedPrecisionPolicy",
    "PowerStrategy",
    "PrecisionPolicy",
    "ScaledPrecisionPolicy",
    # Binet: Functions
    "binet_precision_bits",
    "fib_binet",
    "power_builtin",
    "power_by_multiplication",
    "power_by_squaring",
    "resolve_power",
    # Rendering & registry
    "to_decimal_string",
    "ENGINES",
    "EXACT_METHODS",
    "FibonacciMethod",
    "compute",
    "compute_decimal",
    "get_engine",
]
