"""
Decimal Render — каноническое десятичное представление результатов

Целые движки возвращают int, Binet — mpf. Сравнение методов идёт по строкам,
поэтому оба типа приводятся к одной форме: десятичная строка без знака "+",
без ведущих нулей и без дробной части (mpf округляется до целого).
"""

import sys
from numbers import Integral
from typing import Union

from mpmath import mpf, nint

# Python 3.11+ ограничивает int -> str 4300 цифрами; fib(n) превышает этот
# предел уже при n ≈ 20600.
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)


def to_decimal_string(value: Union[int, mpf]) -> str:
    """
    Десятичная строка для int или mpf.

    fib_binet уже возвращает целое mpf (nint внутри workprec), поэтому для
    него округление здесь ничего не меняет. Оно нужно для произвольных mpf
    от внешних вызывающих. Округление точное: mantissa value не усекается
    до глобальной точности mp.prec.

    Args:
        value: Результат движка

    Returns:
        Десятичная запись целого (mpf округляется до ближайшего)

    Raises:
        TypeError: если тип не поддерживается

    Examples:
        >>> to_decimal_string(6765)
        '6765'
        >>> to_decimal_string(mpf(6765))
        '6765'
        >>> to_decimal_string(mpf("6764.6"))
        '6765'
    """
    if isinstance(value, bool):
        raise TypeError(f"Cannot render bool as a Fibonacci value: {value!r}")

    if isinstance(value, Integral):
        return str(int(value))

    if isinstance(value, mpf):
        # prec=0: округление по собственной мантиссе value, а не по mp.prec
        return str(int(nint(value, prec=0)))

    raise TypeError(f"Unsupported value type for decimal rendering: {type(value).__name__}")
