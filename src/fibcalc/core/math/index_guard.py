"""
Index Guard — проверка индекса Фибоначчи

Все движки принимают индекс n как Python int, n ≥ 0.
Модуль централизует проверку этого предусловия:
- Отрицательные индексы не поддерживаются
- bool отвергается (True/False формально являются int)
- Нецелые значения (float, Decimal, str) отвергаются

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни один движок не начинает вычисление с невалидным n
2. Ошибка домена всегда InvalidIndexError (подкласс ValueError)
"""

from numbers import Integral


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidIndexError(ValueError):
    """
    Индекс вне домена движков: n < 0 или n не целое.

    Вызывающий слой должен отвергнуть ввод до вызова движка.
    Движки не пытаются "исправить" индекс (abs, int() и т.п.).
    """
    pass


# =============================================================================
# VALIDATION
# =============================================================================


def validate_index(n: object, name: str = "n") -> int:
    """
    Валидация индекса Фибоначчи.

    Args:
        n: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        n как int

    Raises:
        InvalidIndexError: Если n не целое, bool или n < 0

    Examples:
        >>> validate_index(10)
        10
        >>> validate_index(0)
        0
        >>> validate_index(-1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidIndexError: n must be non-negative, got -1
    """
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidIndexError(
            f"{name} must be an integer, got {type(n).__name__}: {n!r}"
        )

    if n < 0:
        raise InvalidIndexError(f"{name} must be non-negative, got {n}")

    return int(n)
