"""
Magnitude — Arbitrary-Precision Non-Negative Integer

Представление неотрицательного целого произвольной длины в виде
упорядоченной последовательности limbs (основание LIMB_BASE = 10^9).

Конвенция хранения:
- limbs[0] — младший (least-significant) limb
- limbs[-1] — старший (most-significant) limb

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый limb лежит в [0, LIMB_BASE)
2. Нет лишних старших нулевых limbs (ноль = ровно один limb [0])
3. Последовательность limbs никогда не пуста
4. Мутация возможна только через методы, сохраняющие инварианты 1-3
"""

from typing import Final, Iterable

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Количество десятичных цифр в одном limb
LIMB_DIGITS: Final[int] = 9

# Основание limb (степень десяти)
LIMB_BASE: Final[int] = 10**LIMB_DIGITS


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def require_int(value: object, name: str) -> None:
    # bool является подклассом int, но не является допустимым значением
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_limb(value: int) -> None:
    """
    Валидация значения limb.

    Raises:
        TypeError: Если value не int
        ValueError: Если value вне [0, LIMB_BASE)
    """
    require_int(value, "limb")
    if value < 0 or value >= LIMB_BASE:
        raise ValueError(f"limb must be in [0, {LIMB_BASE}), got {value}")


# =============================================================================
# MAGNITUDE
# =============================================================================


class Magnitude:
    """
    Неотрицательное целое произвольной точности.

    Limbs хранятся в порядке least-significant first. Наружу отдаются
    только как tuple (read-only).

    Examples:
        >>> Magnitude(1).limbs
        (1,)
        >>> Magnitude(10**9 + 5).limbs
        (5, 1)
        >>> Magnitude.from_limbs([7, 0, 0]).limbs
        (7,)
    """

    __slots__ = ("_limbs",)

    def __init__(self, seed: int = 0):
        """
        Создание Magnitude из неотрицательного seed.

        Args:
            seed: Начальное значение (обычно 1 для факториала, 0 для нуля)

        Raises:
            TypeError: Если seed не int
            ValueError: Если seed < 0
        """
        require_int(seed, "seed")
        if seed < 0:
            raise ValueError(f"seed must be non-negative, got {seed}")

        limbs = [seed % LIMB_BASE]
        seed //= LIMB_BASE
        while seed > 0:
            limbs.append(seed % LIMB_BASE)
            seed //= LIMB_BASE

        self._limbs: list[int] = limbs

    @classmethod
    def zero(cls) -> "Magnitude":
        """Канонический ноль: один limb [0]."""
        return cls(0)

    @classmethod
    def one(cls) -> "Magnitude":
        """Единица: seed факториала (пустое произведение)."""
        return cls(1)

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "Magnitude":
        """
        Создание Magnitude из limbs (least-significant first).

        Каждый limb валидируется, результат приводится к канонической
        форме (trim). Пустая последовательность → ноль.

        Raises:
            TypeError: Если limb не int
            ValueError: Если limb вне [0, LIMB_BASE)
        """
        magnitude = cls(0)
        magnitude.assign_limbs(limbs)
        return magnitude

    # -------------------------------------------------------------------------
    # Read-only доступ
    # -------------------------------------------------------------------------

    @property
    def limbs(self) -> tuple[int, ...]:
        """Limbs в порядке least-significant first (копия, read-only)."""
        return tuple(self._limbs)

    @property
    def limb_count(self) -> int:
        return len(self._limbs)

    def is_zero(self) -> bool:
        return len(self._limbs) == 1 and self._limbs[0] == 0

    def copy(self) -> "Magnitude":
        clone = type(self).__new__(type(self))
        clone._limbs = list(self._limbs)
        return clone

    # -------------------------------------------------------------------------
    # Мутаторы с сохранением инвариантов
    # -------------------------------------------------------------------------

    def append_limb(self, value: int) -> None:
        """
        Добавление нового старшего limb.

        Используется при распространении carry за пределы текущей длины.
        Нулевой старший limb допускается только временно: вызывающий
        обязан завершить операцию через trim().

        Raises:
            TypeError: Если value не int
            ValueError: Если value вне [0, LIMB_BASE)
        """
        validate_limb(value)
        self._limbs.append(value)

    def assign_limbs(self, limbs: Iterable[int]) -> None:
        """
        Полная замена последовательности limbs (с валидацией и trim).

        Исходная последовательность не изменяется, если хотя бы один limb
        невалиден.

        Raises:
            TypeError: Если limb не int
            ValueError: Если limb вне [0, LIMB_BASE)
        """
        new_limbs = list(limbs)
        for value in new_limbs:
            validate_limb(value)

        self._limbs = new_limbs if new_limbs else [0]
        self.trim()

    def trim(self) -> None:
        """Удаление лишних старших нулевых limbs (ноль остаётся как [0])."""
        limbs = self._limbs
        while len(limbs) > 1 and limbs[-1] == 0:
            limbs.pop()

    # -------------------------------------------------------------------------
    # Сравнение и представление
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self._limbs == other._limbs

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Magnitude(limbs={self._limbs!r})"
