"""
GeoMath — численно устойчивые элементарные примитивы

Арифметический фундамент геодезических вычислений:
- hypot без overflow/underflow
- log1p и atanh с сохранением точности около нуля
- Вещественный кубический корень
- Error-free сумма двух чисел (Knuth two-sum)
- Нормализация и разность углов в градусах
- Проверка конечности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции чистые: без состояния, без side effects, детерминированы
2. Ни одна функция не выбрасывает исключений: NaN/Inf пропагируют по IEEE-754
3. Входные диапазоны НЕ валидируются (контракт вызывающей стороны)
4. Константы совпадают с IEEE-754 binary64 бит-в-бит
"""

import math
from typing import Final, NamedTuple

from src.core.math.float_format import check_float_format

# Формат хоста проверяется один раз: на не-binary64 константы ниже неверны
_FLOAT_FORMAT: Final = check_float_format()

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Число двоичных цифр мантиссы double (numeric_limits<double>::digits)
DIGITS: Final[int] = 53

# Machine epsilon: 2^-(DIGITS-1) = 2^-52
EPSILON: Final[float] = math.pow(0.5, DIGITS - 1)

# Минимальное нормализованное положительное значение: 2^-1022
MIN_NORMAL: Final[float] = math.pow(0.5, 1022)

# Радиан в одном градусе
DEGREE: Final[float] = math.pi / 180

_MAX_FINITE: Final[float] = _FLOAT_FORMAT.max_finite


# =============================================================================
# IEEE-754 ХЕЛПЕРЫ
# =============================================================================
# Модуль math выбрасывает ValueError/ZeroDivisionError там, где IEEE-754
# возвращает Inf/NaN. Хелперы возвращают IEEE-результат.


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _log(x: float) -> float:
    if x > 0 or math.isnan(x):
        return math.log(x)
    if x == 0:
        return -math.inf
    return math.nan


# =============================================================================
# БАЗОВЫЕ ПРЕОБРАЗОВАНИЯ
# =============================================================================


def sq(x: float) -> float:
    """Квадрат числа: x * x."""
    return x * x


def hypot(x: float, y: float) -> float:
    """
    Гипотенуза sqrt(x^2 + y^2) без overflow и underflow.

    Нормировка на больший модуль держит квадрат в [0, 1]: большие входы
    не переполняются, маленькие не обнуляются.

    Args:
        x: Первый катет
        y: Второй катет

    Returns:
        sqrt(x^2 + y^2); ровно 0.0 если x == y == 0

    Examples:
        >>> hypot(3.0, 4.0)
        5.0
        >>> hypot(0.0, 0.0)
        0.0
        >>> math.isfinite(hypot(1e300, 1e300))
        True
    """
    if math.isnan(x) or math.isnan(y):
        return math.nan

    x = abs(x)
    y = abs(y)
    a = max(x, y)
    b = min(x, y) / (a if a != 0 else 1.0)
    return a * math.sqrt(1 + b * b)
    # Альтернативный метод: C. Moler and D. Morrison (1983)
    # https://doi.org/10.1147/rd.276.0577


def cbrt(x: float) -> float:
    """
    Вещественный кубический корень: sign(x) * |x|^(1/3).

    Examples:
        >>> cbrt(-8.0)
        -2.0
        >>> cbrt(27.0)
        3.0
    """
    y = math.pow(abs(x), 1 / 3.0)
    return -y if x < 0 else y


def isfinite(x: float) -> bool:
    """
    Проверка конечности.

    Returns:
        True если |x| <= максимального конечного double, False для NaN и ±Inf
    """
    return abs(x) <= _MAX_FINITE


# =============================================================================
# ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ С СОХРАНЕНИЕМ ТОЧНОСТИ
# =============================================================================


def log1p(x: float) -> float:
    """
    log(1 + x) с сохранением точности около x = 0.

    D. Goldberg, What every computer scientist should know about
    floating-point arithmetic (1991), Theorem 4. См. также N. J. Higham,
    Accuracy and Stability of Numerical Algorithms, 2nd ed. (2002), p. 528.

    Алгоритм:
        y = 1 + x   (единственное округление)
        z = y - 1   (точно: то, что реально добавилось к 1)
        z == 0 → x  (log(1+x) ≈ x, без 0/0)
        z == +Inf → x (без inf/inf)
        иначе  → x * (log(y) / z)

    Args:
        x: Аргумент (результат определён для x > -1)

    Returns:
        log(1 + x); +Inf при x == +Inf, -Inf при x == -1, NaN при x < -1

    Examples:
        >>> log1p(0.0)
        0.0
        >>> log1p(1e-16)
        1e-16
    """
    y = 1 + x
    z = y - 1
    # y = 1 + z точно и z ≈ x, поэтому log(y)/z (почти константа около
    # z = 0) хорошо приближает log(1 + x)/x. Умножение на x добавляет
    # пренебрежимую ошибку. Скобки обязательны: x * log(y) переполняется
    # при x > ~2.5e305.
    if z == 0 or z == math.inf:
        return x
    return x * (_log(y) / z)


def atanh(x: float) -> float:
    """
    Обратный гиперболический тангенс через log1p, с нечётной симметрией.

    atanh(-x) == -atanh(x) бит-в-бит: вычисление идёт по |x|, знак
    восстанавливается в конце.

    Args:
        x: Аргумент (результат определён для |x| < 1)

    Returns:
        atanh(x); 0.0 при x == 0; ±Inf при x == ±1. При |x| > 1 результат
        определяется арифметикой (NaN), исключения не выбрасываются.
    """
    y = abs(x)  # Нечётная симметрия
    y = log1p(_divide(2 * y, 1 - y)) / 2
    return -y if x < 0 else y


# =============================================================================
# ERROR-FREE СУММА
# =============================================================================


class SumResult(NamedTuple):
    """
    Результат error-free суммы: u + v == value + error точно.
    """

    value: float  # round(u + v)
    error: float  # точный остаток округления


def error_free_sum(u: float, v: float) -> SumResult:
    """
    Error-free сумма двух чисел (Knuth two-sum).

    D. E. Knuth, TAOCP, Vol. 2, 4.2.2, Theorem B. Без ветвлений и без
    требования |u| >= |v| (в отличие от Dekker fast-two-sum).

    Args:
        u: Первое слагаемое
        v: Второе слагаемое

    Returns:
        SumResult(s, t): s = round(u + v), t = u + v - s (точно)

    Examples:
        >>> error_free_sum(1.0, 1e-16)
        SumResult(value=1.0, error=1e-16)
        >>> error_free_sum(0.5, 0.25)
        SumResult(value=0.75, error=0.0)
    """
    s = u + v
    up = s - v
    vpp = s - up
    up -= u
    vpp -= v
    t = -(up + vpp)
    # u + v =       s      + t
    #       = round(u + v) + t
    return SumResult(s, t)


# =============================================================================
# УГЛЫ (ГРАДУСЫ)
# =============================================================================


def ang_normalize(x: float) -> float:
    """
    Нормализация угла в [-180, 180) (ограниченный вход).

    Один условный сдвиг на 360, не modulo: x обязан лежать в [-540, 540).
    Вне этого диапазона результат не определён.

    Examples:
        >>> ang_normalize(180.0)
        -180.0
        >>> ang_normalize(359.0)
        -1.0
    """
    if x >= 180:
        return x - 360
    if x < -180:
        return x + 360
    return x


def ang_normalize2(x: float) -> float:
    """
    Нормализация произвольного угла в [-180, 180).

    Сначала остаток от деления на 360 со знаком делимого (math.fmod),
    затем ang_normalize. Точность ограничена точностью fmod.

    Args:
        x: Угол в градусах (любой)

    Returns:
        Угол в [-180, 180); NaN для NaN и ±Inf
    """
    if not isfinite(x):
        return math.nan
    return ang_normalize(math.fmod(x, 360.0))


def ang_diff(x: float, y: float) -> float:
    """
    Разность углов y - x, приведённая к (-180, 180].

    Эквивалентно точному вычислению разности, приведению к (-180, 180] и
    округлению. Остаток t из error_free_sum делает проверку границы ±180
    точной; сдвиг d на 360 точен.

    ВАЖНО: допускается результат ровно -180 (например, x крошечный
    отрицательный и y = 180). Вызывающая сторона должна принимать обе
    границы.

    Args:
        x: Первый угол в [-180, 180]
        y: Второй угол в [-180, 180]

    Returns:
        y - x в (-180, 180] (или -180, см. выше)

    Examples:
        >>> ang_diff(0.0, 90.0)
        90.0
        >>> ang_diff(170.0, -170.0)
        20.0
        >>> ang_diff(-1e-20, 180.0)
        -180.0
    """
    d, t = error_free_sum(-x, y)
    if (d - 180) + t > 0:  # y - x > 180
        d -= 360  # точно
    elif (d + 180) + t <= 0:  # y - x <= -180
        d += 360  # точно
    return d + t
