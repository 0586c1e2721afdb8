"""Parameter values that are either concrete floats or symbolic expressions."""

from __future__ import annotations

import math
import re
from numbers import Real
from tokenize import TokenError
from typing import FrozenSet, Union

import sympy
from sympy.parsing.sympy_parser import parse_expr

from qpragma.errors import NumericConversionError

CalculatorLike = Union["CalculatorFloat", float, int, str, sympy.Expr]

# Bare identifiers not used as function calls
_NAME_PATTERN = re.compile(r"(?<![\w.])([A-Za-z_]\w*)(?!\w)(?!\s*\()")
_UNDEFINED = (sympy.zoo, sympy.nan, sympy.oo, sympy.S.NegativeInfinity)


def _parse(text: str) -> sympy.Expr:
    """
    Parse an expression string, treating every bare name as a free symbol.

    Names such as ``gamma`` or ``E`` would otherwise resolve to sympy
    functions and constants. Names followed by a call, like ``exp(``, keep
    their sympy meaning.
    """
    symbols = {name: sympy.Symbol(name) for name in _NAME_PATTERN.findall(text)}
    try:
        expr = parse_expr(text, local_dict=symbols)
    except (sympy.SympifyError, SyntaxError, TypeError, TokenError) as err:
        raise ValueError(f"Cannot parse expression {text!r}.") from err
    if not isinstance(expr, sympy.Expr):
        raise ValueError(f"Expression {text!r} is not a number.")
    return expr


def _normalise(value: Union[float, sympy.Expr]) -> Union[float, sympy.Expr]:
    """Collapse expressions without free symbols to a plain float."""
    if isinstance(value, float):
        return value
    if isinstance(value, complex):
        raise ValueError(f"Value {value} is not a real number.")
    if value.free_symbols:
        return value
    try:
        return float(value)
    except TypeError as err:
        raise ValueError(f"Expression {value} does not evaluate to a real number.") from err


class CalculatorFloat:
    """
    A float parameter that may still be symbolic.

    The value is held either as a Python float or as a sympy expression with
    at least one free symbol. Arithmetic is closed over both cases: combining
    two concrete values stays concrete, anything involving a symbol produces
    an expression. Conversion to float is explicit and fails with
    NumericConversionError while symbols remain.

    Examples
    --------
    >>> t = CalculatorFloat("gate_time")
    >>> (t * 2).is_float
    False
    >>> float(CalculatorFloat(0.5) * 2)
    1.0
    """

    __slots__ = ("_value",)

    def __init__(self, value: CalculatorLike) -> None:
        if isinstance(value, CalculatorFloat):
            self._value = value._value
        elif isinstance(value, bool):
            raise TypeError("CalculatorFloat does not accept bool values.")
        elif isinstance(value, Real):
            self._value = float(value)
        elif isinstance(value, str):
            self._value = _normalise(_parse(value))
        elif isinstance(value, sympy.Expr):
            self._value = _normalise(value)
        else:
            raise TypeError(
                f"CalculatorFloat cannot be built from {type(value).__name__}."
            )

    @classmethod
    def _wrap(cls, value: Union[float, sympy.Expr]) -> "CalculatorFloat":
        new = cls.__new__(cls)
        new._value = _normalise(value)
        return new

    @property
    def is_float(self) -> bool:
        """Return True if the value is a concrete float."""
        return isinstance(self._value, float)

    @property
    def value(self) -> Union[float, str]:
        """Return the float, or the expression string if symbolic."""
        if self.is_float:
            return self._value
        return str(self._value)

    @property
    def free_symbols(self) -> FrozenSet[str]:
        """Return the names of the symbols the value depends on."""
        if self.is_float:
            return frozenset()
        return frozenset(str(s) for s in self._value.free_symbols)

    def to_sympy(self) -> sympy.Expr:
        """Return the value as a sympy expression."""
        if self.is_float:
            return sympy.Float(self._value)
        return self._value

    def float_value(self) -> float:
        """
        Return the concrete value.

        Raises
        ------
        NumericConversionError
            If the value is still symbolic.
        """
        if not self.is_float:
            raise NumericConversionError(str(self._value))
        return self._value

    def __float__(self) -> float:
        return self.float_value()

    # Arithmetic

    def _binary(self, other: CalculatorLike, op, reflected: bool = False):
        if not isinstance(other, CalculatorFloat):
            try:
                other = CalculatorFloat(other)
            except TypeError:
                return NotImplemented
        left, right = (other, self) if reflected else (self, other)
        if left.is_float and right.is_float:
            try:
                return CalculatorFloat._wrap(op(left._value, right._value))
            except ZeroDivisionError as err:
                raise ValueError(
                    f"Division by zero combining {left} and {right}."
                ) from err
        result = op(left.to_sympy(), right.to_sympy())
        if result.has(*_UNDEFINED):
            raise ValueError(f"Combining {left} and {right} gives an undefined value.")
        return CalculatorFloat._wrap(result)

    def __add__(self, other):
        return self._binary(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._binary(other, lambda a, b: a + b, reflected=True)

    def __sub__(self, other):
        return self._binary(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._binary(other, lambda a, b: a - b, reflected=True)

    def __mul__(self, other):
        return self._binary(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._binary(other, lambda a, b: a * b, reflected=True)

    def __truediv__(self, other):
        return self._binary(other, lambda a, b: a / b)

    def __rtruediv__(self, other):
        return self._binary(other, lambda a, b: a / b, reflected=True)

    def __pow__(self, other):
        return self._binary(other, lambda a, b: a**b)

    def __rpow__(self, other):
        return self._binary(other, lambda a, b: a**b, reflected=True)

    def __neg__(self) -> "CalculatorFloat":
        return CalculatorFloat._wrap(-self._value)

    def exp(self) -> "CalculatorFloat":
        """Return e raised to this value."""
        if self.is_float:
            return CalculatorFloat._wrap(math.exp(self._value))
        return CalculatorFloat._wrap(sympy.exp(self._value))

    def sqrt(self) -> "CalculatorFloat":
        """Return the square root of this value."""
        if self.is_float:
            return CalculatorFloat._wrap(math.sqrt(self._value))
        return CalculatorFloat._wrap(sympy.sqrt(self._value))

    # Comparison

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CalculatorFloat):
            pass
        elif isinstance(other, Real) and not isinstance(other, bool):
            other = CalculatorFloat(other)
        else:
            return NotImplemented
        if self.is_float != other.is_float:
            return False
        if self.is_float:
            return self._value == other._value
        # 1.0*t and t are the same parameter
        return bool(sympy.simplify(self._value - other._value).is_zero)

    def __hash__(self) -> int:
        if self.is_float:
            return hash(self._value)
        return hash(self.free_symbols)

    def __repr__(self) -> str:
        return f"CalculatorFloat({self.value!r})"

    def __str__(self) -> str:
        return str(self.value)


__all__ = ["CalculatorFloat", "CalculatorLike"]
