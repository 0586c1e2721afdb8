"""Symbol table used to resolve symbolic parameters to floats."""

from __future__ import annotations

from numbers import Real
from typing import Dict, Mapping, Optional

import sympy

from qpragma.errors import CalculatorError, UnknownVariableError
from qpragma.symbolic.core import CalculatorFloat, CalculatorLike


class Calculator:
    """
    Caller-owned table of variable values.

    Resolving a value never writes to the table, so the same calculator can
    be shared by several substitutions as long as the caller does not change
    it concurrently.

    Parameters
    ----------
    variables:
        Optional initial mapping from variable name to value.
    """

    def __init__(self, variables: Optional[Mapping[str, float]] = None) -> None:
        self._variables: Dict[str, float] = {}
        for name, value in (variables or {}).items():
            self.set_variable(name, value)

    @property
    def variables(self) -> Dict[str, float]:
        """Return a copy of the current variable table."""
        return dict(self._variables)

    def set_variable(self, name: str, value: float) -> None:
        """Set (or overwrite) the value of a variable."""
        if not isinstance(value, Real) or isinstance(value, bool):
            raise TypeError(f"Variable {name!r} must be set to a real number.")
        self._variables[str(name)] = float(value)

    def get_variable(self, name: str) -> float:
        """
        Return the value of a variable.

        Raises
        ------
        UnknownVariableError
            If the variable is not set.
        """
        try:
            return self._variables[name]
        except KeyError:
            raise UnknownVariableError([name]) from None

    def remove_variable(self, name: str) -> None:
        """Remove a variable from the table if present."""
        self._variables.pop(name, None)

    def parse_get(self, value: CalculatorLike) -> float:
        """
        Resolve a parameter to a float using the current variable table.

        Parameters
        ----------
        value:
            A CalculatorFloat, expression string or number.

        Returns
        -------
        float
            The evaluated value.

        Raises
        ------
        UnknownVariableError
            If the expression references variables that are not set.
        CalculatorError
            If the expression does not evaluate to a real number.
        """
        try:
            parameter = CalculatorFloat(value)
        except (TypeError, ValueError) as err:
            raise CalculatorError(str(err)) from err

        if parameter.is_float:
            return parameter.float_value()

        missing = parameter.free_symbols - set(self._variables)
        if missing:
            raise UnknownVariableError(missing)

        expr = parameter.to_sympy()
        replacements = {
            symbol: sympy.Float(self._variables[str(symbol)])
            for symbol in expr.free_symbols
        }
        result = expr.xreplace(replacements)
        try:
            return float(result)
        except TypeError as err:
            raise CalculatorError(
                f"Expression {parameter.value!r} does not evaluate to a real number."
            ) from err

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __repr__(self) -> str:
        return f"Calculator(variables={self._variables!r})"


__all__ = ["Calculator"]
