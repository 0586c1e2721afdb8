"""Symbolic parameters and the calculator that resolves them."""

from .calculator import Calculator
from .core import CalculatorFloat, CalculatorLike

__all__ = ["Calculator", "CalculatorFloat", "CalculatorLike"]
