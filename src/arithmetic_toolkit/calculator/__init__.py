from arithmetic_toolkit.calculator.engine import CalculatorEngine, calculate

__all__ = ["CalculatorEngine", "calculate"]
