from arithmetic_toolkit.fibonacci.engine import generate, nth

__all__ = ["generate", "nth"]
