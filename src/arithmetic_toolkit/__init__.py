"""Interactive arithmetic calculator and Fibonacci sequence utilities."""
