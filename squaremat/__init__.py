"""Square matrices of floats with arithmetic, comparison, transpose, power and determinant, and a demo command."""

__version__ = "0.1.0"
__all__ = ["matrix", "demo"]