"""Square matrices of floats with operator-based arithmetic, and a printed demonstration."""

__version__ = "0.1.0"
__all__ = ["matrix", "demo"]