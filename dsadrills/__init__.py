"""Array drills (dsadrills.arrays) and recursion drills (dsadrills.recursion)."""

__version__ = "0.1.0"
__all__ = ["arrays", "recursion"]