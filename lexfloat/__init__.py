"""Float kinds, extended-precision floats, rounding, error estimates, cached powers of ten and limb arithmetic."""

__version__ = "0.1.0"

__all__ = [
    "cached",
    "errors",
    "exponent",
    "extended",
    "limbs",
    "num",
]