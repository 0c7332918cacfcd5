"""Generate a face picture from a name by stacking transparent PNG layers."""

__version__ = "0.1.0"
__all__ = ["__version__"]