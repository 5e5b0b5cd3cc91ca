"""Black-and-white image dithering and a small Tk viewer for the results."""

__version__ = "0.1.0"
__all__ = ["__version__"]