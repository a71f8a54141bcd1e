"""Line reading with end-of-line conversion, style sheet selection, delegation, job reports and version numbers for printing text."""

__version__ = "0.1.0"

__all__ = [
    "buffer",
    "delegate",
    "generate",
    "select",
    "versions",
]