"""Script-backed dynamic parameters for job automation."""

__version__ = "1.0"
