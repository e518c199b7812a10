"""Meditate: timed, looping meditation audio sessions."""

__app_name__ = "Meditate"
__version__ = "0.1.0"
