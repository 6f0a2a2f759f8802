"""Stack and queue exercises as console programs and small library classes."""

__version__ = "0.1.0"