"""Neural model catalogue, Gemini command-line runner, settings and console handlers."""

__version__ = "0.3.0"