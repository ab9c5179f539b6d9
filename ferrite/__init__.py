"""Declare, validate and report on the environment variables an application uses."""

__version__ = "0.1.0"