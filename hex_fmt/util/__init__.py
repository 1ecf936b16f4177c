"""Utilities used by the hex formatters."""
