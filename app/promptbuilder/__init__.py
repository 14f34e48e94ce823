"""promptbuilder - collect files and print them as a tagged prompt document."""

__version__ = "0.1.0"
