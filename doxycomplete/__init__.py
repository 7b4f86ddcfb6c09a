"""Doxygen comment synthesis and merging for C++ declarations."""

__version__ = "0.1.0"
