"""Contract Sizer - deployed bytecode size reports for compiled smart contracts."""

__version__ = "0.1.0"
