"""Read plain-text spreadsheets and print them as aligned columns, with a small flag parser."""

__version__ = "0.1.0"
__all__ = ["cli", "cxa", "sheet"]