"""
Rendering helpers: the format pattern interpreter and the flatten engine.
"""

from namefully.formatting.flatten import flatten, zip_name
from namefully.formatting.formatter import NameFormatter

__all__ = ["NameFormatter", "flatten", "zip_name"]
