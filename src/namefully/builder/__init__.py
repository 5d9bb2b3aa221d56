"""
Builders: ``NameBuilder`` accumulates atoms, ``NameDerivative`` stages
transformations of an existing name.
"""

from namefully.builder.accumulator import NameBuilder
from namefully.builder.derivative import NameDerivative

__all__ = ["NameBuilder", "NameDerivative"]
