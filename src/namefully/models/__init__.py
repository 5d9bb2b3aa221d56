"""
Name atoms and their statistics.

Exports
-------
- Name, FirstName, LastName
- Summary
"""

from namefully.models.name import FirstName, LastName, Name
from namefully.models.summary import Summary

__all__ = ["FirstName", "LastName", "Name", "Summary"]
