"""
Build and submit elasticsearch type mappings
"""

from esmapping.doctype import DocType
from esmapping.exceptions import InvalidException
from esmapping.mapping import MappingType
from esmapping.request import Method

__all__ = ["DocType", "InvalidException", "MappingType", "Method"]
