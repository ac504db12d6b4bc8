"""
Catalog clients for trivia services.

This package contains the abstract catalog interface and the jService
implementation used to build boards.
"""

from .base import BaseCatalog
from .jservice import JServiceCatalog

__all__ = [
    'BaseCatalog',
    'JServiceCatalog'
]
