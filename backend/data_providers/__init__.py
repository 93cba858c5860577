"""
Data Providers Package
Reference data (company details, news, related companies) for a ticker
"""

from .base_provider import BaseDataProvider, ReferenceData, ReferenceDataError
from .polygon_provider import PolygonProvider, get_polygon_provider

__all__ = [
    'BaseDataProvider',
    'ReferenceData',
    'ReferenceDataError',
    'PolygonProvider',
    'get_polygon_provider'
]
