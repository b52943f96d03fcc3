"""
File loaders that turn CSV and Excel files into a Table.
"""

from quality_framework.loaders.factory import LoaderFactory

__all__ = ['LoaderFactory']
