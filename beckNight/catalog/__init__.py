"""
catalog
~~~~~~~
The movie catalog: record dataclasses, the literal-file parser and
serializer, and load / save helpers.
"""

from beckNight.catalog.models     import Catalog, MovieRecord
from beckNight.catalog.parser     import CatalogError, CatalogParseError, parse_catalog
from beckNight.catalog.serializer import format_catalog, format_movie
from beckNight.catalog.store      import load_catalog, save_catalog

__all__ = [
    "Catalog", "MovieRecord",
    "CatalogError", "CatalogParseError", "parse_catalog",
    "format_catalog", "format_movie",
    "load_catalog", "save_catalog",
]
