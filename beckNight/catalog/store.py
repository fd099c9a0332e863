# catalog/store.py
from __future__ import annotations
import os
import tempfile
from pathlib import Path

from beckNight.settings import CATALOG_PATH
from beckNight.catalog.models import Catalog
from beckNight.catalog.parser import parse_catalog
from beckNight.catalog.serializer import format_catalog


def load_catalog(path: Path = CATALOG_PATH) -> Catalog:
    """Read and parse the catalog file. Raises OSError / CatalogParseError."""
    return parse_catalog(Path(path).read_text(encoding="utf-8"))


def save_catalog(catalog: Catalog, path: Path = CATALOG_PATH) -> None:
    """
    Serialize *catalog* in one pass and swap it in place of *path*.

    The text goes to a temp file next to the target first, so readers only
    ever see the old file or the complete new one.
    """
    path = Path(path)
    content = format_catalog(catalog)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
