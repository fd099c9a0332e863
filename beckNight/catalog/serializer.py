"""catalog.serializer
Writes a Catalog back in the fixed layout the picker ships with:

    const beckMovies = [
        {
            number: 1,
            title: "...",
            ...
        },
        ...
    ];

Field order never depends on which fields changed. Optional fields are
emitted only when set, and the last emitted field has no trailing comma.
"""

from __future__ import annotations

from beckNight.catalog.models import Catalog, MovieRecord, FIELD_ORDER, INT_KEYS

_INDENT = " " * 4


def escape_text(value: str) -> str:
    """Escape *value* for a double-quoted literal."""
    return (
        value.replace("\\", "\\\\")
             .replace('"', '\\"')
             .replace("\n", "\\n")
             .replace("\r", "\\r")
    )


def movie_fields(movie: MovieRecord) -> list[str]:
    """Return the ``key: value`` lines for *movie*, in storage order."""
    lines = []
    for key, attr in FIELD_ORDER:
        value = getattr(movie, attr)
        if key in INT_KEYS:
            lines.append(f"{key}: {value}")
        elif key == "title" or value:
            lines.append(f'{key}: "{escape_text(value)}"')
    return lines


def format_movie(movie: MovieRecord) -> str:
    body = ",\n".join(f"{_INDENT * 2}{line}" for line in movie_fields(movie))
    return f"{_INDENT}{{\n{body}\n{_INDENT}}}"


def format_catalog(catalog: Catalog) -> str:
    movies = ",\n".join(format_movie(m) for m in catalog.movies)
    return f"const {catalog.name} = [\n{movies}\n];\n"
