"""catalog.parser
Reads the catalog file (``const beckMovies = [ {...}, ... ];``) without
executing it.

The file is a JavaScript-style literal: bare or quoted keys, single- or
double-quoted strings, integers, comments and trailing commas. It is
tokenized here and checked against the MovieRecord schema; anything else
raises `CatalogParseError` with the line / column of the offending token.
"""

from __future__ import annotations
import re
from typing import Any, NamedTuple

from beckNight.settings import CATALOG_NAME
from beckNight.catalog.models import (
    Catalog, MovieRecord, FIELD_ORDER, REQUIRED_KEYS, INT_KEYS,
)


class CatalogError(Exception):
    """Base class for catalog read / write problems."""


class CatalogParseError(CatalogError):
    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line   = line
        self.column = column
        where = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"{message}{where}")


# ---------- tokenizer ------------------------------------------------------
_TOKEN_RE = re.compile(
    r"""
      (?P<ws>\s+)
    | (?P<comment>//[^\n]*|/\*.*?\*/)
    | (?P<string>"(?:[^"\\\n]|\\.)*"|'(?:[^'\\\n]|\\.)*')
    | (?P<number>-?\d+(?:\.\d+)?)
    | (?P<ident>[A-Za-z_$][\w$]*)
    | (?P<punct>[\[\]{}:,;=])
    """,
    re.VERBOSE | re.DOTALL,
)
_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_ESCAPES   = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}
_DECLARATIONS = ("const", "let", "var")


class Token(NamedTuple):
    kind: str       # string | number | ident | punct | eof
    value: Any
    line: int
    column: int


def _unescape(body: str) -> str:
    def repl(m: re.Match) -> str:
        esc = m.group(1)
        if len(esc) == 5:
            return chr(int(esc[1:], 16))
        if esc == "\n":                    # line continuation
            return ""
        return _ESCAPES.get(esc, esc)
    return _ESCAPE_RE.sub(repl, body)


def tokenize(text: str) -> list[Token]:
    tokens: list[Token] = []
    pos, line, line_start = 0, 1, 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        column = pos - line_start + 1
        if not m:
            ch = text[pos]
            what = "Unterminated string" if ch in "\"'" else f"Unexpected character {ch!r}"
            raise CatalogParseError(what, line, column)

        kind, raw = m.lastgroup, m.group()
        if kind == "string":
            tokens.append(Token(kind, _unescape(raw[1:-1]), line, column))
        elif kind == "number":
            value = float(raw) if "." in raw else int(raw)
            tokens.append(Token(kind, value, line, column))
        elif kind in ("ident", "punct"):
            tokens.append(Token(kind, raw, line, column))

        newlines = raw.count("\n")
        if newlines:
            line += newlines
            line_start = pos + raw.rfind("\n") + 1
        pos = m.end()

    tokens.append(Token("eof", None, line, pos - line_start + 1))
    return tokens


# ---------- recursive descent ----------------------------------------------
class _Parser:
    def __init__(self, tokens: list[Token]):
        self._tokens = tokens
        self._i = 0

    def peek(self) -> Token:
        return self._tokens[self._i]

    def next(self) -> Token:
        tok = self._tokens[self._i]
        if tok.kind != "eof":
            self._i += 1
        return tok

    def accept(self, kind: str, value: Any = None) -> Token | None:
        tok = self.peek()
        if tok.kind == kind and (value is None or tok.value == value):
            return self.next()
        return None

    def expect(self, kind: str, value: Any = None) -> Token:
        tok = self.accept(kind, value)
        if tok is None:
            found = self.peek()
            wanted = repr(value) if value is not None else kind
            shown  = "end of file" if found.kind == "eof" else repr(found.value)
            raise CatalogParseError(f"Expected {wanted}, found {shown}", found.line, found.column)
        return tok

    # -------------------------------------------------------------- values
    def value(self) -> Any:
        tok = self.peek()
        if tok.kind in ("string", "number"):
            return self.next().value
        if tok.kind == "ident" and tok.value in ("true", "false", "null"):
            self.next()
            return {"true": True, "false": False, "null": None}[tok.value]
        if self.accept("punct", "["):
            return self.array_items(self.value)
        if tok.kind == "punct" and tok.value == "{":
            return self.object()[0]
        shown = "end of file" if tok.kind == "eof" else repr(tok.value)
        raise CatalogParseError(f"Unexpected {shown}", tok.line, tok.column)

    def array_items(self, item) -> list:
        """Parse items up to the closing bracket (opening one already eaten)."""
        items = []
        while not self.accept("punct", "]"):
            items.append(item())
            if not self.accept("punct", ","):
                self.expect("punct", "]")
                break
        return items

    def object(self) -> tuple[dict, Token]:
        start = self.expect("punct", "{")
        obj: dict[str, Any] = {}
        while not self.accept("punct", "}"):
            key_tok = self.peek()
            if key_tok.kind not in ("ident", "string"):
                self.expect("ident")
            self.next()
            if key_tok.value in obj:
                raise CatalogParseError(
                    f"Duplicate field {key_tok.value!r}", key_tok.line, key_tok.column
                )
            self.expect("punct", ":")
            obj[key_tok.value] = self.value()
            if not self.accept("punct", ","):
                self.expect("punct", "}")
                break
        return obj, start


# ---------- schema ---------------------------------------------------------
_KNOWN = {key: attr for key, attr in FIELD_ORDER}


def _to_record(obj: dict[str, Any], tok: Token) -> MovieRecord:
    unknown = set(obj) - set(_KNOWN)
    if unknown:
        raise CatalogParseError(
            f"Unknown movie field(s): {', '.join(sorted(unknown))}", tok.line, tok.column
        )
    missing = [k for k in REQUIRED_KEYS if obj.get(k) is None]
    if missing:
        raise CatalogParseError(
            f"Missing required field(s): {', '.join(missing)}", tok.line, tok.column
        )

    kwargs: dict[str, Any] = {}
    for key, value in obj.items():
        if key in INT_KEYS:
            if isinstance(value, bool) or not isinstance(value, int):
                raise CatalogParseError(f"Field {key!r} must be an integer", tok.line, tok.column)
        elif value is not None and not isinstance(value, str):
            raise CatalogParseError(f"Field {key!r} must be a string", tok.line, tok.column)
        elif value == "" and key != "title":
            value = None
        kwargs[_KNOWN[key]] = value
    return MovieRecord(**kwargs)


def parse_catalog(text: str) -> Catalog:
    """Parse catalog source text into a `Catalog`."""
    p = _Parser(tokenize(text))

    name = CATALOG_NAME
    if p.peek().kind == "ident" and p.peek().value in _DECLARATIONS:
        p.next()
        name = p.expect("ident").value
        p.expect("punct", "=")

    p.expect("punct", "[")
    records: list[tuple[dict, Token]] = p.array_items(p.object)
    p.accept("punct", ";")
    p.expect("eof")

    movies: list[MovieRecord] = []
    seen: set[int] = set()
    for obj, tok in records:
        movie = _to_record(obj, tok)
        if movie.number in seen:
            raise CatalogParseError(f"Duplicate movie number {movie.number}", tok.line, tok.column)
        seen.add(movie.number)
        movies.append(movie)
    return Catalog(movies=movies, name=name)
