from pathlib import Path

import pytest

import beckNight
from beckNight.catalog import (
    Catalog, MovieRecord, CatalogParseError,
    parse_catalog, format_catalog, format_movie, load_catalog, save_catalog,
)

FULL_CATALOG = '''const beckMovies = [
    {
        number: 1,
        title: "Full",
        year: 2020,
        description: "desc",
        imdbUrl: "https://imdb.com/title/tt1/",
        tv4playUrl: "https://tv4.se/",
        posterUrl: "https://img.example/p.jpg",
        runtime: "90 min",
        imdbRating: "7.5"
    },
    {
        number: 2,
        title: "Bare",
        year: 1998
    }
];
'''


def test_parse_reads_every_field():
    catalog = parse_catalog(FULL_CATALOG)
    assert catalog.name == "beckMovies"
    assert len(catalog) == 2

    full = catalog.movies[0]
    assert full == MovieRecord(
        number=1, title="Full", year=2020, description="desc",
        imdb_url="https://imdb.com/title/tt1/", tv4play_url="https://tv4.se/",
        poster_url="https://img.example/p.jpg", runtime="90 min", imdb_rating="7.5",
    )
    assert catalog.movies[1] == MovieRecord(2, "Bare", 1998)
    assert catalog.by_number(2).title == "Bare"
    assert catalog.by_number(3) is None


def test_required_only_record_has_no_optional_keys_or_trailing_comma():
    text = format_movie(MovieRecord(7, "Bare", 1998))
    assert text == (
        "    {\n"
        "        number: 7,\n"
        '        title: "Bare",\n'
        "        year: 1998\n"
        "    }"
    )


def test_all_optional_fields_one_separator_between_each():
    catalog = parse_catalog(FULL_CATALOG)
    block = format_movie(catalog.movies[0])
    lines = block.splitlines()[1:-1]
    assert len(lines) == 9
    assert all(line.endswith(",") for line in lines[:-1])
    assert lines[-1] == '        imdbRating: "7.5"'


@pytest.mark.parametrize("last_field, attr, value", [
    ("imdbUrl", "imdb_url", "https://imdb.com/title/tt2/"),
    ("posterUrl", "poster_url", "https://img.example/x.jpg"),
    ("runtime", "runtime", "88 min"),
])
def test_last_present_field_carries_no_separator(last_field, attr, value):
    movie = MovieRecord(3, "T", 2001, description="d")
    setattr(movie, attr, value)
    lines = format_movie(movie).splitlines()
    assert lines[-2] == f'        {last_field}: "{value}"'
    assert lines[-3].endswith(",")


def test_parse_then_format_is_identical():
    assert format_catalog(parse_catalog(FULL_CATALOG)) == FULL_CATALOG


def test_output_field_order_ignores_input_order():
    text = '''const beckMovies = [
        { imdbRating: "8.1", year: 1999, runtime: "90 min", title: "Mixed", number: 4 }
    ];'''
    out = format_catalog(parse_catalog(text))
    keys = [line.strip().split(":")[0] for line in out.splitlines() if ":" in line]
    assert keys == ["number", "title", "year", "runtime", "imdbRating"]


def test_quotes_and_backslashes_survive_a_round_trip():
    movie = MovieRecord(1, 'Beck - "Monstret"', 1998,
                        description='He said "stop" \\ then\nleft')
    out = format_catalog(Catalog(movies=[movie]))
    assert 'description: "He said \\"stop\\" \\\\ then\\nleft"' in out
    assert parse_catalog(out).movies[0] == movie


def test_lenient_input_syntax():
    text = """
    // the list
    let films = [
        /* first */
        {'number': 1, "title": 'It\\'s Beck', year: 1997, description: null,},
        {number: 2, title: "Tv\\u00e5", year: 1998, runtime: ""},
    ];
    """
    catalog = parse_catalog(text)
    assert catalog.name == "films"
    assert catalog.movies[0].title == "It's Beck"
    assert catalog.movies[0].description is None
    assert catalog.movies[1].title == "Två"
    assert catalog.movies[1].runtime is None


def test_bare_array_uses_default_name():
    catalog = parse_catalog('[{number: 1, title: "A", year: 2000}]')
    assert catalog.name == "beckMovies"


@pytest.mark.parametrize("text, fragment", [
    ("invalid content", "Expected '['"),
    ('const beckMovies = [{number: 1, title: "A", year: 2000}', "Expected ']'"),
    ('const beckMovies = [{number: 1, title: "A", year: 2000, genre: "x"}];', "Unknown movie field"),
    ('const beckMovies = [{number: 1, year: 2000}];', "Missing required field(s): title"),
    ('const beckMovies = [{number: "1", title: "A", year: 2000}];', "'number' must be an integer"),
    ('const beckMovies = [{number: 1.5, title: "A", year: 2000}];', "'number' must be an integer"),
    ('const beckMovies = [{number: 1, title: 5, year: 2000}];', "'title' must be a string"),
    ('const beckMovies = [{number: 1, number: 2, title: "A", year: 2000}];', "Duplicate field"),
    ('const beckMovies = [{number: 1, title: "A", year: 2000}, {number: 1, title: "B", year: 2001}];',
     "Duplicate movie number 1"),
    ('const beckMovies = [{number: 1, title: "A, year: 2000}];', "Unterminated string"),
    ('const beckMovies = [{number: 1, title: "A", year: 2000}]; extra', "Expected eof"),
    ('const beckMovies = [{number: 1, title: "A", year: 2000 + 1}];', "Unexpected character '+'"),
])
def test_malformed_catalog_is_rejected(text, fragment):
    with pytest.raises(CatalogParseError) as err:
        parse_catalog(text)
    assert fragment in str(err.value)


def test_parse_error_reports_position():
    text = 'const beckMovies = [\n    {\n        number: 1,\n        title: @\n'
    with pytest.raises(CatalogParseError) as err:
        parse_catalog(text)
    assert (err.value.line, err.value.column) == (4, 16)


def test_bundled_catalog_parses_and_is_canonical():
    path = Path(beckNight.__file__).parent / "data" / "beckDB.js"
    text = path.read_text(encoding="utf-8")
    catalog = parse_catalog(text)
    assert [m.number for m in catalog] == list(range(1, len(catalog) + 1))
    assert format_catalog(catalog) == text


def test_save_catalog_replaces_file_in_one_go(tmp_path):
    path = tmp_path / "data" / "beckDB.js"
    path.parent.mkdir()
    path.write_text("old", encoding="utf-8")
    catalog = parse_catalog(FULL_CATALOG)
    catalog.movies[1].imdb_rating = "6.1"

    save_catalog(catalog, path)

    assert list(path.parent.iterdir()) == [path]
    assert load_catalog(path).movies[1].imdb_rating == "6.1"
    assert path.read_text(encoding="utf-8").endswith('imdbRating: "6.1"\n    }\n];\n')
