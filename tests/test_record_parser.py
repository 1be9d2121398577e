from aviation_codes.parse.records import parse_line, to_float


def test_splits_quoted_and_bare_fields():
    line = '507,"London Heathrow Airport","London","United Kingdom","LHR","EGLL",51.4706,-0.461941,83'
    fields = parse_line(line)
    assert fields == [
        "507", "London Heathrow Airport", "London", "United Kingdom",
        "LHR", "EGLL", "51.4706", "-0.461941", "83",
    ]


def test_comma_inside_quotes_does_not_split():
    fields = parse_line('9104,"Skyline Air, Ltd.",\\N,"Q1"')
    assert fields == ["9104", "Skyline Air, Ltd.", "", "Q1"]


def test_null_token_and_empty_fields_become_empty():
    assert parse_line('\\N,,"",x') == ["", "", "", "x"]


def test_fields_are_trimmed():
    assert parse_line('  a ,  "b"  , c  ') == ["a", "b", "c"]


def test_trailing_comma_yields_empty_last_field():
    assert parse_line("a,b,") == ["a", "b", ""]


def test_empty_line_is_one_empty_field():
    assert parse_line("") == [""]


def test_unbalanced_quote_swallows_rest_of_line():
    # the opening quote never closes, so later commas stay in the field
    assert parse_line('1,"open,2,3') == ["1", "open,2,3"]


def test_doubled_quote_is_not_an_escape():
    assert parse_line('"say ""hi""",x') == ["say hi", "x"]


def test_quoted_null_token_is_still_null():
    assert parse_line('"\\N",a') == ["", "a"]


def test_carriage_return_is_trimmed():
    assert parse_line('a,"b"\r') == ["a", "b"]


def test_to_float_parses_numbers():
    assert to_float("33.94250107") == 33.94250107
    assert to_float("-118.4") == -118.4
    assert to_float("125") == 125.0
    assert to_float("1e3") == 1000.0


def test_to_float_uses_leading_number():
    assert to_float("125ft") == 125.0
    assert to_float(".5") == 0.5


def test_to_float_defaults_to_zero():
    assert to_float("") == 0.0
    assert to_float("abc") == 0.0
    assert to_float("high") == 0.0
    assert to_float("-") == 0.0
    assert to_float("1e999") == 0.0
