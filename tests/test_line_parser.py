from canalflow.ingest.line_parser import split_line


def test_quoted_delimiter_is_preserved():
    assert split_line('A,"B,C",D') == ["A", "B,C", "D"]


def test_fields_are_trimmed():
    assert split_line(" a , b ,c ") == ["a", "b", "c"]


def test_empty_line_yields_one_empty_field():
    assert split_line("") == [""]


def test_trailing_delimiter_yields_empty_last_field():
    assert split_line("a,b,") == ["a", "b", ""]


def test_unbalanced_quote_captures_rest_of_line():
    assert split_line('a,"b,c') == ["a", "b,c"]


def test_custom_delimiter():
    assert split_line("a;b;'c,d'", delimiter=";") == ["a", "b", "'c,d'"]
