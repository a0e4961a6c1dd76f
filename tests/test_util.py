import pytest

from pagerrelay.errors import JsonAccessError, JsonParseError
from pagerrelay.util import print_json_str


def test_prints_body(capsys):
    result = print_json_str({"body": "hello"}, "body")
    assert result == "hello"
    assert capsys.readouterr().out == "body: hello\n"


def test_missing_key():
    with pytest.raises(JsonParseError):
        print_json_str({"other": "x"}, "body")


def test_not_an_object():
    with pytest.raises(JsonParseError):
        print_json_str(["body"], "body")


def test_null_value(capsys):
    with pytest.raises(JsonAccessError):
        print_json_str({"body": None}, "body")
    assert capsys.readouterr().out == ""