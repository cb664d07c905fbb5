import pytest

from backend.core.errors import StepFileError
from backend.core.step_csv import detect_delimiter, parse_steps_csv
from backend.models.step import Step


def test_parse_trims_fields_and_blank_values():
    text = (
        "action,xpath,value\n"
        "  click , //button[@id='go'] ,  \n"
        "fill,//input[@name='q'],  hello world \n"
        "\n"
        "wait,//div[@id='done'],\n"
    )
    steps = parse_steps_csv(text)

    assert steps == [
        Step(action="click", xpath="//button[@id='go']", value=None),
        Step(action="fill", xpath="//input[@name='q']", value="hello world"),
        Step(action="wait", xpath="//div[@id='done']", value=None),
    ]


def test_parse_without_value_column():
    steps = parse_steps_csv("action,xpath\nscroll,//footer\n")
    assert steps == [Step(action="scroll", xpath="//footer")]


def test_parse_quoted_field_with_delimiter():
    text = 'action,xpath,value\nvalidate,"//p[contains(@class, \'lead\')]","a, b"\n'
    steps = parse_steps_csv(text)

    assert steps[0].xpath == "//p[contains(@class, 'lead')]"
    assert steps[0].value == "a, b"


@pytest.mark.parametrize("delimiter", [";", "\t", "|"])
def test_parse_other_delimiters(delimiter):
    text = delimiter.join(["action", "xpath", "value"]) + "\n" + delimiter.join(["select", "//select", "Red"]) + "\n"
    assert parse_steps_csv(text) == [Step(action="select", xpath="//select", value="Red")]


def test_parse_header_is_case_and_space_insensitive_and_bom():
    text = "\ufeff Action , XPath ,Value\r\nclick,//a,\r\n"
    assert parse_steps_csv(text) == [Step(action="click", xpath="//a")]


def test_parse_skips_rows_of_empty_cells():
    assert parse_steps_csv("action,xpath,value\n,,\nclick,//a,\n") == [Step(action="click", xpath="//a")]


def test_parse_short_row_fills_missing_cells():
    assert parse_steps_csv("action,xpath,value\nclick\n") == [Step(action="click", xpath="")]


def test_parse_empty_file():
    assert parse_steps_csv("") == []
    assert parse_steps_csv("\n\n") == []


def test_parse_missing_required_column():
    with pytest.raises(StepFileError, match="xpath"):
        parse_steps_csv("action,selector\nclick,//a\n")


def test_detect_delimiter_falls_back_to_comma():
    assert detect_delimiter("action") == ","
    assert detect_delimiter("action;xpath;value") == ";"
