"""Tests for placeholder substitution"""

from progressive_workflow.substitution import find_placeholders, substitute_variables


def test_replace_single_variable():
    assert substitute_variables("Hello {{NAME}}!", {"NAME": "World"}) == "Hello World!"


def test_replace_multiple_variables():
    assert substitute_variables("{{A}} and {{B}}", {"A": "One", "B": "Two"}) == "One and Two"


def test_unmatched_variables_kept():
    assert substitute_variables("{{KNOWN}} and {{UNKNOWN}}", {"KNOWN": "Yes"}) == "Yes and {{UNKNOWN}}"
    assert substitute_variables("{{A}} {{B}}", {"A": "x"}) == "x {{B}}"


def test_repeated_token():
    assert substitute_variables("{{X}}-{{X}}-{{X}}", {"X": "1"}) == "1-1-1"


def test_no_tokens():
    assert substitute_variables("plain text", {"X": "1"}) == "plain text"


def test_no_variables():
    assert substitute_variables("keep {{X}}", None) == "keep {{X}}"
    assert substitute_variables("keep {{X}}", {}) == "keep {{X}}"


def test_none_value_keeps_token():
    assert substitute_variables("{{X}}", {"X": None}) == "{{X}}"


def test_empty_string_value_replaces():
    assert substitute_variables("[{{X}}]", {"X": ""}) == "[]"


def test_replacement_not_rescanned():
    result = substitute_variables("{{A}}", {"A": "{{B}}", "B": "nope"})
    assert result == "{{B}}"


def test_malformed_tokens_untouched():
    text = "{{ A }} {A} {{A-B}} {{}}"
    assert substitute_variables(text, {"A": "x", "A-B": "y"}) == text


def test_idempotent_when_values_have_no_tokens():
    variables = {"A": "alpha", "B": "beta"}
    once = substitute_variables("{{A}} {{B}} {{C}}", variables)
    assert substitute_variables(once, variables) == once


def test_find_placeholders():
    assert find_placeholders("{{B}} {{A}} {{B}} {{ C }}") == ["B", "A"]
    assert find_placeholders("nothing here") == []
