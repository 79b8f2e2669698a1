import pytest

from jquery_tools.selector import script


@pytest.mark.parametrize(
    "argument",
    [
        "function(){return 1;}",
        "$('#menu')",
        "jQuery('li').first()",
        "document.body",
        "document.getElementById('x')",
    ],
)
def test_script_like_arguments_are_not_quoted(argument):
    assert script.requires_apostrophe(argument) is False
    assert script.format_argument(argument) == argument


@pytest.mark.parametrize(
    "argument",
    ["myClass", "<b>bold</b>", "12px", "a.b", "see (docs)"],
)
def test_literal_arguments_are_quoted(argument):
    assert script.requires_apostrophe(argument) is True
    assert script.format_argument(argument) == f"'{argument}'"


def test_script_tokens_after_first_parenthesis_do_not_count():
    # "function" appears only after the first "("
    assert script.requires_apostrophe("call(function(){})") is True


def test_document_token_only_counts_before_first_dot():
    assert script.requires_apostrophe("my.document") is True


def test_quote_escapes_apostrophes_and_backslashes():
    assert script.quote("it's") == "'it\\'s'"
    assert script.quote("C:\\path") == "'C:\\\\path'"
    assert script.quote("line1\nline2") == "'line1\\nline2'"


def test_call_joins_arguments_without_spaces():
    assert script.call("children") == ".children()"
    assert script.call("attr", '"title"', "'x'") == ".attr(\"title\",'x')"


def test_expression_helpers():
    assert script.jquery("div#nav") == 'jQuery("div#nav")'
    assert script.jquery('a[title="x"]') == 'jQuery("a[title=\\"x\\"]")'
    assert script.indexed('jQuery("li")', 3) == 'jQuery("li")[3]'
    assert script.wrap_element('jQuery("li")[3]') == 'jQuery(jQuery("li")[3])'
    assert script.returning('jQuery("li")') == 'return jQuery("li")'
    assert script.name_literal("font-size") == '"font-size"'
