import pytest

from prd_prompts.rendering import (
    InvalidBindings,
    InvalidTemplate,
    TemplateRenderer,
    UnresolvedPlaceholder,
    UnresolvedPolicy,
    missing,
    parse,
    placeholders,
    render,
)


def test_render_example() -> None:
    rendered = render("Build a [Title] app for [Company].", {"Title": "CRM", "Company": "Acme"})
    assert rendered == "Build a CRM app for Acme."


@pytest.mark.parametrize("bindings", [None, {}, {"Title": "CRM"}, {"unused": "value"}])
def test_template_without_placeholders_is_unchanged(bindings) -> None:
    template = "No placeholders here.\n\n  Indented line ] with a stray bracket\n"
    assert render(template, bindings) == template


def test_repeated_placeholder_is_substituted_everywhere() -> None:
    template = "[X] and [X]\nthen [X] again"
    rendered = render(template, {"X": "v"})
    assert rendered == "v and v\nthen v again"
    assert "[X]" not in rendered


def test_unresolved_placeholder_is_left_by_default() -> None:
    assert render("Keep [Unknown] as is.", {}) == "Keep [Unknown] as is."


def test_blank_policy_removes_unresolved_placeholders() -> None:
    rendered = render("A [Known] and [Unknown].", {"Known": "k"}, policy="blank")
    assert rendered == "A k and ."


def test_error_policy_lists_missing_labels_in_order() -> None:
    renderer = TemplateRenderer(UnresolvedPolicy.ERROR)
    with pytest.raises(UnresolvedPlaceholder) as excinfo:
        renderer.render("[B] [A] [B] [Known]", {"Known": "k"})
    assert excinfo.value.labels == ["B", "A"]


def test_error_policy_renders_when_everything_is_bound() -> None:
    renderer = TemplateRenderer("error")
    assert renderer.render("Hi [Name]!", {"Name": "Ada"}) == "Hi Ada!"


def test_rendered_output_without_placeholders_is_a_fixed_point() -> None:
    bindings = {"Title": "CRM", "Company": "Acme"}
    once = render("Build a [Title] app for [Company].\n", bindings)
    assert render(once, bindings) == once


def test_replacement_text_is_not_rescanned() -> None:
    rendered = render("Say [A].", {"A": "[B]", "B": "nope"})
    assert rendered == "Say [B]."


def test_whitespace_and_line_breaks_are_preserved() -> None:
    template = "\t[Name]  \r\n\n   trailing   "
    assert render(template, {"Name": "x"}) == "\tx  \r\n\n   trailing   "


def test_labels_match_exactly() -> None:
    assert render("[company name]", {"Company Name": "Acme"}) == "[company name]"


def test_numeric_values_are_converted_to_text() -> None:
    assert render("[Count] users, [Ratio] ratio", {"Count": 3, "Ratio": 0.5}) == "3 users, 0.5 ratio"


def test_unterminated_bracket_is_invalid() -> None:
    with pytest.raises(InvalidTemplate) as excinfo:
        render("Build a [Title app.", {"Title": "CRM"})
    assert excinfo.value.line == 1
    assert excinfo.value.column == 9


def test_placeholder_cannot_span_lines() -> None:
    with pytest.raises(InvalidTemplate) as excinfo:
        render("first line\nBuild a [Title\napp]", {})
    assert excinfo.value.line == 2


def test_nested_bracket_is_invalid() -> None:
    with pytest.raises(InvalidTemplate):
        render("[outer [inner]]", {})


def test_empty_placeholder_is_invalid() -> None:
    with pytest.raises(InvalidTemplate):
        render("Nothing [] here", {})


@pytest.mark.parametrize("template", ["", None, 42])
def test_template_must_be_non_empty_text(template) -> None:
    with pytest.raises(InvalidTemplate):
        render(template, {})


@pytest.mark.parametrize("value", [None, True, b"bytes", ["list"], {"a": "b"}])
def test_non_text_binding_value_is_invalid(value) -> None:
    with pytest.raises(InvalidBindings) as excinfo:
        render("[X]", {"X": value})
    assert excinfo.value.label == "X"


@pytest.mark.parametrize("label", ["[X]", "X]", "", 7])
def test_invalid_binding_label(label) -> None:
    with pytest.raises(InvalidBindings):
        render("[X]", {label: "v"})


def test_bindings_must_be_a_mapping() -> None:
    with pytest.raises(InvalidBindings):
        render("[X]", [("X", "v")])


def test_parse_round_trips_template_text() -> None:
    template = "Intro [A]\nmiddle ] text [B][A] end"
    tokens = parse(template)
    assert "".join(token.text for token in tokens) == template
    assert [token.label for token in tokens if token.is_placeholder] == ["A", "B", "A"]
    assert tokens[1].offset == template.index("[A]")


def test_placeholders_are_unique_in_first_appearance_order() -> None:
    assert placeholders("[B] [A] [B] [C] [A]") == ["B", "A", "C"]


def test_missing_reports_unbound_labels() -> None:
    assert missing("[A] [B] [C]", {"B": "b"}) == ["A", "C"]
