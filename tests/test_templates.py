import pytest

from DynParamUtils.exceptions import TemplateError
from DynParamUtils.templates import TemplateLoader, build_parameter_context, render_parameter, template_for


@pytest.fixture
def letters(add_script):
    add_script("letters.py", ["a", "b", "<c>"])


@pytest.mark.parametrize(
    "choice_type, template",
    [
        ("PT_SINGLE_SELECT", "parameter/select.html.j2"),
        ("PT_MULTI_SELECT", "parameter/multi_select.html.j2"),
        ("PT_CHECKBOX", "parameter/checkbox.html.j2"),
        ("PT_RADIO", "parameter/radio.html.j2"),
        (None, "parameter/select.html.j2"),
    ],
)
def test_template_for_choice_types(make_definition, choice_type, template):
    assert template_for(make_definition("choice", choice_type=choice_type)) == template


def test_template_for_other_types(make_definition):
    assert template_for(make_definition("string")) == "parameter/string.html.j2"
    assert template_for(make_definition("boolean")) == "parameter/boolean.html.j2"


def test_context(letters, make_definition):
    context = build_parameter_context(make_definition("choice", name="L", script_id="letters.py"))
    assert context["choices"] == ["a", "b", "<c>"]
    assert context["default"] == "a"
    assert context["visible_item_count"] == 3


def test_render_single_select(letters, make_definition):
    html = render_parameter(make_definition("choice", name="L", script_id="letters.py", description="Pick one"))
    assert '<select id="param-L" name="L">' in html
    assert '<option value="a" selected>a</option>' in html
    assert "&lt;c&gt;" in html
    assert "Pick one" in html


def test_render_multi_select_and_readonly(letters, make_definition):
    definition = make_definition(
        "choice", name="L", script_id="letters.py", choice_type="PT_MULTI_SELECT", readonly_input_field=True
    )
    html = render_parameter(definition)
    assert 'multiple size="3" disabled' in html


def test_render_boolean(add_script, make_definition):
    add_script("flag.py", True)
    html = render_parameter(make_definition("boolean", name="DRY_RUN", script_id="flag.py"))
    assert 'value="true" checked' in html


def test_missing_template(tmp_path):
    with pytest.raises(TemplateError):
        TemplateLoader(str(tmp_path)).load("parameter/select.html.j2")


def test_render_boolean_readonly(add_script, make_definition):
    add_script("flag.py", False)
    definition = make_definition("boolean", name="DRY_RUN", script_id="flag.py", readonly_input_field=True)
    assert 'value="true" disabled' in render_parameter(definition)
