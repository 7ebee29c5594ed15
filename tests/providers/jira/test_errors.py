import httpx

from storypush.providers.jira.errors import describe_error, epic_link_hint


def test_describe_error_lists_field_errors() -> None:
    response = httpx.Response(400, json={"errors": {"summary": "too long", "priority": "bad"}})

    assert describe_error(response) == "400 - summary: too long, priority: bad"


def test_describe_error_falls_back_to_error_messages() -> None:
    response = httpx.Response(404, json={"errorMessages": ["No project", "Try again"], "errors": {}})

    assert describe_error(response) == "404 - No project, Try again"


def test_describe_error_uses_raw_text_for_non_json() -> None:
    assert describe_error(httpx.Response(502, text="Bad Gateway")) == "502 - Bad Gateway"
    assert describe_error(httpx.Response(500)) == "500"


def test_epic_link_hint_triggers_on_parent_or_epic_link_mentions() -> None:
    parent = httpx.Response(400, json={"errors": {"parent": "Could not find issue"}})
    epic_link = httpx.Response(400, json={"errorMessages": ["Epic Link is invalid"]})
    other = httpx.Response(400, json={"errors": {"summary": "required"}})

    hint = epic_link_hint(parent, epic_link_field="parent")
    assert hint is not None
    assert "'parent'" in hint
    assert epic_link_hint(epic_link, epic_link_field="customfield_10014") is not None
    assert epic_link_hint(other, epic_link_field="parent") is None
