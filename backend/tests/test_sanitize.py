import pytest

from contentdesk.utils.sanitize import (
    DEFAULT_ALLOWED_TAGS,
    SanitizationPolicy,
    sanitize,
)


@pytest.fixture
def policy():
    return SanitizationPolicy()


def test_script_is_removed_with_its_contents(policy):
    assert sanitize("<script>bad()</script><p>y</p>", policy) == "<p>y</p>"


def test_style_element_is_removed_with_its_contents(policy):
    assert sanitize("<style>p { color: red }</style><p>y</p>", policy) == "<p>y</p>"


def test_unknown_tags_are_unwrapped_not_escaped(policy):
    cleaned = sanitize("<blink>hi</blink>", policy)

    assert cleaned == "hi"
    assert "&lt;" not in cleaned


def test_javascript_image_source_is_dropped(policy):
    cleaned = sanitize('<img src="javascript:evil()">', policy)

    assert "javascript" not in cleaned
    assert "evil" not in cleaned


def test_data_image_source_is_kept(policy):
    html = '<img src="data:image/png;base64,iVBORw0KGgo=" alt="dot">'
    cleaned = sanitize(html, policy)

    assert 'src="data:image/png;base64,iVBORw0KGgo="' in cleaned
    assert 'alt="dot"' in cleaned


def test_link_attributes_are_kept(policy):
    html = '<a href="https://example.com" target="_blank" rel="noopener noreferrer">x</a>'
    cleaned = sanitize(html, policy)

    assert 'href="https://example.com"' in cleaned
    assert 'target="_blank"' in cleaned
    assert 'rel="noopener noreferrer"' in cleaned


def test_event_handler_attributes_are_dropped(policy):
    cleaned = sanitize('<p onclick="steal()" class="lead" id="intro">text</p>', policy)

    assert "onclick" not in cleaned
    assert 'class="lead"' in cleaned
    assert 'id="intro"' in cleaned


def test_tables_survive(policy):
    html = "<table><thead><tr><th>a</th></tr></thead><tbody><tr><td>1</td></tr></tbody></table>"

    assert sanitize(html, policy) == html


def test_empty_input_gives_empty_output(policy):
    assert sanitize("", policy) == ""
    assert sanitize(None, policy) == ""


@pytest.mark.parametrize("html", [
    "<p>plain</p>",
    "<script>bad()</script><p>y</p>",
    "<p>unclosed <b>bold",
    '<a href="javascript:alert(1)" onclick="x()">link</a>',
    '<div style="color: red"><img src="https://example.com/a.png" width="10"></div>',
    "<h1>Title</h1><blink>gone</blink><ul><li>one</li></ul>",
])
def test_sanitize_is_idempotent(policy, html):
    once = sanitize(html, policy)

    assert sanitize(once, policy) == once


def test_policy_from_config_overrides_tags():
    policy = SanitizationPolicy.from_config({
        "SANITIZE_ALLOWED_TAGS": {"p"},
        "SANITIZE_ALLOWED_ATTRIBUTES": None,
        "SANITIZE_ALLOWED_SCHEMES": None,
    })

    assert policy.allowed_tags == frozenset({"p"})
    assert sanitize("<p><em>hi</em></p>", policy) == "<p>hi</p>"


def test_policy_from_empty_config_uses_defaults():
    policy = SanitizationPolicy.from_config({})

    assert policy.allowed_tags == DEFAULT_ALLOWED_TAGS
    assert "img" in policy.allowed_tags
    assert "href" in policy.allowed_attributes["a"]


@pytest.mark.parametrize("html", [
    '<iframe src="https://www.youtube.com/embed/x"><p>fallback</p></iframe><p>after</p>',
    "<textarea><b>draft</b></textarea><p>after</p>",
    '<noscript><img src="https://t.example/x.png"></noscript><p>after</p>',
    "<xmp><i>raw</i></xmp><p>after</p>",
    "<noembed><em>old</em></noembed><p>after</p>",
    "<noframes><u>frames</u></noframes><p>after</p>",
    "<title><b>head</b></title><p>after</p>",
])
def test_raw_text_elements_are_dropped_with_contents(policy, html):
    cleaned = sanitize(html, policy)

    assert cleaned == "<p>after</p>"
    assert "&lt;" not in cleaned


def test_raw_text_elements_dropped_even_when_configured(policy):
    permissive = SanitizationPolicy(allowed_tags=DEFAULT_ALLOWED_TAGS | {"iframe"})

    assert sanitize("<iframe><p>x</p></iframe><p>y</p>", permissive) == "<p>y</p>"


def test_attribute_map_from_environment(monkeypatch):
    from contentdesk.config import _attribute_map

    monkeypatch.setenv("TEST_SANITIZE_ATTRS", "a:href|title, img:src ,*:class")

    assert _attribute_map("TEST_SANITIZE_ATTRS") == {
        "a": {"href", "title"},
        "img": {"src"},
        "*": {"class"},
    }


def test_attribute_map_unset(monkeypatch):
    from contentdesk.config import _attribute_map

    monkeypatch.delenv("TEST_SANITIZE_ATTRS", raising=False)

    assert _attribute_map("TEST_SANITIZE_ATTRS") is None


def test_policy_from_config_overrides_attributes():
    policy = SanitizationPolicy.from_config({
        "SANITIZE_ALLOWED_ATTRIBUTES": {"a": {"href"}},
    })

    cleaned = sanitize('<a href="https://example.com" target="_blank" class="c">x</a>', policy)

    assert cleaned == '<a href="https://example.com">x</a>'
