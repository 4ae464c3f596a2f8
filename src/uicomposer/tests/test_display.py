"""Tests for the display surface."""

from uicomposer import Display, Node


def test_starts_with_loading_text():
    display = Display()
    assert display.loading
    assert display.content == "Loading..."
    assert display.to_html() == '<div class="App">Loading...</div>'


def test_update_replaces_content():
    display = Display(loading_text="Please wait")
    first = Node(type="Text", props={"text": "one"})
    second = Node(type="Text", props={"text": "two"})
    display.update(first)
    display.update(second)
    assert display.content == second
    assert display.updates == 2
    assert not display.loading


def test_update_with_nothing():
    display = Display()
    display.update(None)
    assert display.content is None
    assert display.to_html() == '<div class="App"></div>'


def test_html_for_tree(composer):
    display = Display()
    display.update(
        composer.render(
            {
                "type": "Button",
                "attributes": {"variant": "outline"},
                "slots": {"children": [{"type": "Text", "attributes": {"text": "Go"}}]},
            }
        )
    )
    html = display.to_html()
    assert 'data-component="Button"' in html
    assert 'data-variant="outline"' in html
    assert '<div data-slot="children">Go</div>' in html


def test_html_escapes_text():
    display = Display()
    display.update(Node(type="Text", props={"text": "<b>hi</b>"}))
    assert "&lt;b&gt;hi&lt;/b&gt;" in display.to_html()


def test_html_skips_missing_children(composer):
    display = Display()
    display.update(
        composer.render(
            {
                "type": "UserInterface",
                "slots": {
                    "children": [
                        {"type": "Missing"},
                        {"type": "Text", "attributes": {"text": "kept"}},
                    ]
                },
            }
        )
    )
    assert display.to_html() == '<div class="App">kept</div>'


def test_html_list_and_mapping_attributes_are_not_slots(composer):
    """Only the type's declared slots become slot blocks, whatever the value shape."""
    display = Display()
    display.update(composer.render({"type": "Button", "attributes": {"variant": ["a", "b"]}}))
    html = display.to_html()
    assert 'data-variant="[&#34;a&#34;, &#34;b&#34;]"' in html
    assert "data-slot" not in html

    display.update(composer.render({"type": "Button", "attributes": {"variant": {"tone": "dark"}}}))
    assert 'data-variant="{&#34;tone&#34;: &#34;dark&#34;}"' in display.to_html()


def test_html_slots_follow_node_slot_names():
    node = Node(
        type="Card",
        props={"tags": ["x"], "body": [Node(type="Text", props={"text": "hi"})]},
        slots=["header", "body"],
    )
    display = Display()
    display.update(node)
    assert display.to_html() == (
        '<div class="App"><div data-component="Card" data-key="none"'
        ' data-tags="[&#34;x&#34;]"><div data-slot="body">hi</div></div></div>'
    )


def test_on_update_hook():
    seen = []
    display = Display(on_update=lambda d: seen.append(d.content))
    display.update(None)
    display.update(Node(type="Text", props={"text": "x"}))
    assert seen == [None, Node(type="Text", props={"text": "x"})]
