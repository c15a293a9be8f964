from imaginify.design_system.elements import Element, as_children, style_to_css


class TestStyleToCss:
    def test_flat_declarations(self) -> None:
        assert style_to_css({"color": "#000", "opacity": 1}) == "color: #000; opacity: 1;"

    def test_nested_mappings_are_skipped(self) -> None:
        assert style_to_css({"width": "100%", "@media (min-width: 768px)": {"width": "50%"}}) == (
            "width: 100%;"
        )

    def test_camel_case_keys(self) -> None:
        assert style_to_css({"backgroundColor": "#fff", "WebkitBackdropFilter": "blur(2px)"}) == (
            "background-color: #fff; -webkit-backdrop-filter: blur(2px);"
        )

    def test_kebab_and_custom_properties_pass_through(self) -> None:
        assert style_to_css({"z-index": "10", "--color-accent": "#007aff"}) == (
            "z-index: 10; --color-accent: #007aff;"
        )


class TestAsChildren:
    def test_none(self) -> None:
        assert as_children(None) == []

    def test_single_string(self) -> None:
        assert as_children("hi") == ["hi"]

    def test_iterable_drops_none(self) -> None:
        child = Element("span")
        assert as_children([child, None, "x"]) == [child, "x"]  # type: ignore[list-item]


class TestElement:
    def _tree(self) -> Element:
        return Element(
            "div",
            props={"data-role": "root"},
            children=[
                Element("span", props={"data-role": "first"}, children=["Hello, "]),
                Element("b", children=["world"]),
            ],
        )

    def test_walk_is_depth_first(self) -> None:
        assert [el.tag for el in self._tree().walk()] == ["div", "span", "b"]

    def test_find_by_role(self) -> None:
        tree = self._tree()

        assert tree.find_by_role("first").tag == "span"  # type: ignore[union-attr]
        assert tree.find_by_role("missing") is None

    def test_find_all(self) -> None:
        assert len(self._tree().find_all(lambda el: el.tag != "div")) == 2

    def test_text_content(self) -> None:
        assert self._tree().text_content() == "Hello, world"

    def test_handlers(self) -> None:
        clicks: list[str] = []
        element = Element("button").on("click", lambda: clicks.append("clicked"))

        element.trigger("click")

        assert clicks == ["clicked"]

    def test_none_handler_leaves_element_inert(self) -> None:
        element = Element("button").on("click", None)

        assert element.handlers == {}
        assert element.trigger("click") is None

    def test_to_html(self) -> None:
        element = Element(
            "button",
            style={"color": "#000"},
            classes=["px-2", ""],
            props={"type": "button", "disabled": True, "title": None, "hidden": False},
            children=["<Save>"],
        )

        assert element.to_html() == (
            '<button class="px-2" style="color: #000;" type="button" disabled>&lt;Save&gt;</button>'
        )

    def test_void_tags_have_no_closing_tag(self) -> None:
        assert Element("input", props={"value": "a"}).to_html() == '<input value="a">'
