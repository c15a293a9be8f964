"""Framework-neutral render output.

Components in this package return Element trees: a tag, inline style,
utility classes, attributes, children and event handlers. Front ends
(the NiceGUI showcase, HTML export, tests) consume the same tree.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

Handler = Callable[..., Any]
StyleValue = Union[str, int, float, Mapping[str, Any]]
Child = Union["Element", str]

VOID_TAGS = frozenset({"input", "img", "br", "hr", "meta", "link"})

_UPPER = re.compile(r"[A-Z]")


def css_property(name: str) -> str:
    """``backgroundColor`` -> ``background-color``; kebab and custom properties pass through."""
    if name.startswith("--"):
        return name
    return _UPPER.sub(lambda match: "-" + match.group().lower(), name)


def style_to_css(style: Mapping[str, StyleValue]) -> str:
    """Render flat style declarations as an inline CSS string.

    Keys may be camelCase or kebab-case. Nested mappings (media queries) are skipped; see ``style_to_rules``.
    """
    return " ".join(
        f"{css_property(prop)}: {value};"
        for prop, value in style.items()
        if not isinstance(value, Mapping)
    )


def style_to_rules(selector: str, style: Mapping[str, StyleValue]) -> str:
    """Render a style mapping, including nested media queries, as CSS rules."""
    rules = [f"{selector} {{ {style_to_css(style)} }}"]
    for prop, value in style.items():
        if isinstance(value, Mapping):
            rules.append(f"{prop} {{ {selector} {{ {style_to_css(value)} }} }}")
    return "\n".join(rules)


def as_children(content: Child | Iterable[Child] | None) -> list[Child]:
    """Normalize a child, a sequence of children or None into a list."""
    if content is None:
        return []
    if isinstance(content, (Element, str)):
        return [content]
    return [child for child in content if child is not None]


@dataclass
class Element:
    """One node of a rendered component tree."""

    tag: str
    style: dict[str, StyleValue] = field(default_factory=dict)
    classes: list[str] = field(default_factory=list)
    props: dict[str, Any] = field(default_factory=dict)
    children: list[Child] = field(default_factory=list)
    handlers: dict[str, Handler] = field(default_factory=dict)
    # motion.MotionSpec for animated elements
    motion: Any = None

    def css_text(self) -> str:
        return style_to_css(self.style)

    def class_name(self) -> str:
        return " ".join(c for c in self.classes if c)

    def on(self, event: str, handler: Handler | None) -> Element:
        """Attach a handler; None leaves the element inert for that event."""
        if handler is not None:
            self.handlers[event] = handler
        return self

    def trigger(self, event: str, *args: Any) -> Any:
        """Dispatch an event to this element's handler, if it has one."""
        handler = self.handlers.get(event)
        if handler is None:
            return None
        return handler(*args)

    def walk(self) -> Iterator[Element]:
        """Yield this element and every descendant element, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.walk()

    def find_all(self, predicate: Callable[[Element], bool]) -> list[Element]:
        return [el for el in self.walk() if predicate(el)]

    def find(self, predicate: Callable[[Element], bool]) -> Element | None:
        return next((el for el in self.walk() if predicate(el)), None)

    def find_by_role(self, role: str) -> Element | None:
        """Find the first element whose ``data-role`` attribute matches."""
        return self.find(lambda el: el.props.get("data-role") == role)

    def text_content(self) -> str:
        parts: list[str] = []
        for child in self.children:
            parts.append(child if isinstance(child, str) else child.text_content())
        return "".join(parts)

    def to_html(self) -> str:
        """Serialize to static HTML; handlers are not serialized."""
        attrs: list[str] = []
        class_name = self.class_name()
        if class_name:
            attrs.append(f'class="{html.escape(class_name)}"')
        css = self.css_text()
        if css:
            attrs.append(f'style="{html.escape(css)}"')
        for name, value in self.props.items():
            if value is None or value is False:
                continue
            if value is True:
                attrs.append(name)
            else:
                attrs.append(f'{name}="{html.escape(str(value))}"')

        opening = f"<{self.tag}{' ' if attrs else ''}{' '.join(attrs)}>"
        if self.tag in VOID_TAGS:
            return opening

        inner = "".join(
            html.escape(child) if isinstance(child, str) else child.to_html()
            for child in self.children
        )
        return f"{opening}{inner}</{self.tag}>"
