# pyright: reportMissingImports=false

"""Mount design-system Element trees as NiceGUI elements."""

from __future__ import annotations

from typing import Any

from nicegui import ui  # pyright: ignore[reportMissingImports]

from imaginify.design_system.elements import Element, Handler

# DOM value read for form events, keyed by input type
_VALUE_EXPRESSIONS = {
    "checkbox": "e.target.checked",
    "radio": "e.target.checked",
}


def _value_expression(element: Element) -> str:
    return _VALUE_EXPRESSIONS.get(str(element.props.get("type", "")), "e.target.value")


def _bind(target: Any, element: Element, event: str, handler: Handler) -> None:
    if event in ("input", "change"):
        target.on(
            event,
            lambda e: handler(e.args),
            js_handler=f"(e) => emit({_value_expression(element)})",
        )
    else:
        target.on(event, lambda _: handler())


def mount(element: Element | str) -> Any:
    """Create the NiceGUI element tree for ``element`` in the current context."""
    if isinstance(element, str):
        span = ui.element("span")
        span._text = element
        return span

    target = ui.element(element.tag)
    class_name = element.class_name()
    if class_name:
        target.classes(class_name)
    css = element.css_text()
    if css:
        target.style(css)
    for name, value in element.props.items():
        if value is None or value is False:
            continue
        target._props[name] = value
    for event, handler in element.handlers.items():
        _bind(target, element, event, handler)

    if len(element.children) == 1 and isinstance(element.children[0], str):
        target._text = element.children[0]
    elif element.children:
        with target:
            for child in element.children:
                mount(child)
    return target
