import html
import re

EMPTY_FIGURE_RE = re.compile(r"<figure\s*></figure>")
_ID_UNSAFE_RE = re.compile(r"[^\w\-]+")


def remove_empty_figures(value: str) -> str:
    """
    Strip empty <figure></figure> wrappers left behind by the editor.

    The editor leaves one behind when an embedded image is deleted. Passes
    repeat until nothing matches, so nested wrappers go too.
    """
    while True:
        value, count = EMPTY_FIGURE_RE.subn("", value)
        if not count:
            return value


def html_id(value: str) -> str:
    """Turn a field handle into a safe DOM id."""
    return _ID_UNSAFE_RE.sub("-", value).strip("-")


def namespace_id(element_id: str, namespace: str | None) -> str:
    if not namespace:
        return element_id
    return f"{html_id(namespace)}-{element_id}"


def escape_text(value: str) -> str:
    # Quotes stay as-is so the textarea content round-trips unchanged.
    return html.escape(value, quote=False)
