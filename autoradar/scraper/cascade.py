from dataclasses import dataclass
from typing import Callable, Union

from bs4 import Tag

from autoradar.scraper.normalizer import clean_text


Rule = Union[str, Callable[[Tag], list[Tag]]]

LAZY_IMAGE_ATTRS = ("data-src", "data-lazy-src")


def _apply(rule: Rule, node: Tag) -> list[Tag]:
    if callable(rule):
        return list(rule(node) or [])
    return node.select(rule)


@dataclass(frozen=True)
class Cascade:
    """Ordered lookup rules tried until one yields something.

    Rules are CSS selectors or callables taking the node and returning matching tags.
    Later rules cover older or alternate layouts of the same site and are only evaluated
    when every earlier rule came back empty.
    """

    rules: tuple[Rule, ...]

    def __init__(self, *rules: Rule) -> None:
        object.__setattr__(self, "rules", tuple(rules))

    def select(self, node: Tag) -> list[Tag]:
        for rule in self.rules:
            found = _apply(rule, node)
            if found:
                return found
        return []

    def text(self, node: Tag) -> str:
        for rule in self.rules:
            for found in _apply(rule, node):
                text = clean_text(found.get_text(" ", strip=True))
                if text:
                    return text
        return ""

    def attr(self, node: Tag, name: str) -> str:
        for rule in self.rules:
            for found in _apply(rule, node):
                value = found.get(name)
                if isinstance(value, list):
                    value = " ".join(value)
                if value and value.strip():
                    return value.strip()
        return ""


def _is_placeholder(url: str) -> bool:
    return url.startswith("data:")


def extract_image_url(node: Tag, images: Cascade) -> str:
    src = images.attr(node, "src")
    if src and not _is_placeholder(src):
        return src

    for img in node.find_all("img"):
        for attr in LAZY_IMAGE_ATTRS:
            value = (img.get(attr) or "").strip()
            if value and not _is_placeholder(value):
                return value
    return ""
