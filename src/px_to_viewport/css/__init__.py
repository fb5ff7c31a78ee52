from px_to_viewport.css.nodes import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Input,
    Node,
    Position,
    Root,
    Rule,
    Source,
)
from px_to_viewport.css.parser import parse_css
from px_to_viewport.css.stringifier import Stringifier

__all__ = [
    "AtRule",
    "Comment",
    "Container",
    "Declaration",
    "Input",
    "Node",
    "Position",
    "Root",
    "Rule",
    "Source",
    "Stringifier",
    "parse_css",
]
