"""Serialize a CSS tree back to text.

Raw formatting captured by the parser is reused verbatim.  Nodes created or
cleaned by a transform have no raws; for those the defaults below apply,
indenting by nesting depth.
"""

from __future__ import annotations

from px_to_viewport.css.nodes import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Node,
    Root,
    Rule,
)

INDENT = "  "


def _depth(node: Node) -> int:
    """Number of non-root ancestors."""
    depth = 0
    parent = node.parent
    while parent is not None and not isinstance(parent, Root):
        depth += 1
        parent = parent.parent
    return depth


class Stringifier:
    """Turn nodes into CSS text."""

    def stringify(self, node: Node) -> str:
        parts: list[str] = []
        self._write(node, parts)
        return "".join(parts)

    def _write(self, node: Node, out: list[str], semicolon: bool = False) -> None:
        if isinstance(node, Root):
            self._body(node, out)
            out.append(node.raws.get("after", ""))
        elif isinstance(node, Rule):
            out.append(node.selector)
            out.append(node.raws.get("between", " "))
            self._block(node, out)
        elif isinstance(node, AtRule):
            self._at_rule(node, out)
        elif isinstance(node, Declaration):
            out.append(node.prop)
            out.append(node.raws.get("between", ": "))
            out.append(node.value)
            if node.important:
                out.append(node.raws.get("important", " !important"))
            if semicolon:
                out.append(node.raws.get("beforeSemicolon", ""))
                out.append(";")
        elif isinstance(node, Comment):
            left = node.raws.get("left", " ")
            right = node.raws.get("right", " ")
            out.append(f"/*{left}{node.text}{right}*/")
        else:  # pragma: no cover
            raise TypeError(f"Unknown node type: {type(node).__name__}")

    def _at_rule(self, node: AtRule, out: list[str]) -> None:
        out.append("@" + node.name)
        if node.params:
            out.append(node.raws.get("afterName", " "))
            out.append(node.params)
        if node.nodes is None:
            out.append(node.raws.get("between", ""))
            out.append(";")
            return
        out.append(node.raws.get("between", " "))
        self._block(node, out)

    def _block(self, node: Container, out: list[str]) -> None:
        out.append("{")
        self._body(node, out)
        if node.nodes:
            default_after = "\n" + INDENT * _depth(node)
        else:
            default_after = ""
        out.append(node.raws.get("after", default_after))
        out.append("}")

    def _body(self, node: Container, out: list[str]) -> None:
        nodes = node.nodes or []
        # Every declaration but the last non-comment child needs a semicolon.
        last = len(nodes) - 1
        while last >= 0 and isinstance(nodes[last], Comment):
            last -= 1
        for i, child in enumerate(nodes):
            out.append(self._before(child, i))
            semicolon = i != last or bool(node.raws.get("semicolon"))
            self._write(child, out, semicolon=semicolon)

    def _before(self, node: Node, index: int) -> str:
        if "before" in node.raws:
            return node.raws["before"]
        if isinstance(node.parent, Root):
            return "" if index == 0 else "\n"
        return "\n" + INDENT * _depth(node)
