"""CSS tree model: Root, Rule, AtRule, Declaration and Comment nodes.

Nodes keep the raw formatting found in the source (``raws``) so that an
untouched tree serializes back to the exact input.  Raw keys:

    before      text between the previous sibling (or the parent's ``{``)
                and this node
    between     rule: selector to ``{``; declaration: prop to value
                (the colon included); at-rule: params to ``{`` or ``;``
    after       container: last child to ``}`` (or end of file for Root)
    afterName   at-rule: name to params
    semicolon   container: whether the last declaration ended with ``;``
    important   declaration: the raw ``!important`` suffix
    left/right  comment: whitespace inside the delimiters
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

from px_to_viewport.errors import CssSyntaxError

if TYPE_CHECKING:
    from px_to_viewport.model.diagnostic import Diagnostic
    from px_to_viewport.model.result import Result


@dataclass(frozen=True)
class Input:
    """The source a tree was parsed from."""

    css: str
    file: str | None = None


@dataclass(frozen=True)
class Position:
    line: int
    column: int
    offset: int


@dataclass(frozen=True)
class Source:
    """Where a node came from.  Shared, not copied, by clones."""

    input: Input
    start: Position | None = None
    end: Position | None = None


class Node:
    """Base class for every tree node."""

    type = "node"

    def __init__(self, *, raws: dict[str, Any] | None = None, source: Source | None = None):
        self.parent: Container | None = None
        self.raws: dict[str, Any] = dict(raws or {})
        self.source = source

    # ---- navigation ----

    def root(self) -> "Node":
        node: Node = self
        while node.parent is not None:
            node = node.parent
        return node

    def prev(self) -> "Node | None":
        if self.parent is None:
            return None
        index = self.parent.index(self)
        return self.parent.nodes[index - 1] if index > 0 else None

    def next(self) -> "Node | None":
        if self.parent is None:
            return None
        index = self.parent.index(self)
        nodes = self.parent.nodes
        return nodes[index + 1] if index + 1 < len(nodes) else None

    # ---- mutation ----

    def remove(self) -> "Node":
        if self.parent is not None:
            self.parent.remove_child(self)
        return self

    def clone(self, **overrides: Any) -> "Node":
        """Return a detached copy of this node (and its children)."""
        cloned = copy.copy(self)
        cloned.parent = None
        cloned.raws = copy.deepcopy(self.raws)
        for name, value in overrides.items():
            setattr(cloned, name, value)
        return cloned

    def clean_raws(self) -> None:
        """Drop formatting raws so the serializer falls back to defaults."""
        for key in ("before", "after", "between", "beforeSemicolon"):
            self.raws.pop(key, None)

    # ---- diagnostics ----

    def error(self, message: str, *, plugin: str | None = None) -> CssSyntaxError:
        """Build (not raise) an error located at this node."""
        line = column = None
        file = None
        if self.source is not None:
            file = self.source.input.file
            if self.source.start is not None:
                line = self.source.start.line
                column = self.source.start.column
        return CssSyntaxError(message, line=line, column=column, file=file, plugin=plugin)

    def warn(self, result: "Result", message: str, *, plugin: str | None = None) -> "Diagnostic":
        return result.warn(message, node=self, plugin=plugin)

    # ---- output ----

    def to_string(self) -> str:
        from px_to_viewport.css.stringifier import Stringifier

        return Stringifier().stringify(self)

    def __str__(self) -> str:
        return self.to_string()


class Container(Node):
    """A node that owns an ordered list of children."""

    def __init__(self, *, nodes: list[Node] | None = None, **kwargs: Any):
        super().__init__(**kwargs)
        self.nodes: list[Node] | None = []
        for child in nodes or []:
            self.append(child)

    @property
    def first(self) -> Node | None:
        return self.nodes[0] if self.nodes else None

    @property
    def last(self) -> Node | None:
        return self.nodes[-1] if self.nodes else None

    def index(self, child: Node | int) -> int:
        if isinstance(child, int):
            return child
        for i, node in enumerate(self.nodes or []):
            if node is child:
                return i
        raise ValueError(f"{child!r} is not a child of {self!r}")

    def _adopt(self, node: Node) -> Node:
        if node.parent is not None:
            node.parent.remove_child(node)
        node.parent = self
        return node

    def append(self, *nodes: Node) -> "Container":
        if self.nodes is None:
            self.nodes = []
        for node in nodes:
            self.nodes.append(self._adopt(node))
        return self

    def insert_after(self, exist: Node | int, add: Node) -> "Container":
        index = self.index(exist)
        self._adopt(add)
        self.nodes.insert(index + 1, add)
        return self

    def insert_before(self, exist: Node | int, add: Node) -> "Container":
        index = self.index(exist)
        self._adopt(add)
        self.nodes.insert(index, add)
        return self

    def remove_child(self, child: Node | int) -> "Container":
        index = self.index(child)
        node = self.nodes.pop(index)
        node.parent = None
        return self

    def remove_all(self) -> "Container":
        for node in self.nodes or []:
            node.parent = None
        if self.nodes is not None:
            self.nodes = []
        return self

    def clone(self, **overrides: Any) -> "Container":
        children = overrides.pop("nodes", None)
        cloned = super().clone(**overrides)
        if self.nodes is None and children is None:
            cloned.nodes = None
            return cloned
        cloned.nodes = []
        source_nodes = children if children is not None else [n.clone() for n in self.nodes]
        cloned.append(*source_nodes)
        return cloned

    def clean_raws(self) -> None:
        super().clean_raws()
        for node in self.nodes or []:
            node.clean_raws()

    # ---- traversal ----

    def walk(self) -> Iterator[Node]:
        """Yield every descendant depth-first, in document order.

        Children are read from a snapshot, so nodes inserted during the walk
        are not visited.
        """
        for node in list(self.nodes or []):
            yield node
            if isinstance(node, Container):
                yield from node.walk()

    def walk_rules(self) -> Iterator["Rule"]:
        for node in self.walk():
            if isinstance(node, Rule):
                yield node

    def walk_decls(self) -> Iterator["Declaration"]:
        for node in self.walk():
            if isinstance(node, Declaration):
                yield node

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self.nodes or []))

    def __len__(self) -> int:
        return len(self.nodes or [])


class Root(Container):
    type = "root"

    def __repr__(self) -> str:
        return f"Root(nodes={len(self)})"


class Rule(Container):
    type = "rule"

    def __init__(self, selector: str = "", **kwargs: Any):
        super().__init__(**kwargs)
        self.selector = selector

    def __repr__(self) -> str:
        return f"Rule(selector={self.selector!r})"


class AtRule(Container):
    """An at-rule.  ``nodes`` is ``None`` for body-less rules like ``@import``."""

    type = "atrule"

    def __init__(self, name: str = "", params: str = "", *, body: bool = True, **kwargs: Any):
        super().__init__(**kwargs)
        self.name = name
        self.params = params
        if not body and not self.nodes:
            self.nodes = None

    def __repr__(self) -> str:
        return f"AtRule(name={self.name!r}, params={self.params!r})"


class Declaration(Node):
    type = "decl"

    def __init__(self, prop: str = "", value: str = "", *, important: bool = False, **kwargs: Any):
        super().__init__(**kwargs)
        self.prop = prop
        self.value = value
        self.important = important

    def __repr__(self) -> str:
        return f"Declaration(prop={self.prop!r}, value={self.value!r})"


class Comment(Node):
    type = "comment"

    def __init__(self, text: str = "", **kwargs: Any):
        super().__init__(**kwargs)
        self.text = text

    def __repr__(self) -> str:
        return f"Comment(text={self.text!r})"
