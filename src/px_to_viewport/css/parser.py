"""Lark Transformer that converts a CSS parse tree into a node tree."""

from __future__ import annotations

import bisect
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

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
from px_to_viewport.errors import CssSyntaxError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_IMPORTANT_RE = re.compile(r"(\s*!\s*important)\s*$", re.IGNORECASE)
_COMMENT_RE = re.compile(r"/\*(\s*)([\s\S]*?)(\s*)\*/")


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Build nodes bottom-up, recovering raws from token offsets.

    Each built node records its start/end offsets in ``source`` so that the
    enclosing container can slice the whitespace between siblings out of the
    original text.
    """

    def __init__(self, css: str, file: str | None = None):
        super().__init__()
        self._css = css
        self._input = Input(css=css, file=file)
        self._line_starts = [0] + [m.end() for m in re.finditer(r"\n", css)]

    # ---- helpers ----

    def _position(self, offset: int) -> Position:
        line = bisect.bisect_right(self._line_starts, offset)
        column = offset - self._line_starts[line - 1] + 1
        return Position(line=line, column=column, offset=offset)

    def _source(self, start: int, end: int) -> Source:
        return Source(input=self._input, start=self._position(start), end=self._position(end))

    def _comment(self, token: Token) -> Comment:
        match = _COMMENT_RE.fullmatch(str(token))
        left, text, right = match.group(1), match.group(2), match.group(3)
        if not text:
            # Whitespace-only comment: keep it all on the left.
            left, right = left + right, ""
        return Comment(
            text=text,
            raws={"left": left, "right": right},
            source=self._source(token.start_pos, token.end_pos),
        )

    def _fill(self, container: Container, items: list[object], start: int, end: int) -> None:
        """Attach *items* to *container*, slicing raws between siblings.

        A semicolon that closes a declaration records the whitespace before
        it; any other semicolon is left in the text sliced for the next raw.
        """
        cursor = start
        semicolon = False
        previous: object = None
        for item in items:
            if isinstance(item, Token) and item.type == "SEMI":
                if isinstance(previous, Declaration):
                    gap = self._css[cursor : item.start_pos]
                    if gap:
                        previous.raws["beforeSemicolon"] = gap
                    semicolon = True
                    cursor = item.end_pos
                previous = item
                continue
            if isinstance(item, Token):
                node: Node = self._comment(item)
            else:
                node = item  # type: ignore[assignment]
            node.raws["before"] = self._css[cursor : node.source.start.offset]
            cursor = node.source.end.offset
            container.append(node)
            if not isinstance(node, Comment):
                semicolon = False
            previous = node
        if semicolon:
            container.raws["semicolon"] = True
        container.raws["after"] = self._css[cursor:end]

    # ---- node rules ----

    def declaration(self, items: list[Token]) -> Declaration:
        head, *value_tokens = items
        prop = str(head)[:-1].rstrip()
        start = head.start_pos
        if value_tokens:
            value_start, end = value_tokens[0].start_pos, value_tokens[-1].end_pos
        else:
            value_start = end = head.end_pos
        value = self._css[value_start:end]
        raws: dict[str, object] = {"between": self._css[start + len(prop) : value_start]}
        important = False
        match = _IMPORTANT_RE.search(value)
        if match:
            important = True
            raws["important"] = match.group(1)
            value = value[: match.start()]
        return Declaration(
            prop=prop,
            value=value,
            important=important,
            raws=raws,
            source=self._source(start, end),
        )

    def rule(self, items: list[object]) -> Rule:
        selector_token, lbrace, *body, rbrace = items
        raw = str(selector_token)
        selector = raw.rstrip()
        rule = Rule(
            selector=selector,
            raws={"between": raw[len(selector) :]},
            source=self._source(selector_token.start_pos, rbrace.end_pos),  # type: ignore[union-attr]
        )
        self._fill(rule, body, lbrace.end_pos, rbrace.start_pos)  # type: ignore[union-attr]
        return rule

    def at_rule(self, items: list[object]) -> AtRule:
        name_token = items[0]
        rest = list(items[1:])
        params = ""
        raws: dict[str, object] = {}
        cursor = name_token.end_pos  # type: ignore[union-attr]
        if rest and isinstance(rest[0], Token) and rest[0].type == "AT_PARAMS":
            params_token = rest.pop(0)
            params = str(params_token).rstrip()
            raws["afterName"] = self._css[cursor : params_token.start_pos]
            cursor = params_token.start_pos + len(params)
        opener = rest[0]
        raws["between"] = self._css[cursor : opener.start_pos]  # type: ignore[union-attr]
        name = str(name_token)[1:]
        if opener.type == "SEMI":  # type: ignore[union-attr]
            return AtRule(
                name=name,
                params=params,
                body=False,
                raws=raws,
                source=self._source(name_token.start_pos, opener.end_pos),  # type: ignore[union-attr]
            )
        rbrace = rest[-1]
        at_rule = AtRule(
            name=name,
            params=params,
            raws=raws,
            source=self._source(name_token.start_pos, rbrace.end_pos),  # type: ignore[union-attr]
        )
        self._fill(at_rule, rest[1:-1], opener.end_pos, rbrace.start_pos)  # type: ignore[union-attr]
        return at_rule

    def start(self, items: list[object]) -> Root:
        root = Root(source=self._source(0, len(self._css)))
        self._fill(root, items, 0, len(self._css))
        return root


def parse_css(css: str, from_path: str | None = None) -> Root:
    """Parse CSS text into a Root node.

    *from_path* is recorded as the source file of every node; transforms use
    it for include/exclude filtering.
    """
    try:
        tree = _parser().parse(css)
    except UnexpectedInput as e:
        raise CssSyntaxError(
            f"Unexpected input: {str(e).splitlines()[0]}",
            line=getattr(e, "line", None),
            column=getattr(e, "column", None),
            file=from_path,
            cause=e,
        ) from e
    try:
        return CssTransformer(css, from_path).transform(tree)
    except VisitError as e:
        raise CssSyntaxError(str(e.orig_exc), file=from_path, cause=e) from e
