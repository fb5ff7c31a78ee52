"""Tests for the CSS tree model and default formatting."""

import pytest

from px_to_viewport.css import AtRule, Comment, Declaration, Root, Rule, parse_css
from px_to_viewport.errors import CssSyntaxError
from px_to_viewport.model import Result, Severity


def _rule(*decls: tuple[str, str]) -> Rule:
    rule = Rule(selector=".a")
    for prop, value in decls:
        rule.append(Declaration(prop=prop, value=value))
    return rule


# ---------------------------------------------------------------------------
# Navigation and mutation
# ---------------------------------------------------------------------------


class TestNavigation:
    def test_prev_and_next(self):
        rule = _rule(("width", "1px"), ("height", "2px"), ("margin", "3px"))
        middle = rule.nodes[1]
        assert middle.prev() is rule.nodes[0]
        assert middle.next() is rule.nodes[2]
        assert rule.nodes[0].prev() is None
        assert rule.nodes[2].next() is None

    def test_detached_node_has_no_siblings(self):
        decl = Declaration(prop="width", value="1px")
        assert decl.prev() is None
        assert decl.next() is None

    def test_root_climbs_to_top(self):
        root = parse_css("@media print { .a { width: 1px; } }")
        decl = next(root.walk_decls())
        assert decl.root() is root


class TestMutation:
    def test_insert_after(self):
        rule = _rule(("width", "1px"), ("height", "2px"))
        added = Declaration(prop="width", value="2vw")
        rule.insert_after(rule.nodes[0], added)
        assert [d.value for d in rule.nodes] == ["1px", "2vw", "2px"]
        assert added.parent is rule

    def test_insert_before_by_index(self):
        rule = _rule(("width", "1px"))
        rule.insert_before(0, Comment(text="note"))
        assert isinstance(rule.first, Comment)

    def test_remove_detaches(self):
        rule = _rule(("width", "1px"), ("height", "2px"))
        first = rule.nodes[0]
        first.remove()
        assert first.parent is None
        assert len(rule) == 1

    def test_append_moves_node_between_parents(self):
        a = _rule(("width", "1px"))
        b = Rule(selector=".b")
        decl = a.nodes[0]
        b.append(decl)
        assert len(a) == 0
        assert decl.parent is b

    def test_remove_all(self):
        rule = _rule(("width", "1px"), ("height", "2px"))
        children = list(rule.nodes)
        assert rule.remove_all() is rule
        assert len(rule) == 0
        assert all(child.parent is None for child in children)

    def test_index_of_foreign_node_raises(self):
        rule = _rule(("width", "1px"))
        with pytest.raises(ValueError):
            rule.index(Declaration(prop="x", value="y"))


class TestClone:
    def test_clone_is_detached_copy(self):
        root = parse_css(".a { width: 1px; }")
        decl = root.nodes[0].nodes[0]
        copy = decl.clone(value="2vw")
        assert copy.parent is None
        assert copy.value == "2vw"
        assert decl.value == "1px"
        assert copy.raws == decl.raws
        assert copy.raws is not decl.raws

    def test_clone_shares_source(self):
        root = parse_css(".a { width: 1px; }", from_path="x.css")
        rule = root.nodes[0]
        assert rule.clone().source is rule.source

    def test_container_clone_copies_children(self):
        rule = _rule(("width", "1px"), ("height", "2px"))
        copy = rule.clone()
        assert [d.prop for d in copy.nodes] == ["width", "height"]
        assert all(d.parent is copy for d in copy.nodes)
        assert copy.nodes[0] is not rule.nodes[0]

    def test_clone_then_remove_all_keeps_selector(self):
        rule = _rule(("width", "1px"))
        skeleton = rule.clone().remove_all()
        assert skeleton.selector == ".a"
        assert len(skeleton) == 0
        assert len(rule) == 1

    def test_bodyless_at_rule_clone(self):
        at_rule = AtRule(name="import", params="'a.css'", body=False)
        assert at_rule.clone().nodes is None


class TestWalk:
    def test_walk_skips_nodes_inserted_during_iteration(self):
        rule = _rule(("width", "1px"), ("height", "2px"))
        seen = []
        for decl in rule.walk_decls():
            seen.append(decl.prop)
            rule.insert_after(decl, Declaration(prop=decl.prop + "-copy", value="0"))
        assert seen == ["width", "height"]
        assert len(rule) == 4


# ---------------------------------------------------------------------------
# Default formatting for built nodes
# ---------------------------------------------------------------------------


class TestDefaultFormatting:
    def test_built_rule(self):
        root = Root()
        root.append(_rule(("width", "10px"), ("height", "5px")))
        assert str(root) == ".a {\n  width: 10px;\n  height: 5px\n}"

    def test_built_media_block_indents_children(self):
        root = Root()
        root.append(_rule(("width", "10px")))
        media = AtRule(name="media", params="(orientation: landscape)")
        media.append(_rule(("width", "1vw")))
        root.append(media)
        assert str(root) == (
            ".a {\n  width: 10px\n}"
            "\n@media (orientation: landscape) {\n  .a {\n    width: 1vw\n  }\n}"
        )

    def test_clean_raws_falls_back_to_defaults(self):
        root = parse_css(".a{width:1px}")
        rule = root.nodes[0]
        rule.clean_raws()
        assert str(root) == ".a {\n  width: 1px\n}"

    def test_empty_rule(self):
        root = Root()
        root.append(Rule(selector=".empty"))
        assert str(root) == ".empty {}"

    def test_important_default(self):
        rule = Rule(selector=".a")
        rule.append(Declaration(prop="width", value="1px", important=True))
        assert "width: 1px !important" in str(rule)


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


class TestDiagnostics:
    def test_error_carries_location_and_plugin(self):
        root = parse_css(".a {\n  width: 1px;\n}", from_path="app.css")
        decl = root.nodes[0].nodes[0]
        error = decl.error("boom", plugin="px-to-viewport")
        assert isinstance(error, CssSyntaxError)
        assert (error.line, error.column, error.file) == (2, 3, "app.css")
        assert str(error) == "px-to-viewport: app.css:2:3: boom"

    def test_warn_appends_to_result(self):
        root = parse_css(".a { width: 1px; }")
        result = Result(root=root)
        decl = root.nodes[0].nodes[0]
        diagnostic = decl.warn(result, "careful", plugin="px-to-viewport")
        assert result.messages == [diagnostic]
        assert diagnostic.severity is Severity.WARNING
        assert diagnostic.node is decl
        assert diagnostic.line == 1
        assert str(diagnostic) == "WARNING [1:6]: px-to-viewport: careful"
