"""Tests for landscape duplication."""

from px_to_viewport import PxToViewportTransform, process_css
from px_to_viewport.css import AtRule, Rule, parse_css
from px_to_viewport.matchers import create_prop_list_matcher, get_unit_regexp
from px_to_viewport.model import Result
from px_to_viewport.options import options_from_mapping
from px_to_viewport.transforms.landscape import LandscapeQueue, collect_landscape_rule

LANDSCAPE = {"landscape": True}


def _collect(css: str, **options) -> Rule | None:
    opts = options_from_mapping({"landscape": True, **options})
    rule = parse_css(css).nodes[0]
    return collect_landscape_rule(
        rule, opts, get_unit_regexp(opts.unit_to_convert), create_prop_list_matcher(opts.prop_list)
    )


# ---------------------------------------------------------------------------
# collect_landscape_rule
# ---------------------------------------------------------------------------


class TestCollect:
    def test_clone_holds_only_convertible_declarations(self):
        clone = _collect(".a { width: 568px; color: red; height: 284px; }")
        assert clone.selector == ".a"
        assert [(d.prop, d.value) for d in clone.nodes] == [("width", "100vw"), ("height", "50vw")]

    def test_original_untouched(self):
        root = parse_css(".a { width: 568px; }")
        opts = options_from_mapping(LANDSCAPE)
        collect_landscape_rule(root.nodes[0], opts, get_unit_regexp("px"), create_prop_list_matcher(["*"]))
        assert str(root) == ".a { width: 568px; }"

    def test_landscape_unit_and_width(self):
        clone = _collect(".a { width: 100px; }", landscapeUnit="vh", landscapeWidth=1000)
        assert clone.nodes[0].value == "10vh"

    def test_prop_list_respected(self):
        clone = _collect(".a { width: 568px; height: 568px; }", propList=["height"])
        assert [d.prop for d in clone.nodes] == ["height"]

    def test_nothing_convertible_returns_none(self):
        assert _collect(".a { color: red; }") is None

    def test_small_values_still_copied(self):
        clone = _collect(".a { border: 1px solid; }")
        assert clone.nodes[0].value == "1px solid"


# ---------------------------------------------------------------------------
# LandscapeQueue
# ---------------------------------------------------------------------------


class TestQueue:
    def test_flush_empty_queue_is_noop(self):
        root = parse_css(".a { color: red; }")
        assert LandscapeQueue().flush(root) is None
        assert len(root) == 1

    def test_flush_preserves_order_and_drains(self):
        root = parse_css("")
        queue = LandscapeQueue()
        queue.push(Rule(selector=".first"))
        queue.push(Rule(selector=".second"))
        media = queue.flush(root)
        assert isinstance(media, AtRule)
        assert media.params == "(orientation: landscape)"
        assert [r.selector for r in media.nodes] == [".first", ".second"]
        assert root.last is media
        assert len(queue) == 0


# ---------------------------------------------------------------------------
# Whole pass
# ---------------------------------------------------------------------------


class TestLandscapePass:
    def test_block_appended_after_everything(self):
        source = ".a {\n  width: 568px;\n}\n"
        out = process_css(source, LANDSCAPE).css
        assert out == (
            ".a {\n  width: 177.5vw;\n}"
            "\n@media (orientation: landscape) {\n  .a {\n    width: 100vw;\n  }\n}\n"
        )

    def test_exactly_one_block_for_many_rules(self):
        source = ".a { width: 568px; } .b { height: 284px; } .c { color: red; }"
        out = process_css(source, LANDSCAPE).css
        assert out.count("@media (orientation: landscape)") == 1
        root = parse_css(out)
        media = root.last
        assert [r.selector for r in media.nodes] == [".a", ".b"]

    def test_no_block_without_convertible_declarations(self):
        source = ".a { color: red; }"
        assert process_css(source, LANDSCAPE).css == source

    def test_clone_uses_pre_conversion_values(self):
        out = process_css(".a { width: 568px; }", LANDSCAPE).css
        media = parse_css(out).last
        assert media.nodes[0].nodes[0].value == "100vw"

    def test_ignore_comment_does_not_affect_landscape_copy(self):
        source = ".a { /* px-to-viewport-ignore-next */ width: 568px; }"
        out = process_css(source, LANDSCAPE).css
        media = parse_css(out).last
        assert media.nodes[0].nodes[0].value == "100vw"
        assert out.startswith(".a { width: 568px; }")

    def test_rules_inside_media_are_not_collected(self):
        source = "@media print { .a { width: 568px; } }"
        out = process_css(source, {"landscape": True, "mediaQuery": True}).css
        assert "orientation: landscape" not in out

    def test_landscape_media_query_uses_landscape_pair(self):
        source = "@media (orientation: landscape) { .a { width: 568px; } }"
        out = process_css(source, {"landscape": True, "mediaQuery": True}).css
        assert out == "@media (orientation: landscape) { .a { width: 100vw; } }"

    def test_landscape_media_query_without_landscape_flag(self):
        source = "@media (orientation: landscape) { .a { width: 32px; } }"
        out = process_css(source, {"mediaQuery": True}).css
        assert out == "@media (orientation: landscape) { .a { width: 10vw; } }"

    def test_blacklisted_rule_not_collected(self):
        out = process_css(".skip { width: 568px; }", {"landscape": True, "selectorBlackList": [".skip"]}).css
        assert out == ".skip { width: 568px; }"

    def test_queue_does_not_leak_between_passes(self):
        transform = PxToViewportTransform(LANDSCAPE)
        first = parse_css(".a { width: 568px; }")
        transform.apply(first, Result(root=first))
        assert isinstance(first.last, AtRule)

        second = parse_css(".b { color: red; }")
        transform.apply(second, Result(root=second))
        assert str(second) == ".b { color: red; }"

    def test_each_option_set_feeds_the_same_block(self):
        out = process_css(
            ".a { width: 568px; height: 568px; }",
            [
                {"landscape": True, "propList": ["width"]},
                {"landscape": True, "propList": ["height"], "landscapeUnit": "vh"},
            ],
        ).css
        assert out.count("@media") == 1
        media = parse_css(out).last
        assert [[(d.prop, d.value) for d in r.nodes] for r in media.nodes] == [
            [("width", "100vw")],
            [("height", "100vh")],
        ]
