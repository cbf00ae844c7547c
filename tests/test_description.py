"""Tests for autoforge.styles.renderers.description module."""

from autoforge.signals import ChangeVerb, Signal, SignalKind, parse_diff_context
from autoforge.styles import (
    DescriptionConfig,
    fallback_description,
    generate_smart_description,
    join_clauses,
    join_with_and,
    synthesize,
)
from autoforge.styles.renderers import dedupe_subjects


def _sig(kind, verb, *subjects, score=7):
    return Signal(kind=kind, subjects=subjects, verb=verb, score=score)


class TestJoinHelpers:
    """Tests for join_with_and and join_clauses."""

    def test_join_with_and(self):
        """Test list phrasing."""
        assert join_with_and(["a"]) == "a"
        assert join_with_and(["a", "b"]) == "a and b"
        assert join_with_and(["a", "b", "c"]) == "a, b, and c"

    def test_join_clauses(self):
        """Test clause phrasing."""
        assert join_clauses(["x"]) == "x"
        assert join_clauses(["x", "y"]) == "x, and y"
        assert join_clauses(["x", "y", "z"]) == "x; y, and z"


class TestDedupeSubjects:
    """Tests for dedupe_subjects function."""

    def test_later_signals_lose_claimed_subjects(self):
        """Test that a subject is only rendered once."""
        signals = [
            _sig(SignalKind.COMPONENT, ChangeVerb.CREATE, "CartPage"),
            _sig(SignalKind.FUNCTION, ChangeVerb.IMPLEMENT, "CartPage", "addToCart"),
        ]

        assert dedupe_subjects(signals) == [
            (ChangeVerb.CREATE, ["CartPage"]),
            (ChangeVerb.IMPLEMENT, ["addToCart"]),
        ]

    def test_exhausted_signal_is_dropped(self):
        """Test that a signal with no fresh subjects disappears."""
        signals = [
            _sig(SignalKind.COMPONENT, ChangeVerb.CREATE, "CartPage"),
            _sig(SignalKind.FUNCTION, ChangeVerb.IMPLEMENT, "CartPage"),
        ]

        assert dedupe_subjects(signals) == [(ChangeVerb.CREATE, ["CartPage"])]


class TestSynthesize:
    """Tests for synthesize function."""

    def test_groups_subjects_by_verb(self):
        """Test that signals sharing a verb form one clause."""
        signals = [
            _sig(SignalKind.AUTH, ChangeVerb.ADD, "authentication", score=9),
            _sig(SignalKind.MIDDLEWARE, ChangeVerb.ADD, "cors", score=8),
            _sig(SignalKind.VALIDATION, ChangeVerb.ADD, "input validation", score=8),
        ]

        assert synthesize(signals) == "add authentication, cors, and input validation"

    def test_clauses_in_first_appearance_order(self):
        """Test clause ordering and joining."""
        signals = [
            _sig(SignalKind.COMPONENT, ChangeVerb.CREATE, "ProductPage", score=9),
            _sig(SignalKind.FUNCTION, ChangeVerb.IMPLEMENT, "addToCart", score=8),
            _sig(SignalKind.VALIDATION, ChangeVerb.ADD, "input validation", score=8),
        ]

        assert synthesize(signals) == "create ProductPage; implement addToCart, and add input validation"

    def test_empty(self):
        """Test that no signals give an empty string."""
        assert synthesize([]) == ""


class TestFallbackDescription:
    """Tests for fallback_description function."""

    def test_mixed_small_change(self, plain_edit_diff):
        """Test small mixed changes."""
        assert fallback_description(parse_diff_context(plain_edit_diff)) == "update logic"

    def test_mixed_large_change(self):
        """Test that a large net growth reads as a refactor."""
        lines = ["-old"] + [f"+line {i}" for i in range(25)]
        ctx = parse_diff_context("diff --git a/x b/x\n" + "\n".join(lines))

        assert fallback_description(ctx) == "refactor existing logic"

    def test_threshold_is_configurable(self):
        """Test the refactor threshold setting."""
        ctx = parse_diff_context("-a\n+b\n+c\n+d")

        assert fallback_description(ctx, DescriptionConfig(refactor_threshold=1)) == "refactor existing logic"

    def test_added_only(self):
        """Test additions only."""
        assert fallback_description(parse_diff_context("+hello")) == "add new functionality"

    def test_removed_only(self):
        """Test removals only."""
        assert fallback_description(parse_diff_context("-hello")) == "remove unused code"

    def test_no_content_lines(self):
        """Test a diff with headers only."""
        assert fallback_description(parse_diff_context("diff --git a/x b/x")) == "modify files"


class TestGenerateSmartDescription:
    """Tests for generate_smart_description function."""

    def test_empty(self):
        """Test that empty input is reported as no changes."""
        assert generate_smart_description("") == "no changes detected"
        assert generate_smart_description("   \n") == "no changes detected"

    def test_new_functions(self, cart_diff):
        """Test new functions."""
        assert generate_smart_description(cart_diff) == "implement addToCart and calculateTotal"

    def test_new_component(self, product_page_diff):
        """Test a new component."""
        assert generate_smart_description(product_page_diff) == "create ProductPage"

    def test_component_and_functions(self, product_page_diff, cart_diff):
        """Test that higher scored signals lead the sentence."""
        description = generate_smart_description(product_page_diff + cart_diff)

        assert description == "create ProductPage, and implement addToCart and calculateTotal"

    def test_async_refactor(self, async_refactor_diff):
        """Test promise chain conversion."""
        assert generate_smart_description(async_refactor_diff) == "refactor promise chains to async/await"

    def test_dependencies(self, dependency_bump_diff):
        """Test a dependency bump."""
        assert generate_smart_description(dependency_bump_diff) == "update dependencies"

    def test_debug_logging(self, debug_log_removal_diff):
        """Test removed console logging."""
        assert "remove debug logging" in generate_smart_description(debug_log_removal_diff)

    def test_error_handling(self, error_handling_diff):
        """Test added error handling."""
        assert generate_smart_description(error_handling_diff) == "add error handling"

    def test_unrecognized_change(self, plain_edit_diff):
        """Test the structural fallback."""
        assert generate_smart_description(plain_edit_diff) == "update logic"

    def test_never_empty(self):
        """Test that garbage input still gives a description."""
        assert generate_smart_description("???") == "modify files"
