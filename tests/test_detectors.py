"""Tests for autoforge.signals.detectors module."""

import re

from autoforge.signals import (
    DETECTORS,
    ChangeVerb,
    SignalKind,
    parse_diff_context,
    run_detectors,
)
from autoforge.signals.detectors import (
    detect_async,
    detect_auth,
    detect_classes,
    detect_components_and_hooks,
    detect_config,
    detect_database,
    detect_dependencies,
    detect_error_handling,
    detect_functions,
    detect_logging,
    detect_middleware,
    detect_performance,
    detect_routes,
    detect_tests,
    detect_validation,
    in_both,
    net_added,
    net_removed,
)


def _diff(path: str, *lines: str) -> str:
    body = "\n".join(lines)
    return f"diff --git a/{path} b/{path}\n--- a/{path}\n+++ b/{path}\n@@ -1 +1 @@\n{body}\n"


class TestSidePrimitives:
    """Tests for net_added, net_removed and in_both."""

    def test_net_added(self):
        """Test pattern only on the added side."""
        ctx = parse_diff_context(_diff("a.ts", "+await x();", "-x();"))

        assert net_added(re.compile(r"await"), ctx)
        assert not net_removed(re.compile(r"await"), ctx)
        assert not in_both(re.compile(r"await"), ctx)

    def test_in_both(self):
        """Test pattern on both sides."""
        ctx = parse_diff_context(_diff("a.ts", "+x(1);", "-x(2);"))

        assert in_both(re.compile(r"x\("), ctx)
        assert not net_added(re.compile(r"x\("), ctx)
        assert not net_removed(re.compile(r"x\("), ctx)


class TestDetectFunctions:
    """Tests for detect_functions."""

    def test_new_functions_are_implemented(self, cart_diff):
        """Test that added declarations become an implement signal."""
        signals = detect_functions(parse_diff_context(cart_diff))

        assert len(signals) == 1
        assert signals[0].kind == SignalKind.FUNCTION
        assert signals[0].verb == ChangeVerb.IMPLEMENT
        assert signals[0].subjects == ("addToCart", "calculateTotal")
        assert signals[0].score == 8

    def test_arrow_functions(self):
        """Test that const arrow bindings count as functions."""
        ctx = parse_diff_context(_diff("a.ts", "+export const formatPrice = (value) => value.toFixed(2);"))

        signals = detect_functions(ctx)

        assert signals[0].subjects == ("formatPrice",)

    def test_single_swap_is_rename(self):
        """Test that one gone name and one new name is a rename."""
        ctx = parse_diff_context(
            _diff(
                "src/cart/total.ts",
                "-export function calcTotal(items) {",
                "+export function calculateTotal(items) {",
            )
        )

        signals = detect_functions(ctx)

        assert signals[0].verb == ChangeVerb.RENAME
        assert signals[0].subjects == ("calcTotal → calculateTotal",)
        assert signals[0].score == 9

    def test_name_on_both_sides_is_not_new(self):
        """Test that a rewritten function body is not reported."""
        ctx = parse_diff_context(
            _diff("a.ts", "-function load(id) {", "+function load(id, opts) {")
        )

        assert detect_functions(ctx) == []

    def test_removed_only_is_ignored(self):
        """Test that pure removals produce no function signal."""
        ctx = parse_diff_context(_diff("a.ts", "-function unused() {}"))

        assert detect_functions(ctx) == []


class TestDetectComponentsAndHooks:
    """Tests for detect_components_and_hooks."""

    def test_component_with_markup(self, product_page_diff):
        """Test that a PascalCase function returning markup is a component."""
        signals = detect_components_and_hooks(parse_diff_context(product_page_diff))

        assert len(signals) == 1
        assert signals[0].kind == SignalKind.COMPONENT
        assert signals[0].verb == ChangeVerb.CREATE
        assert signals[0].subjects == ("ProductPage",)

    def test_pascal_case_without_markup_is_not_component(self):
        """Test that markup is required for components."""
        ctx = parse_diff_context(_diff("a.ts", "+export function Parser(input) {"))

        assert detect_components_and_hooks(ctx) == []

    def test_custom_hook(self):
        """Test that use* functions are hooks."""
        ctx = parse_diff_context(_diff("src/hooks/useCart.ts", "+export function useCart() {"))

        signals = detect_components_and_hooks(ctx)

        assert signals[0].kind == SignalKind.HOOK
        assert signals[0].subjects == ("useCart",)
        assert signals[0].verb == ChangeVerb.IMPLEMENT


class TestDetectClasses:
    """Tests for detect_classes."""

    def test_new_class(self):
        """Test that a new class is implemented."""
        ctx = parse_diff_context(_diff("a.ts", "+export class CartStore {"))

        signals = detect_classes(ctx)

        assert signals[0].subjects == ("CartStore",)
        assert signals[0].verb == ChangeVerb.IMPLEMENT

    def test_reworked_class(self):
        """Test that a class on both sides is refactored."""
        ctx = parse_diff_context(
            _diff("a.ts", "-class CartStore {", "+class CartStore extends Store {")
        )

        signals = detect_classes(ctx)

        assert signals[0].verb == ChangeVerb.REFACTOR


class TestKeywordDetectors:
    """Tests for the vocabulary-based detectors."""

    def test_auth_added(self):
        """Test that new auth vocabulary is an add."""
        ctx = parse_diff_context(_diff("a.ts", "+const token = jwt.sign(payload, key);"))

        signals = detect_auth(ctx)

        assert signals[0].kind == SignalKind.AUTH
        assert signals[0].subjects == ("authentication",)
        assert signals[0].verb == ChangeVerb.ADD
        assert signals[0].score == 9

    def test_auth_updated(self):
        """Test that auth vocabulary on both sides is an update."""
        ctx = parse_diff_context(_diff("a.ts", "-jwt.verify(a);", "+jwt.verify(a, b);"))

        assert detect_auth(ctx)[0].verb == ChangeVerb.UPDATE

    def test_middleware_names_the_package(self):
        """Test that the registered middleware is named."""
        ctx = parse_diff_context(_diff("server.ts", "+app.use(cors());"))

        signals = detect_middleware(ctx)

        assert signals[0].subjects == ("cors",)
        assert signals[0].verb == ChangeVerb.ADD

    def test_routes_extract_paths(self):
        """Test that route paths become subjects."""
        ctx = parse_diff_context(
            _diff(
                "routes.ts",
                "+router.get('/orders', listOrders);",
                "+router.post('/orders/:id', updateOrder);",
                "+router.delete('/orders/:id/items', clearOrder);",
            )
        )

        signals = detect_routes(ctx)

        assert signals[0].kind == SignalKind.ROUTE
        assert signals[0].subjects == ("/orders", "/orders/:id")
        assert signals[0].verb == ChangeVerb.ADD

    def test_error_handling_added(self, error_handling_diff):
        """Test that new try/catch is added error handling."""
        signals = detect_error_handling(parse_diff_context(error_handling_diff))

        assert signals[0].verb == ChangeVerb.ADD
        assert signals[0].score == 8

    def test_error_handling_removed(self):
        """Test that a dropped try/catch is a removal."""
        ctx = parse_diff_context(
            _diff("a.ts", "-try {", "-  run();", "-} catch (e) {", "+run();")
        )

        signals = detect_error_handling(ctx)

        assert signals[0].verb == ChangeVerb.REMOVE
        assert signals[0].score == 5

    def test_async_refactor(self, async_refactor_diff):
        """Test that then() replaced by await is an async refactor."""
        signals = detect_async(parse_diff_context(async_refactor_diff))

        assert signals[0].subjects == ("promise chains to async/await",)
        assert signals[0].verb == ChangeVerb.REFACTOR

    def test_await_without_removed_then(self):
        """Test that new await alone is not an async refactor."""
        ctx = parse_diff_context(_diff("a.ts", "+await save();"))

        assert detect_async(ctx) == []

    def test_validation(self):
        """Test that schema validators are detected."""
        ctx = parse_diff_context(_diff("a.ts", "+const body = z.object({ email: z.string() });"))

        signals = detect_validation(ctx)

        assert signals[0].subjects == ("input validation",)

    def test_database_schema(self):
        """Test that new schema definitions are detected."""
        ctx = parse_diff_context(_diff("db.sql", "+CREATE TABLE orders (id int);"))

        signals = detect_database(ctx)

        assert signals[0].subjects == ("database schema",)
        assert signals[0].verb == ChangeVerb.ADD

    def test_database_query_optimized(self):
        """Test that queries using an index are optimizations."""
        ctx = parse_diff_context(_diff("repo.ts", "+const row = await findOne({ where, index: 'by_email' });"))

        signals = detect_database(ctx)

        assert signals[0].subjects == ("database queries",)
        assert signals[0].verb == ChangeVerb.OPTIMIZE

    def test_tests_by_file_name(self):
        """Test that touching a spec file is a test change."""
        ctx = parse_diff_context(_diff("src/cart.spec.ts", "+  expect(total).toBe(3);", "-  expect(total).toBe(2);"))

        signals = detect_tests(ctx)

        assert signals[0].kind == SignalKind.TEST
        assert signals[0].verb == ChangeVerb.UPDATE

    def test_tests_added(self):
        """Test that new test calls are added tests."""
        ctx = parse_diff_context(_diff("src/cart.test.ts", "+describe('cart', () => {"))

        assert detect_tests(ctx)[0].verb == ChangeVerb.ADD

    def test_dependency_bump(self, dependency_bump_diff):
        """Test that a version change in package.json is an update."""
        signals = detect_dependencies(parse_diff_context(dependency_bump_diff))

        assert signals[0].kind == SignalKind.DEPENDENCY
        assert signals[0].verb == ChangeVerb.UPDATE
        assert signals[0].score == 9

    def test_dependency_added(self):
        """Test that a new package entry is an add."""
        ctx = parse_diff_context(_diff("package.json", '+    "zod": "^3.22.0",'))

        assert detect_dependencies(ctx)[0].verb == ChangeVerb.ADD

    def test_dependency_requires_manifest(self):
        """Test that version-like lines elsewhere are ignored."""
        ctx = parse_diff_context(_diff("data.json", '+    "zod": "^3.22.0",'))

        assert detect_dependencies(ctx) == []

    def test_config_file(self):
        """Test that config files are config changes."""
        ctx = parse_diff_context(_diff("app.config", "+port=3000"))

        signals = detect_config(ctx)

        assert signals[0].kind == SignalKind.CONFIG
        assert signals[0].verb == ChangeVerb.UPDATE

    def test_logging_removed(self, debug_log_removal_diff):
        """Test that removed console.log is debug logging removal."""
        signals = detect_logging(parse_diff_context(debug_log_removal_diff))

        assert signals[0].subjects == ("debug logging",)
        assert signals[0].verb == ChangeVerb.REMOVE
        assert signals[0].score == 5

    def test_logging_added_is_ignored(self):
        """Test that added logging is not reported."""
        ctx = parse_diff_context(_diff("a.ts", "+console.log(value);"))

        assert detect_logging(ctx) == []

    def test_performance(self):
        """Test that memoization is a performance optimization."""
        ctx = parse_diff_context(_diff("list.tsx", "+  const sorted = useMemo(() => sortItems(items), [items]);"))

        signals = detect_performance(ctx)

        assert signals[0].kind == SignalKind.PERFORMANCE
        assert signals[0].verb == ChangeVerb.OPTIMIZE


class TestRunDetectors:
    """Tests for run_detectors."""

    def test_concatenates_in_detector_order(self, product_page_diff):
        """Test that output follows the detector order."""
        ctx = parse_diff_context(
            product_page_diff
            + _diff("src/cart/cart.ts", "+export function addToCart(item) {")
        )

        kinds = [signal.kind for signal in run_detectors(ctx)]

        assert kinds[:2] == [SignalKind.COMPONENT, SignalKind.FUNCTION]

    def test_empty_context(self):
        """Test that nothing is detected in an empty diff."""
        assert run_detectors(parse_diff_context("")) == []

    def test_custom_detectors(self, cart_diff):
        """Test that a custom pipeline can be passed."""
        ctx = parse_diff_context(cart_diff)

        assert run_detectors(ctx, (detect_logging,)) == []

    def test_pipeline_order(self):
        """Test that components run before plain functions."""
        assert DETECTORS.index(detect_components_and_hooks) < DETECTORS.index(detect_functions)
