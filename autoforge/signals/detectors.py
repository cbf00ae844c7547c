"""Signal detectors.

Each detector is a pure function taking a DiffContext and returning zero or
more Signals for one category of change. Detectors never see each other's
output and never raise; a detector that finds nothing returns an empty list.

DETECTORS lists them from most specific to least specific. Execution order
does not change what a detector sees, but it decides which signal survives a
score tie during ranking and which signal claims a subject first when the
description is rendered.
"""

import re
from typing import Optional, Pattern

from autoforge.signals.models import (
    ChangeVerb,
    DiffContext,
    Signal,
    SignalDetector,
    SignalKind,
)


# Identifier allowed in JS/TS declarations
_IDENT = r"[A-Za-z_$][A-Za-z0-9_$]*"


def all_matches(pattern: Pattern[str], text: str, group: int = 1) -> list[str]:
    """Return every non-empty capture of ``group`` in ``text``."""
    return [m.group(group) for m in pattern.finditer(text) if m.group(group)]


def first_match(pattern: Pattern[str], text: str) -> Optional[str]:
    """Return the first capture of group 1, or None."""
    match = pattern.search(text)
    return match.group(1) if match else None


def net_added(pattern: Pattern[str], ctx: DiffContext) -> bool:
    """Pattern appears in added content but not in removed content."""
    return bool(pattern.search(ctx.added_content)) and not pattern.search(ctx.removed_content)


def net_removed(pattern: Pattern[str], ctx: DiffContext) -> bool:
    """Pattern appears in removed content but not in added content."""
    return bool(pattern.search(ctx.removed_content)) and not pattern.search(ctx.added_content)


def in_both(pattern: Pattern[str], ctx: DiffContext) -> bool:
    """Pattern appears on both sides of the diff."""
    return bool(pattern.search(ctx.added_content)) and bool(pattern.search(ctx.removed_content))


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _signal(kind: SignalKind, subjects: list[str], verb: ChangeVerb, score: int) -> Signal:
    return Signal(kind=kind, subjects=tuple(subjects), verb=verb, score=score)


# ─── Declarations ────────────────────────────────────────────────────────────

_ADDED_FUNCTION = re.compile(rf"^\+\s*(?:export\s+)?(?:async\s+)?function\s+({_IDENT})", re.MULTILINE)
_REMOVED_FUNCTION = re.compile(rf"^-\s*(?:export\s+)?(?:async\s+)?function\s+({_IDENT})", re.MULTILINE)
_ADDED_ARROW = re.compile(rf"^\+\s*(?:export\s+)?(?:const|let)\s+({_IDENT})\s*=\s*(?:async\s*)?\(", re.MULTILINE)
_REMOVED_ARROW = re.compile(rf"^-\s*(?:export\s+)?(?:const|let)\s+({_IDENT})\s*=\s*(?:async\s*)?\(", re.MULTILINE)

# Tag syntax: <div>, <br />, </div>, <MyComp>
_TAG_OPEN = re.compile(r"<[A-Za-z][\w.]*[\s/>]")
_TAG_CLOSE = re.compile(r"</[A-Za-z]")
_ADDED_COMPONENT = re.compile(
    r"^\+\s*(?:export\s+)?(?:default\s+)?(?:function|const)\s+([A-Z][A-Za-z0-9_$]*)",
    re.MULTILINE,
)
_ADDED_HOOK = re.compile(r"^\+\s*(?:export\s+)?(?:function|const)\s+(use[A-Z][A-Za-z0-9_$]*)", re.MULTILINE)

_ADDED_CLASS = re.compile(rf"^\+\s*(?:export\s+)?(?:abstract\s+)?class\s+({_IDENT})", re.MULTILINE)
_REMOVED_CLASS = re.compile(rf"^-\s*(?:export\s+)?(?:abstract\s+)?class\s+({_IDENT})", re.MULTILINE)


def detect_components_and_hooks(ctx: DiffContext) -> list[Signal]:
    """Detect UI components and custom hooks.

    Runs before detect_functions so PascalCase names are reported as
    components rather than plain functions.
    """
    signals = []

    has_tags = bool(_TAG_OPEN.search(ctx.added_content) or _TAG_CLOSE.search(ctx.added_content))
    if has_tags:
        components = _unique(all_matches(_ADDED_COMPONENT, ctx.raw))
        if components:
            signals.append(_signal(SignalKind.COMPONENT, components, ChangeVerb.CREATE, 9))

    hooks = _unique(all_matches(_ADDED_HOOK, ctx.raw))
    if hooks:
        signals.append(_signal(SignalKind.HOOK, hooks, ChangeVerb.IMPLEMENT, 8))

    return signals


def detect_functions(ctx: DiffContext) -> list[Signal]:
    """Detect added function declarations and arrow-function bindings.

    A single removed name replaced by a single different added name is a
    rename; otherwise every name only present on the added side is an
    implementation.
    """
    added = _unique(all_matches(_ADDED_FUNCTION, ctx.raw) + all_matches(_ADDED_ARROW, ctx.raw))
    removed = _unique(all_matches(_REMOVED_FUNCTION, ctx.raw) + all_matches(_REMOVED_ARROW, ctx.raw))

    new_names = [name for name in added if name not in removed]
    gone_names = [name for name in removed if name not in added]

    if len(new_names) == 1 and len(gone_names) == 1:
        return [_signal(SignalKind.FUNCTION, [f"{gone_names[0]} → {new_names[0]}"], ChangeVerb.RENAME, 9)]

    if new_names:
        return [_signal(SignalKind.FUNCTION, new_names, ChangeVerb.IMPLEMENT, 8)]

    return []


def detect_classes(ctx: DiffContext) -> list[Signal]:
    """Detect class additions or class rework."""
    added = _unique(all_matches(_ADDED_CLASS, ctx.raw))
    removed = set(all_matches(_REMOVED_CLASS, ctx.raw))

    new_classes = [name for name in added if name not in removed]
    if new_classes:
        return [_signal(SignalKind.CLASS, new_classes, ChangeVerb.IMPLEMENT, 7)]
    if added and removed:
        return [_signal(SignalKind.CLASS, added, ChangeVerb.REFACTOR, 7)]
    return []


# ─── Keyword detectors ───────────────────────────────────────────────────────

_AUTH = re.compile(
    r"\b(authenticate|authorize|jwt|oauth|bearer|passport|session|permission|role(?:Guard)?|isAuthenticated)\b",
    re.IGNORECASE,
)
_MIDDLEWARE = re.compile(
    r"\bmiddleware\b|\b(?:app|router)\.use\(|\b(?:cors|helmet|rateLimit|morgan)\(",
    re.IGNORECASE,
)
_MIDDLEWARE_NAME = re.compile(r"\b(cors|helmet|rateLimit|morgan|compression)\b", re.IGNORECASE)
_ROUTE_CALL = re.compile(r"\b(router|app)\.(get|post|put|patch|delete)\b", re.IGNORECASE)
_ROUTE_DECL = re.compile(
    r"^\+.*\b(?:router|app)\.(get|post|put|patch|delete)\s*\(\s*['\"`]([^'\"`]+)['\"`]",
    re.IGNORECASE | re.MULTILINE,
)
_ROUTE_DECORATOR = re.compile(
    r"^\+\s*@(?:Get|Post|Put|Patch|Delete)\s*\(\s*['\"`]([^'\"`]+)['\"`]\)",
    re.MULTILINE,
)
_TRY_CATCH = re.compile(r"try\s*\{[\s\S]*?\}\s*catch")
_CUSTOM_ERROR = re.compile(r"\bthrow\s+new\s+\w+Error")
_AWAIT = re.compile(r"\bawait\b")
_THEN = re.compile(r"\.then\s*\(")
_VALIDATION = re.compile(
    r"\bz\.object\b|\bJoi\.|\byup\.|class-validator|@Is(?:String|Email|NotEmpty)\b|\bzod\b|\bvalidate\(",
    re.IGNORECASE,
)
_DB_SCHEMA = re.compile(
    r"\b(?:schema|migration|CREATE TABLE|ALTER TABLE|prisma|mongoose\.model)\b|@(?:Entity|Column|Table)\b",
    re.IGNORECASE,
)
_DB_QUERY = re.compile(r"\b(?:findOne|findAll|findBy|queryBuilder|createQueryBuilder)\b|\.where\(", re.IGNORECASE)
_DB_OPTIMIZED = re.compile(r"\b(index|cache|eager)\b", re.IGNORECASE)
_TEST_FILE = re.compile(r"\.(test|spec)\.(ts|js|tsx|jsx)$")
_TEST_CALL = re.compile(r"\b(?:describe|it|test|expect|beforeEach|afterEach)\(")
_PACKAGE_FILE = re.compile(r"package\.json|yarn\.lock|package-lock\.json")
_VERSION_ENTRY = re.compile(r"\"[^\"]+\"\s*:\s*\"[\^~]?\d")
_CONFIG_FILE = re.compile(r"\.(env|config|conf|yaml|yml|toml)$|config/", re.IGNORECASE)
_CONFIG_USAGE = re.compile(r"\bprocess\.env\.|\b(?:ConfigModule|dotenv)\b|@ConfigService\b")
_CONSOLE_LOG = re.compile(r"\bconsole\.(log|debug|warn|error)\b")
_PERFORMANCE = re.compile(
    r"\b(?:useMemo|useCallback|React\.memo|memoize|debounce|throttle|cache|Suspense)\b|\blazy\("
)


def detect_auth(ctx: DiffContext) -> list[Signal]:
    """Detect authentication or authorization changes."""
    if not _AUTH.search(ctx.added_content):
        return []
    verb = ChangeVerb.ADD if net_added(_AUTH, ctx) else ChangeVerb.UPDATE
    return [_signal(SignalKind.AUTH, ["authentication"], verb, 9)]


def detect_middleware(ctx: DiffContext) -> list[Signal]:
    """Detect newly registered middleware (cors, helmet, rate limiting...)."""
    if not net_added(_MIDDLEWARE, ctx):
        return []
    name = first_match(_MIDDLEWARE_NAME, ctx.added_content) or "middleware"
    return [_signal(SignalKind.MIDDLEWARE, [name], ChangeVerb.ADD, 8)]


def detect_routes(ctx: DiffContext) -> list[Signal]:
    """Detect API route declarations and extract their paths."""
    paths = _unique(all_matches(_ROUTE_DECL, ctx.raw, group=2) + all_matches(_ROUTE_DECORATOR, ctx.raw))
    added = net_added(_ROUTE_CALL, ctx)

    if not paths and not added:
        return []

    verb = ChangeVerb.ADD if added else ChangeVerb.UPDATE
    subjects = paths[:2] if paths else ["api routes"]
    return [_signal(SignalKind.ROUTE, subjects, verb, 7)]


def detect_error_handling(ctx: DiffContext) -> list[Signal]:
    """Detect error handling additions, rework, or removal."""
    if net_added(_TRY_CATCH, ctx) or net_added(_CUSTOM_ERROR, ctx):
        return [_signal(SignalKind.ERROR_HANDLING, ["error handling"], ChangeVerb.ADD, 8)]
    if in_both(_TRY_CATCH, ctx):
        return [_signal(SignalKind.ERROR_HANDLING, ["error handling"], ChangeVerb.REFACTOR, 7)]
    if net_removed(_TRY_CATCH, ctx):
        return [_signal(SignalKind.ERROR_HANDLING, ["error handling"], ChangeVerb.REMOVE, 5)]
    return []


def detect_async(ctx: DiffContext) -> list[Signal]:
    """Detect promise chains converted to async/await."""
    if net_added(_AWAIT, ctx) and net_removed(_THEN, ctx):
        return [_signal(SignalKind.ASYNC, ["promise chains to async/await"], ChangeVerb.REFACTOR, 8)]
    return []


def detect_validation(ctx: DiffContext) -> list[Signal]:
    """Detect new input validation."""
    if not net_added(_VALIDATION, ctx):
        return []
    return [_signal(SignalKind.VALIDATION, ["input validation"], ChangeVerb.ADD, 8)]


def detect_database(ctx: DiffContext) -> list[Signal]:
    """Detect database schema, model, or query changes."""
    if net_added(_DB_SCHEMA, ctx):
        return [_signal(SignalKind.DATABASE, ["database schema"], ChangeVerb.ADD, 8)]
    if in_both(_DB_SCHEMA, ctx):
        return [_signal(SignalKind.DATABASE, ["database schema"], ChangeVerb.UPDATE, 7)]
    if net_added(_DB_QUERY, ctx):
        verb = ChangeVerb.OPTIMIZE if _DB_OPTIMIZED.search(ctx.added_content) else ChangeVerb.ADD
        return [_signal(SignalKind.DATABASE, ["database queries"], verb, 7)]
    return []


def detect_tests(ctx: DiffContext) -> list[Signal]:
    """Detect test additions or updates."""
    touches_tests = any(_TEST_FILE.search(name) for name in ctx.file_names)
    if not touches_tests and not _TEST_CALL.search(ctx.added_content):
        return []
    verb = ChangeVerb.ADD if net_added(_TEST_CALL, ctx) else ChangeVerb.UPDATE
    return [_signal(SignalKind.TEST, ["unit tests"], verb, 7)]


def detect_dependencies(ctx: DiffContext) -> list[Signal]:
    """Detect package manifest changes.

    A version bump keeps the same key on both sides, so in_both is checked
    before the one-sided primitives.
    """
    if not any(_PACKAGE_FILE.search(name) for name in ctx.file_names):
        return []

    if in_both(_VERSION_ENTRY, ctx):
        verb = ChangeVerb.UPDATE
    elif net_added(_VERSION_ENTRY, ctx):
        verb = ChangeVerb.ADD
    elif net_removed(_VERSION_ENTRY, ctx):
        verb = ChangeVerb.REMOVE
    else:
        return []
    return [_signal(SignalKind.DEPENDENCY, ["dependencies"], verb, 9)]


def detect_config(ctx: DiffContext) -> list[Signal]:
    """Detect configuration file or environment usage changes."""
    touches_config = any(_CONFIG_FILE.search(name) for name in ctx.file_names)
    if not touches_config and not _CONFIG_USAGE.search(ctx.added_content):
        return []
    return [_signal(SignalKind.CONFIG, ["configuration"], ChangeVerb.UPDATE, 7)]


def detect_logging(ctx: DiffContext) -> list[Signal]:
    """Detect removal of debug logging."""
    if net_removed(_CONSOLE_LOG, ctx):
        return [_signal(SignalKind.LOGGING, ["debug logging"], ChangeVerb.REMOVE, 5)]
    return []


def detect_performance(ctx: DiffContext) -> list[Signal]:
    """Detect memoization, caching, debouncing and lazy loading."""
    if not net_added(_PERFORMANCE, ctx):
        return []
    return [_signal(SignalKind.PERFORMANCE, ["performance"], ChangeVerb.OPTIMIZE, 8)]


# Most specific first
DETECTORS: tuple[SignalDetector, ...] = (
    detect_components_and_hooks,
    detect_functions,
    detect_classes,
    detect_auth,
    detect_middleware,
    detect_routes,
    detect_error_handling,
    detect_async,
    detect_validation,
    detect_database,
    detect_tests,
    detect_dependencies,
    detect_config,
    detect_logging,
    detect_performance,
)


def run_detectors(
    ctx: DiffContext,
    detectors: tuple[SignalDetector, ...] = DETECTORS,
) -> list[Signal]:
    """Run every detector against the same context and concatenate results.

    Args:
        ctx: The parsed diff.
        detectors: Detectors in priority order.

    Returns:
        Raw signals in detector order.
    """
    signals: list[Signal] = []
    for detect in detectors:
        signals.extend(detect(ctx))
    return signals
