"""Shared test fixtures and configuration."""

import logging
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_autoforge_logger():
    """Undo CLI logging setup so caplog sees autoforge records."""
    yield
    logger = logging.getLogger("autoforge")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def cart_diff():
    """New cart functions in a cart service."""
    return """diff --git a/src/cart/cartService.ts b/src/cart/cartService.ts
index 1234567..abcdefg 100644
--- a/src/cart/cartService.ts
+++ b/src/cart/cartService.ts
@@ -1,3 +1,9 @@
 const items = [];
+export function addToCart(item) {
+  items.push(item);
+}
+export function calculateTotal(items) {
+  return items.reduce((sum, i) => sum + i.price, 0);
+}
"""


@pytest.fixture
def product_page_diff():
    """A new page component."""
    return """diff --git a/src/pages/ProductPage.tsx b/src/pages/ProductPage.tsx
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/src/pages/ProductPage.tsx
@@ -0,0 +1,3 @@
+export default function ProductPage() {
+  return <div>Product</div>;
+}
"""


@pytest.fixture
def async_refactor_diff():
    """A promise chain rewritten with async/await."""
    return """diff --git a/src/booking/bookingService.ts b/src/booking/bookingService.ts
index 1234567..abcdefg 100644
--- a/src/booking/bookingService.ts
+++ b/src/booking/bookingService.ts
@@ -1,3 +1,4 @@
 export async function loadBooking(id) {
-  return fetchBooking(id).then((res) => res.json());
+  const res = await fetchBooking(id);
+  return res.json();
 }
"""


@pytest.fixture
def dependency_bump_diff():
    """A version bump in package.json."""
    return """diff --git a/package.json b/package.json
index 1234567..abcdefg 100644
--- a/package.json
+++ b/package.json
@@ -10,3 +10,3 @@
   "dependencies": {
-    "react": "^18.2.0",
+    "react": "^18.3.1",
   }
"""


@pytest.fixture
def debug_log_removal_diff():
    """A console.log call removed."""
    return """diff --git a/src/checkout/summary.ts b/src/checkout/summary.ts
index 1234567..abcdefg 100644
--- a/src/checkout/summary.ts
+++ b/src/checkout/summary.ts
@@ -1,3 +1,2 @@
 export function summarize(order) {
-  console.log("order", order);
   return order.total;
"""


@pytest.fixture
def error_handling_diff():
    """A call wrapped in try/catch with a custom error."""
    return """diff --git a/src/api/orders.ts b/src/api/orders.ts
index 1234567..abcdefg 100644
--- a/src/api/orders.ts
+++ b/src/api/orders.ts
@@ -1,2 +1,6 @@
-  submit(order);
+  try {
+    submit(order);
+  } catch (err) {
+    throw new OrderError(err);
+  }
"""


@pytest.fixture
def plain_edit_diff():
    """A one-line edit no detector recognizes."""
    return """diff --git a/src/core/math.ts b/src/core/math.ts
index 1234567..abcdefg 100644
--- a/src/core/math.ts
+++ b/src/core/math.ts
@@ -1,1 +1,1 @@
-  return a + b;
+  return a - b;
"""
