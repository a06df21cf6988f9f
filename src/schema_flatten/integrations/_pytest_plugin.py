"""pytest plugin for schema-flatten.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pytest

from schema_flatten import CompressionPolicy, SchemaNode, resolve_children


@pytest.fixture(scope="session")
def assert_resolved_children() -> Any:
    """Fixture that returns a callable resolved-children asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to resolve_children(), which builds a fresh result per call).

    Usage in tests::

        def test_interface(assert_resolved_children, interface):
            assert_resolved_children(
                interface,
                {"admin-state", "oper-state", "counters"},
                policy=CompressionPolicy.COMPRESSED_PREFER_CONFIG,
            )

    Returns:
        A callable ``_assert(node, expected, policy=UNCOMPRESSED, allow_errors=False)``
        that raises ``AssertionError`` when the resolved child names differ
        from ``expected`` or when structural errors were recorded.
    """

    def _assert(
        node: SchemaNode,
        expected: Iterable[str],
        policy: CompressionPolicy = CompressionPolicy.UNCOMPRESSED,
        allow_errors: bool = False,
    ) -> None:
        """Assert that ``node`` resolves to exactly the ``expected`` child names.

        Args:
            node:         Schema node to resolve.
            expected:     Expected child names (order is ignored).
            policy:       Compression policy to resolve under.
            allow_errors: When False, any structural error fails the assertion.

        Raises:
            AssertionError: With the missing/unexpected names and the errors.
        """
        resolved = resolve_children(node, policy)
        actual = set(resolved.children)
        wanted = set(expected)
        errors = [str(err) for err in resolved.errors]
        if actual != wanted or (errors and not allow_errors):
            raise AssertionError(
                f"Resolved children of {node.path or '/'} under {policy} differ:\n"
                f"  missing:    {sorted(wanted - actual)}\n"
                f"  unexpected: {sorted(actual - wanted)}\n"
                f"  errors:     {errors}"
            )

    return _assert
