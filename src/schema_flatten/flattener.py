"""SchemaFlattener: drives child resolution over a whole schema tree.

resolve_children() handles one node.  A code generator needs the resolved
children of every entity it emits a type for, which is the root plus every
container or list reachable through resolved children.  SchemaFlattener walks
that closure in a deterministic order (depth first, children alphabetically)
and logs what it finds.

Architecture:
- resolve() delegates to resolve_children() with the stored policy.
- walk() yields (node, ResolvedChildSet) pairs lazily, so callers can stop early.
- flatten() materialises the walk into a dict keyed by node path; in strict
  mode it raises SchemaFlattenError carrying every error from every node.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from schema_flatten.algorithm.policy import CompressionPolicy
from schema_flatten.algorithm.resolver import resolve_children
from schema_flatten.errors import SchemaFlattenError, StructuralError

if TYPE_CHECKING:
    from schema_flatten.result import ResolvedChildSet
    from schema_flatten.tree.nodes import SchemaNode

__all__ = ["SchemaFlattener"]

logger = logging.getLogger(__name__)


class SchemaFlattener:
    """Resolve the children of every generated entity of a schema tree.

    Example::

        from schema_flatten.flattener import SchemaFlattener

        flattener = SchemaFlattener(CompressionPolicy.COMPRESSED_PREFER_CONFIG)
        for node, resolved in flattener.walk(root):
            print(node.path, resolved.names())
    """

    def __init__(
        self,
        policy: CompressionPolicy = CompressionPolicy.UNCOMPRESSED,
        strict: bool = False,
    ) -> None:
        """Initialise the flattener.

        Args:
            policy: Compression policy applied to every node.  Accepts a
                CompressionPolicy member or its string value.
            strict: When True, flatten() raises SchemaFlattenError if any
                structural error was recorded anywhere in the tree.
        """
        self._policy = CompressionPolicy(policy)
        self._strict = strict

    @property
    def policy(self) -> CompressionPolicy:
        return self._policy

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, node: SchemaNode) -> ResolvedChildSet:
        """Resolve the direct children of a single node."""
        resolved = resolve_children(node, self._policy)
        for error in resolved.errors:
            logger.warning("Structural error under %s: %s", node.path or "/", error)
        return resolved

    def walk(self, root: SchemaNode) -> Iterator[tuple[SchemaNode, ResolvedChildSet]]:
        """Yield ``(node, resolved)`` for ``root`` and every entity below it.

        Entities are the root and each container or list returned as a
        resolved child.  Leaves are never yielded; choice and case nodes never
        appear as resolved children in the first place.

        Args:
            root: Node to start from.  Usually the schema root.

        Yields:
            Pairs of a node and its resolved children, depth first, with
            siblings visited in alphabetical name order.
        """
        stack: list[SchemaNode] = [root]
        while stack:
            node = stack.pop()
            resolved = self.resolve(node)
            logger.debug(
                "Entity %s has %d children", node.path or "/", len(resolved)
            )
            yield node, resolved
            # Reverse so that the alphabetically first child is popped first.
            for name in reversed(resolved.names()):
                child = resolved[name]
                if child.is_container() or child.is_list():
                    stack.append(child)

    def flatten(self, root: SchemaNode) -> dict[str, ResolvedChildSet]:
        """Resolve every entity below ``root`` and key the results by node path.

        Raises:
            SchemaFlattenError: In strict mode, if any structural error was
                recorded.  The exception carries every error in walk order.
        """
        results: dict[str, ResolvedChildSet] = {}
        errors: list[StructuralError] = []
        for node, resolved in self.walk(root):
            results[node.path] = resolved
            errors.extend(resolved.errors)

        logger.debug(
            "Flattened %d entities with %d structural errors", len(results), len(errors)
        )
        if self._strict and errors:
            raise SchemaFlattenError(errors)
        return results

    def errors(self, root: SchemaNode) -> list[StructuralError]:
        """Return every structural error found below ``root``, in walk order."""
        return [error for _, resolved in self.walk(root) for error in resolved.errors]
