"""SchemaLoader Protocol for the schema-flatten loader extension point.

Defines the structural interface all schema loaders must satisfy.  Users can
plug in a loader for their own schema library without inheriting from any
base class: any class with a conformant ``load`` method passes
``isinstance`` checks.

Example::

    from schema_flatten.protocols import SchemaLoader
    from schema_flatten.tree import SchemaTreeBuilder

    class DictLoader:
        def load(self, source):
            return SchemaTreeBuilder().build(source)

    assert isinstance(DictLoader(), SchemaLoader)  # True: structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from schema_flatten.tree.nodes import SchemaNode


@runtime_checkable
class SchemaLoader(Protocol):
    """Structural protocol for schema loaders.

    The ``load`` method must:
    - Accept the loader's native schema object.
    - Return the root SchemaNode of a wired tree (parents and paths set) that
      the caller may treat as immutable.
    """

    def load(self, source: Any) -> SchemaNode: ...
