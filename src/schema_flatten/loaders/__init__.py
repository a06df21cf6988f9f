"""Loaders subpackage for schema-flatten.

The base install ships no schema parser: trees are built with
``schema_flatten.tree.SchemaTreeBuilder`` or by any object satisfying the
``SchemaLoader`` Protocol.  Optional loaders are available via extras:

    pip install schema-flatten[yangson]   # yangson DataModel loader
"""

# __all__ lists the names that are always available at import time.
# YangsonLoader is conditionally imported below and added to __all__ only
# when its optional dependency is installed.
__all__: list[str] = []

try:
    import yangson  # noqa: F401

    from schema_flatten.loaders.yangson import YangsonLoader

    __all__ = sorted([*__all__, "YangsonLoader"])
except ImportError:
    pass
