"""Integrations subpackage for schema-flatten.

- ``_pytest_plugin``: the ``assert_resolved_children`` fixture, registered
  through the ``pytest11`` entry point so installed projects get it for free.

The plugin module is not imported here; pytest loads it through the entry
point, which keeps ``import schema_flatten.integrations`` free of a pytest
dependency.
"""

__all__: list[str] = []
