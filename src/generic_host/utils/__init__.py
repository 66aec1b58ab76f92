"""Support namespace for cross-cutting, dependency-light helpers.

This package provides a neutral location for small, reusable functions that
would otherwise clutter feature packages. It is not a new architectural layer.

Scope:
- Small, stateless helpers with minimal dependencies (e.g., key-path handling,
  entry-module discovery).
- No wiring and no orchestration.

Import direction:
- May be imported by any generic_host package.
- Must not import from application packages other than `generic_host.config`.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules to avoid incidental coupling.
"""
