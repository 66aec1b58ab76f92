"""Adapters (infrastructure) for generic-host.

Provide concrete implementations of the interfaces in `generic_host.interfaces`:
configuration providers backed by memory, JSON files, environment variables,
command-line arguments and the per-user secrets store.

Dependency rule: may import `generic_host.interfaces`, `generic_host.utils`,
`generic_host.config` and `generic_host.errors`; none of those import this
package.
"""
