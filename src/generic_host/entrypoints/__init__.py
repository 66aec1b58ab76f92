"""Entrypoints (inbound adapters) for generic-host.

Expose developer tooling to the outside world: the ``generic-host`` CLI.
Parse and validate inputs, call the bootstrap helpers and adapters, and
present results.

Dependency rule: may import `generic_host.bootstrap`, `generic_host.hosting`
and `generic_host.adapters`; nothing imports this package.
"""
