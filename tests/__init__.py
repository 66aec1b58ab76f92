"""generic-host test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Several modules together against the real filesystem and environment.
- functional/   : User-visible flows tested end-to-end through the CLI.
- contract/     : Shared behavior enforced across every configuration provider.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic; use `tmp_path` when a file is unavoidable.
- Never touch the real user configuration or log directories; the global
  fixtures redirect them into the test's temporary directory.
- Suggested markers: unit, integration, functional, contract
"""
