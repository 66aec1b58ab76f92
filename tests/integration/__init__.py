"""Integration tests.

Purpose
- Exercise the default bootstrap end-to-end: settings files, user secrets,
  environment variables, command-line arguments and logging sinks together.

Guidelines
- Use real files under `tmp_path` and real environment variables via monkeypatch.
- Minimize mocking; only the entry-application lookup is pinned.
- Mark as 'integration' and keep them reliable.
"""
