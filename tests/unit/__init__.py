"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Inject mappings (environ, settings data) instead of touching process state.
- Use `tmp_path` for settings files; never the real user directories.
- Keep tests small, fast, and deterministic.
"""
