"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; use fakes at boundaries (see `tests.fakes`).
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic; freeze time with `FixedClock`.
"""
