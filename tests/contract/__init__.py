"""Contract tests.

Purpose
- Check that every implementation of a port behaves as its interface states.

Guidelines
- Parametrize a fixture over the backends and write each test once.
- Only use the public interface of the port under test.
"""
