"""CALENDART test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior enforced across every implementation of a port.
- fixtures/     : pytest plugins providing factories for users, events, calendars.
- helpers/      : Shared utilities (no tests here).
- fakes.py      : Provider-style events and calendars.

General guidance
- Keep unit fast and deterministic; prefer fakes over mocks at boundaries.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, contract, property
"""
