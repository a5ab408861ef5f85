"""Reference implementations of the CALENDART ports.

Dependency rule: adapters depend on `calendart.interfaces` and
`calendart.domain`, never the other way around.
"""
