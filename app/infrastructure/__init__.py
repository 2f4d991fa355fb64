"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer. The catalog ships an in-memory
repository; persistent backends plug in behind the same port.
"""
