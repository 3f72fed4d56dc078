"""
smart-tasks: a small task manager core.

Packages:
- tasks: models, keyword classifier, in-memory store, filtering, service helpers
- core: ports (Protocols) and application state
- connectors / cli: console presentation layer
"""

__version__ = "0.1.0"
