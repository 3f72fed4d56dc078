"""Presentation connectors (console REPL + text rendering)."""
