"""PyQt6 presentation layer: renders game snapshots and forwards clicks."""
