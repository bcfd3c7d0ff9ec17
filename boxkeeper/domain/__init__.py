"""Domain layer: identifiers, entities, events and ports.

Nothing in this package imports from application or infrastructure.
"""
