"""boxkeeper: layered core for a box/item outliner.

Subpackages:
    core: configuration, result types, error codes, composition root
    domain: identifiers, entities, domain events, ports (protocols)
    application: unique identifier service, commands, handlers, projections
    infrastructure: generators, event transport, logging, persistence adapters
"""

__version__ = "0.1.0"
