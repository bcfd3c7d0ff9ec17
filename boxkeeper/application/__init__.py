"""Application layer: commands, handlers, services and read models."""
