"""Project (namespace) listing domain."""
