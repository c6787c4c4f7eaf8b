"""Core: configuration, domain and contracts. No I/O."""
