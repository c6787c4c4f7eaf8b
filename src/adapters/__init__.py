"""Adapters: concrete I/O against the Cine-List backend (httpx)."""
