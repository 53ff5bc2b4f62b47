"""HTTP framework building blocks: typed errors, a per-request key store, request/response objects, trusted-proxy helpers and a file system view."""

__version__ = "0.1.0"

__all__ = ["errors", "fs", "messages", "proxies", "store"]