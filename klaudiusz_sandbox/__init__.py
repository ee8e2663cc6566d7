"""Klaudiusz Sandbox setup (Docker + Bun environment for Claude).

Core design goals:
- Linear, idempotent install steps
- Fail fast on missing prerequisites
- Best-effort uninstall
- Centralized logging
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
