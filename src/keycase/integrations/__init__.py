"""Integrations subpackage for keycase.

Contains transport adapters that expose the job contract outside the process:
- HTTP app factory (``create_app``) built on FastAPI

Adapters with optional dependencies are imported conditionally: a missing
FastAPI install (``pip install keycase[http]``) does not prevent the package
from loading.
"""

from __future__ import annotations

__all__: list[str] = []

try:
    from keycase.integrations._http import create_app

    __all__.append("create_app")
except ImportError:
    pass
