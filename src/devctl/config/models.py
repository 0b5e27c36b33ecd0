"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``devctl.toml`` only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_ENVIRONMENT = "production"


class DumpServerConfig(BaseModel):
    """[dump_server] section."""

    model_config = {"frozen": True}

    # None means the interpreter running devctl (sys.executable).
    interpreter: str | None = None
