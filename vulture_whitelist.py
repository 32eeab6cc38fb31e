"""Vulture whitelist: public API used by consumers, not internally."""

# ---------------------------------------------------------------------------
# Public API (used by consumers, not internally)
# ---------------------------------------------------------------------------
from sealtoken.config import TokenConfig
from sealtoken.service import TokenService

TokenConfig.from_env
TokenService.create
TokenService.verify
TokenService.decode
TokenService.config

# ---------------------------------------------------------------------------
# Error attributes (read by callers)
# ---------------------------------------------------------------------------
_.message
_.code
