"""Type aliases used across payhistory."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
