"""Shared type aliases used across siteroutes modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: user-defined function taking nothing or the request
Handler: TypeAlias = Callable[..., Any]
