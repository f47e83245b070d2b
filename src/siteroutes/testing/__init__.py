"""Test utilities for siteroutes applications.

::

    from siteroutes.testing import TestClient
"""

from siteroutes.testing.client import TestClient

__all__ = ["TestClient"]
