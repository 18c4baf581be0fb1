"""Test utilities for projdash.

    from projdash.testing import TestClient
"""

from projdash.testing.client import TestClient

__all__ = ["TestClient"]
