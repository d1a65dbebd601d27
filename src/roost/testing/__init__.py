"""Test utilities for roost applications.

::

    from roost.testing import TestClient
"""

from roost.testing.client import ClientResponse, TestClient

__all__ = ["ClientResponse", "TestClient"]
