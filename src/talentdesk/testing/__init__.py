"""Test utilities for talentdesk applications::

    from talentdesk.testing import TestClient
"""

from talentdesk.testing.client import TestClient

__all__ = ["TestClient"]
