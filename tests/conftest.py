from __future__ import annotations

import pytest

from tests.helpers.stub_sources import StubFeed


@pytest.fixture(scope="function")
def usd_feed() -> StubFeed:
    # 2.000000 quote units per base unit, 6 decimals.
    return StubFeed(price=2_000_000, decimals=6)
