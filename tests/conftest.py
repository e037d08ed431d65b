from __future__ import annotations

import pytest

from core.seed import SEED_ENTRIES


@pytest.fixture
def seed():
    return list(SEED_ENTRIES)
