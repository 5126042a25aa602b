import os
import sys

import pytest

# Add the project src directory to PYTHONPATH for tests
CURRENT_DIR = os.path.dirname(__file__)
SRC_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "src"))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from roombook.config import set_config  # noqa: E402
from roombook.services import (  # noqa: E402
    BookingRegistry,
    BookingService,
    PaymentSelector,
    RoomFactory,
)


@pytest.fixture
def registry():
    return BookingRegistry()


@pytest.fixture
def service(registry):
    return BookingService(
        registry=registry,
        room_factory=RoomFactory(),
        payment_selector=PaymentSelector(),
    )


@pytest.fixture
def fresh_config():
    """Drops the cached global config before and after the test."""
    set_config(None)
    yield
    set_config(None)
