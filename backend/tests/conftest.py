import sys
from pathlib import Path

import pytest

# Add project root (2 levels up from tests/) to sys.path so tests can import 'call_hub'
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from call_hub.services.connection import ClientRegistry
from tests.helpers import FakeTranslator


@pytest.fixture
def registry():
    return ClientRegistry()


@pytest.fixture
def translator():
    return FakeTranslator()
