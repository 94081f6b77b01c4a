import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from o5mreader.config import DecoderConfig, O5MConfig, SKIP_FRAMED


@pytest.fixture
def decoder_config():
    return DecoderConfig()


@pytest.fixture
def lenient_config():
    """Config that skips unsupported framed records instead of failing"""
    return O5MConfig(decoder=DecoderConfig(unknown_marker_policy=SKIP_FRAMED))
