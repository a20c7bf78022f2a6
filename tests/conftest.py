from __future__ import annotations

import pytest

from midi_tools.config import reset_midi_config_cache
from midi_tools.deprecated import reset_deprecation_warnings


@pytest.fixture(autouse=True)
def fresh_library_state():
    reset_midi_config_cache()
    reset_deprecation_warnings()
    try:
        yield
    finally:
        reset_midi_config_cache()
        reset_deprecation_warnings()
