import os
import random

import pytest

# render tests draw off-screen; no window needed
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def rng():
    return random.Random(1234)
