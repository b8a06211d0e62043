import random
from datetime import date

import pytest

from advising.config import EXAMPLE_PROFILE
from advising.data import DataLoader, ProfileParser


@pytest.fixture
def example_student():
    return ProfileParser().parse(DataLoader().load_profile(EXAMPLE_PROFILE))


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def fixed_today():
    return date(2024, 10, 1)
