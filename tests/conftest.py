import os
import pathlib
from pathlib import Path

import dotenv
import numpy as np
import pytest

from pluscodes import OpenLocationCode, PlusCodeConfig


@pytest.fixture(scope="session")
def root_dir() -> pathlib.Path:
    return Path(__file__).parent.parent


# This fixture will be automatically used by all tests to setup the required env variables
@pytest.fixture(autouse=True)
def env(monkeypatch, root_dir):
    initial_env = dict(os.environ)

    # Use the example .env file to drive the tests
    dotenv.load_dotenv(dotenv_path=root_dir / ".env.example", override=True)

    yield

    # Reset environment to initial state
    os.environ.clear()
    os.environ.update(initial_env)


@pytest.fixture()
def rng() -> np.random.Generator:
    # fixed seed so failures can be reproduced
    return np.random.default_rng(seed=20140311)


@pytest.fixture()
def locations(rng) -> list[tuple[float, float]]:
    """Random locations spread over the whole globe"""
    latitudes = rng.uniform(-90, 90, size=200)
    longitudes = rng.uniform(-180, 180, size=200)
    return [(float(lat), float(lng)) for lat, lng in zip(latitudes, longitudes)]


@pytest.fixture()
def zurich_config() -> PlusCodeConfig:
    return PlusCodeConfig(reference_latitude=47.5, reference_longitude=8.5)


@pytest.fixture()
def zurich_codec(zurich_config) -> OpenLocationCode:
    return OpenLocationCode(zurich_config)
