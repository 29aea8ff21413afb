# pylint: disable=redefined-outer-name
import logging

import pytest

from channelsystem import generate_interactions
from channelsystem.event import InteractionGeneratorMap
from channelsystem.particle import ParticleCollection, load_default_particles
from channelsystem.reaction import InitialState, Target

logging.basicConfig(level=logging.ERROR)


@pytest.fixture(scope="session")
def particle_database() -> ParticleCollection:
    return load_default_particles()


@pytest.fixture(scope="session")
def iron_target(particle_database: ParticleCollection) -> Target:
    return Target(1000260560, particle_database)


@pytest.fixture(scope="session")
def numu_on_iron(iron_target: Target) -> InitialState:
    return InitialState(probe_pid=14, target=iron_target)


@pytest.fixture(scope="session")
def numu_on_iron_map(numu_on_iron: InitialState) -> InteractionGeneratorMap:
    return generate_interactions(numu_on_iron)
