"""Enumeration and selection of neutrino interaction channels.

The main responsibility of `channelsystem` is to list every reaction channel
that is open for an incoming probe and a target, and to pick the one that
seeds a simulated event. The user boundary conditions are the probe, the
target and the configured interaction list generators.

`channelsystem` consists of two main components:

  `channelsystem.reaction`
    ― the core of `channelsystem` that defines the `.Target`, the
    `.Interaction` data structures and the `.InteractionListGenerator`
    strategies that turn the static channel catalog into an
    `.InteractionList` for a given `.InitialState`.

  `channelsystem.event`
    ― aggregation of the lists of several generators into one
    `.InteractionGeneratorMap` and selection of the interaction that is
    attached to an `.EventRecord`.

Finally, the `.io` module provides tools that can read and write particle
lists and generator configurations.
"""

__all__ = [
    # Main modules
    "event",
    "io",
    "reaction",
    # Facade functions
    "generate_interactions",
    "load_default_particles",
]

from typing import Iterable, Optional

from . import event, io, reaction
from .particle import load_default_particles
from .reaction.default_settings import DEFAULT_GENERATOR_SETTINGS


def generate_interactions(
    initial_state: reaction.InitialState,
    settings: Optional[Iterable[reaction.GeneratorSettings]] = None,
) -> event.InteractionGeneratorMap:
    """Collect the interactions of all configured generators.

    Args:
        initial_state: Probe and target for which to enumerate the channels.
        settings: Configuration of the `.InteractionListGenerator` instances
            to run, in order. Defaults to the `.DEFAULT_GENERATOR_SETTINGS`.
    """
    if settings is None:
        settings = DEFAULT_GENERATOR_SETTINGS
    generators = reaction.create_generators(settings)
    return event.InteractionGeneratorMap.build(initial_state, generators)
