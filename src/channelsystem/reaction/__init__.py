"""Enumeration of the reaction channels that are open for an initial state.

This is the core component of `channelsystem`: it defines the `.Target` that
a probe strikes, the `.Interaction` data structure that represents one
candidate reaction, and the `.InteractionListGenerator` strategies that fill
an `.InteractionList` from the static channel catalog in :mod:`.channels`.
"""

__all__ = [
    "DEFAULT_GENERATOR_SETTINGS",
    "DiffractiveInteractionListGenerator",
    "ExclusiveTag",
    "GeneratorSettings",
    "InitialState",
    "Interaction",
    "InteractionList",
    "InteractionListGenerator",
    "InteractionType",
    "ProcessInfo",
    "ScatteringType",
    "SppInteractionListGenerator",
    "Target",
    "check_spp_channel",
    "create_generator",
    "create_generators",
]

from .conservation_rules import check_spp_channel
from .default_settings import DEFAULT_GENERATOR_SETTINGS, GeneratorSettings
from .generators import (
    DiffractiveInteractionListGenerator,
    InteractionListGenerator,
    SppInteractionListGenerator,
    create_generator,
    create_generators,
)
from .interaction import (
    ExclusiveTag,
    InitialState,
    Interaction,
    InteractionList,
)
from .process import InteractionType, ProcessInfo, ScatteringType
from .target import Target
