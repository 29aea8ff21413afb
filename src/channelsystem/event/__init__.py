"""Aggregate generated interactions and select the one that seeds an event."""

__all__ = [
    "EventRecord",
    "InteractionGeneratorMap",
    "InteractionSelector",
    "UniformInteractionSelector",
]

from .generator_map import InteractionGeneratorMap
from .record import EventRecord
from .selection import InteractionSelector, UniformInteractionSelector
