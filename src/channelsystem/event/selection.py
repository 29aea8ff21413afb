"""Selection of one interaction out of an `.InteractionGeneratorMap`."""

import logging
from abc import ABC, abstractmethod
from copy import deepcopy
from typing import Optional

import numpy as np

from channelsystem.kinematics import FourMomentum

from .generator_map import InteractionGeneratorMap
from .record import EventRecord


class InteractionSelector(ABC):
    """Abstract interface for picking the interaction that seeds an event."""

    @abstractmethod
    def select(
        self,
        generator_map: Optional[InteractionGeneratorMap],
        probe_p4: FourMomentum,
        random_generator: Optional[np.random.Generator] = None,
    ) -> Optional[EventRecord]:
        """Select an interaction and wrap it into a new `.EventRecord`.

        Returns `None` if there is nothing to select from. The probe
        four-momentum is stored as a new `.FourMomentum`, so any sequence of
        :math:`(E, p_x, p_y, p_z)` is accepted.
        """


class UniformInteractionSelector(InteractionSelector):
    """Selects each interaction with equal probability.

    This selector does not weight interactions by their cross section. It
    only ensures that an event record can be filled.

    Args:
        seed: Seed for the random generator that is owned by the selector and
            used when no ``random_generator`` is passed to `select`.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.__random_generator = np.random.default_rng(seed)

    def select(
        self,
        generator_map: Optional[InteractionGeneratorMap],
        probe_p4: FourMomentum,
        random_generator: Optional[np.random.Generator] = None,
    ) -> Optional[EventRecord]:
        if generator_map is None:
            logging.error("Null interaction generator map! Returning None")
            return None
        n_interactions = generator_map.size()
        if n_interactions == 0:
            logging.error("Empty interaction generator map! Returning None")
            return None

        if random_generator is None:
            random_generator = self.__random_generator
        index = int(random_generator.integers(n_interactions))
        logging.debug(
            f"Selected interaction {index} of {n_interactions}, produced by"
            f" {generator_map.find_generator_name(index)}"
        )

        interaction = deepcopy(generator_map[index])
        interaction.initial_state.probe_p4 = FourMomentum(probe_p4)
        event = EventRecord()
        event.attach_summary(interaction)
        return event
