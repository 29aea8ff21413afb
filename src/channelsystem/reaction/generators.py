"""Strategies that enumerate the candidate interactions for an initial state.

Each `InteractionListGenerator` handles one family of processes. It receives
an `.InitialState` and returns an `.InteractionList` with one `.Interaction`
per allowed channel, or `None` if it cannot handle the initial state at all.
"""

import logging
from abc import ABC, abstractmethod
from copy import deepcopy
from typing import Dict, Iterable, List, Optional, Type

from channelsystem import pdg

from .channels import ProbePolarity, SppChannel, get_spp_channels
from .default_settings import (
    DIFFRACTIVE,
    RESONANT_SINGLE_PION,
    GeneratorSettings,
)
from .interaction import InitialState, Interaction, InteractionList
from .process import ProcessInfo, ScatteringType


class InteractionListGenerator(ABC):
    """Abstract interface for interaction list generators."""

    def __init__(self, settings: GeneratorSettings) -> None:
        self.__settings = settings

    @property
    def name(self) -> str:
        return self.__settings.name

    @property
    def settings(self) -> GeneratorSettings:
        return self.__settings

    @abstractmethod
    def generate(
        self, initial_state: InitialState
    ) -> Optional[InteractionList]:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.__settings!r})"


class SppInteractionListGenerator(InteractionListGenerator):
    """Resonant single pion production off the nucleons of the target.

    The configured weak current selects the channel table for the probe
    polarity. A channel survives if the target contains its struck nucleon,
    so a free proton only keeps the proton channels and a nucleus with both
    protons and neutrons keeps all of them.
    """

    def generate(
        self, initial_state: InitialState
    ) -> Optional[InteractionList]:
        logging.info(
            f"InteractionListGenerator {self.name} is generating"
            f" interactions for {initial_state.as_string()}"
        )
        polarity = ProbePolarity.from_pid(initial_state.probe_pid)
        if polarity is None:
            logging.warning(
                f"Can not handle probe: {initial_state.probe_pid}."
                " Returning None"
            )
            return None
        interaction_type = self.settings.interaction_type
        target = initial_state.target
        has_protons = target.z > 0
        has_neutrons = target.n > 0

        interactions = InteractionList(generator_name=self.name)
        for channel in get_spp_channels(polarity, interaction_type):
            if channel.struck_nucleon == pdg.PROTON and not has_protons:
                continue
            if channel.struck_nucleon == pdg.NEUTRON and not has_neutrons:
                continue
            interactions.append(
                self.__create_interaction(initial_state, channel)
            )

        if len(interactions) == 0:
            logging.error(
                f"Returning a null or empty interaction list for"
                f" {initial_state.as_string()}"
            )
            return None
        return interactions

    def __create_interaction(
        self, initial_state: InitialState, channel: SppChannel
    ) -> Interaction:
        new_initial_state = deepcopy(initial_state)
        new_initial_state.target.set_struck_nucleon(channel.struck_nucleon)
        interaction = Interaction(
            initial_state=new_initial_state,
            process_info=ProcessInfo(
                ScatteringType.RESONANT, channel.interaction_type
            ),
            exclusive_tag=channel.exclusive_tag(),
        )
        logging.debug(f"Adding {interaction.as_string()}")
        return interaction


class DiffractiveInteractionListGenerator(InteractionListGenerator):
    """Placeholder for diffractive processes, never yields any interaction."""

    def generate(
        self, initial_state: InitialState
    ) -> Optional[InteractionList]:
        logging.debug(
            f"InteractionListGenerator {self.name} has no diffractive"
            f" channels for {initial_state.as_string()}"
        )
        return InteractionList(generator_name=self.name)


_GENERATOR_TYPES: Dict[str, Type[InteractionListGenerator]] = {
    RESONANT_SINGLE_PION: SppInteractionListGenerator,
    DIFFRACTIVE: DiffractiveInteractionListGenerator,
}


def create_generator(settings: GeneratorSettings) -> InteractionListGenerator:
    """Create the `InteractionListGenerator` for a `.GeneratorSettings`."""
    generator_type = _GENERATOR_TYPES.get(settings.process)
    if generator_type is None:
        raise NotImplementedError(
            f"No interaction list generator for process {settings.process!r}"
        )
    return generator_type(settings)


def create_generators(
    settings_list: Iterable[GeneratorSettings],
) -> List[InteractionListGenerator]:
    return [create_generator(settings) for settings in settings_list]
