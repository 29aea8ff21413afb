"""Aggregation of the interaction lists of several generators."""

import logging
from collections import abc
from typing import Iterable, Iterator, Optional, Tuple

from channelsystem.reaction.generators import InteractionListGenerator
from channelsystem.reaction.interaction import (
    InitialState,
    Interaction,
    InteractionList,
)


class InteractionGeneratorMap(abc.Sequence):
    """Read-only view on all interactions that are possible for an event.

    The interactions are indexed in the order of the supplied lists, and in
    insertion order within each list. Duplicates are kept. A `None` entry,
    which a generator returns when it cannot handle an initial state, is
    skipped.
    """

    def __init__(
        self, interaction_lists: Iterable[Optional[InteractionList]]
    ) -> None:
        lists = list()
        for interaction_list in interaction_lists:
            if interaction_list is None:
                logging.warning("Skipping a None interaction list")
                continue
            lists.append(
                InteractionList(
                    interaction_list, interaction_list.generator_name
                )
            )
        self.__lists: Tuple[InteractionList, ...] = tuple(lists)
        self.__interactions: Tuple[Interaction, ...] = tuple(
            interaction
            for interaction_list in self.__lists
            for interaction in interaction_list
        )
        self.__generator_names: Tuple[str, ...] = tuple(
            interaction_list.generator_name
            for interaction_list in self.__lists
            for _ in interaction_list
        )

    @classmethod
    def build(
        cls,
        initial_state: InitialState,
        generators: Iterable[InteractionListGenerator],
    ) -> "InteractionGeneratorMap":
        """Run each generator on the initial state and aggregate the output.

        Generators that cannot handle the initial state return `None`. They
        are skipped.
        """
        interaction_lists = list()
        for generator in generators:
            interaction_list = generator.generate(initial_state)
            if interaction_list is None:
                logging.warning(
                    f"Generator {generator.name} returned no interaction list"
                    f" for {initial_state.as_string()}"
                )
                continue
            interaction_lists.append(interaction_list)
        return cls(interaction_lists)

    def __getitem__(self, index: int) -> Interaction:  # type: ignore
        return self.__interactions[index]

    def __iter__(self) -> Iterator[Interaction]:
        return iter(self.__interactions)

    def __len__(self) -> int:
        return len(self.__interactions)

    def __repr__(self) -> str:
        output = f"{self.__class__.__name__}(["
        for interaction_list in self.__lists:
            output += (
                f"\n    {interaction_list.generator_name!r}:"
                f" {len(interaction_list)} interactions,"
            )
        output += "])"
        return output

    def size(self) -> int:
        """Total number of interactions over all generators."""
        return len(self)

    @property
    def interaction_list(self) -> InteractionList:
        """All interactions flattened into one (new) `.InteractionList`."""
        return InteractionList(self.__interactions)

    @property
    def generator_names(self) -> Tuple[str, ...]:
        """Names of the generators that contributed, in order."""
        return tuple(
            interaction_list.generator_name
            for interaction_list in self.__lists
        )

    def find_list(self, generator_name: str) -> Optional[InteractionList]:
        """Copy of the first list produced by a generator with this name."""
        for interaction_list in self.__lists:
            if interaction_list.generator_name == generator_name:
                return interaction_list[:]
        return None

    def find_generator_name(self, index: int) -> str:
        """Name of the generator that produced the interaction at index."""
        return self.__generator_names[index]
