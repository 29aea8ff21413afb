"""Candidate interactions and their containers.

An `Interaction` combines an `InitialState` (probe and `.Target`), a
`.ProcessInfo` and an `ExclusiveTag` that describes the final state particle
content. Interaction list generators return them bundled in an
`InteractionList`.
"""

from collections import abc
from typing import Iterable, List, Optional, Union, overload

import attr
from attr.validators import instance_of, optional

from channelsystem import pdg
from channelsystem.kinematics import FourMomentum

from .process import ProcessInfo
from .target import Target


def _probe_prefix(pid: int) -> str:
    if pdg.is_neutrino(pid) or pdg.is_antineutrino(pid):
        return "nu"
    return "probe"


@attr.s(kw_only=True)
class InitialState:
    """Pairing of an incoming probe and the `.Target` it strikes."""

    probe_pid: int = attr.ib(converter=int)
    target: Target = attr.ib(validator=instance_of(Target))
    probe_p4: Optional[FourMomentum] = attr.ib(
        default=None, validator=optional(instance_of(FourMomentum))
    )

    def as_string(self) -> str:
        prefix = _probe_prefix(self.probe_pid)
        return f"{prefix}:{self.probe_pid};tgt:{self.target.as_string()}"


def _non_negative(
    instance: "ExclusiveTag", attribute: attr.Attribute, value: int
) -> None:
    if value < 0:
        raise ValueError(
            f"{instance.__class__.__name__}.{attribute.name} cannot be"
            f" negative, got {value}"
        )


@attr.s(frozen=True, kw_only=True)
class ExclusiveTag:
    """Final state nucleon and pion multiplicities of an exclusive channel."""

    n_protons: int = attr.ib(
        default=0, validator=[instance_of(int), _non_negative]
    )
    n_neutrons: int = attr.ib(
        default=0, validator=[instance_of(int), _non_negative]
    )
    n_pi_plus: int = attr.ib(
        default=0, validator=[instance_of(int), _non_negative]
    )
    n_pi0: int = attr.ib(
        default=0, validator=[instance_of(int), _non_negative]
    )
    n_pi_minus: int = attr.ib(
        default=0, validator=[instance_of(int), _non_negative]
    )

    @property
    def n_nucleons(self) -> int:
        return self.n_protons + self.n_neutrons

    @property
    def n_pions(self) -> int:
        return self.n_pi_plus + self.n_pi0 + self.n_pi_minus

    def is_single_pion(self) -> bool:
        """Exactly one nucleon and exactly one pion in the final state."""
        return self.n_nucleons == 1 and self.n_pions == 1

    def as_string(self) -> str:
        return (
            f"N(p={self.n_protons},n={self.n_neutrons})"
            f";pi(+={self.n_pi_plus},0={self.n_pi0},-={self.n_pi_minus})"
        )


@attr.s(kw_only=True)
class Interaction:
    """One candidate reaction of a probe on a target."""

    initial_state: InitialState = attr.ib(validator=instance_of(InitialState))
    process_info: ProcessInfo = attr.ib(validator=instance_of(ProcessInfo))
    exclusive_tag: Optional[ExclusiveTag] = attr.ib(
        default=None, validator=optional(instance_of(ExclusiveTag))
    )

    def as_string(self) -> str:
        output = (
            f"{self.initial_state.as_string()}"
            f";proc:{self.process_info.as_string()}"
        )
        if self.exclusive_tag is not None:
            output += f";final:{self.exclusive_tag.as_string()}"
        return output


class InteractionList(abc.MutableSequence):
    """Ordered collection of `Interaction` instances.

    The insertion order is significant: it defines the index space from which
    interactions are selected.
    """

    def __init__(
        self,
        interactions: Optional[Iterable[Interaction]] = None,
        generator_name: str = "",
    ) -> None:
        self.__interactions: List[Interaction] = list()
        self.__generator_name = generator_name
        if interactions is not None:
            self.extend(interactions)

    @overload
    def __getitem__(self, index: int) -> Interaction:
        ...

    @overload
    def __getitem__(self, index: slice) -> "InteractionList":
        ...

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[Interaction, "InteractionList"]:
        if isinstance(index, slice):
            return InteractionList(
                self.__interactions[index], self.__generator_name
            )
        return self.__interactions[index]

    def __setitem__(  # type: ignore
        self, index: int, value: Interaction
    ) -> None:
        self.__interactions[index] = self.__check(value)

    def __delitem__(self, index: Union[int, slice]) -> None:
        del self.__interactions[index]

    def __len__(self) -> int:
        return len(self.__interactions)

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        output = f"{class_name}(generator_name={self.__generator_name!r}, ["
        for interaction in self:
            output += f"\n    {interaction.as_string()},"
        output += "])"
        return output

    def insert(self, index: int, value: Interaction) -> None:
        self.__interactions.insert(index, self.__check(value))

    @property
    def generator_name(self) -> str:
        return self.__generator_name

    @staticmethod
    def __check(value: object) -> Interaction:
        if not isinstance(value, Interaction):
            raise TypeError(
                f"{InteractionList.__name__} only accepts"
                f" {Interaction.__name__} instances, not"
                f" {value.__class__.__name__}"
            )
        return value
