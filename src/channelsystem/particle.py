"""A collection of particle info containers.

The `~channelsystem.particle` module is the particle database of
`channelsystem`. Its main interface is the `ParticleCollection`, which is a
collection of immutable `Particle` instances that are uniquely identified by
their PDG code. The `.reaction` module uses it to look up masses and charges of
targets, struck nucleons and final state particles, and to decide whether an
isotope exists at all.
"""

import logging
from collections import abc
from difflib import get_close_matches
from functools import lru_cache
from math import copysign
from os.path import dirname, join, realpath
from typing import (
    Callable,
    Dict,
    Iterable,
    Iterator,
    Optional,
    Set,
    Union,
)

import attr
import yaml
from attr.validators import instance_of
from particle import Particle as PdgDatabase

from . import pdg

__CHANNELSYSTEM_PATH = dirname(realpath(__file__))
ADDITIONAL_PARTICLES_DEFINITIONS_PATH = join(
    __CHANNELSYSTEM_PATH, "additional_definitions.yml"
)


@attr.s(frozen=True, repr=True, kw_only=True)
class Particle:  # pylint: disable=too-many-instance-attributes
    """Immutable container of data defining a physical particle or isotope.

    A `Particle` is identified by its `~Particle.pid` only: all other fields
    are properties that are looked up by the rest of the package, but they are
    not taken into account when checking if two `Particle` instances are
    equal.
    """

    # Labels
    name: str = attr.ib(eq=False, validator=instance_of(str))
    pid: int = attr.ib(converter=int)
    latex: Optional[str] = attr.ib(eq=False, default=None)
    # Properties
    spin: float = attr.ib(eq=False, converter=float)
    mass: float = attr.ib(eq=False, converter=float)
    width: float = attr.ib(eq=False, converter=float, default=0.0)
    charge: float = attr.ib(eq=False, converter=float, default=0.0)
    baryon_number: float = attr.ib(eq=False, converter=float, default=0.0)
    electron_lepton_number: int = attr.ib(
        eq=False, default=0, validator=instance_of(int)
    )
    muon_lepton_number: int = attr.ib(
        eq=False, default=0, validator=instance_of(int)
    )
    tau_lepton_number: int = attr.ib(
        eq=False, default=0, validator=instance_of(int)
    )

    @mass.validator
    def __check_mass(self, _: attr.Attribute, value: float) -> None:
        if value < 0.0:
            raise ValueError(
                f"Cannot construct particle {self.name} with negative mass"
                f" {value}"
            )

    def is_lepton(self) -> bool:
        return (
            self.electron_lepton_number != 0
            or self.muon_lepton_number != 0
            or self.tau_lepton_number != 0
        )

    def is_nucleus(self) -> bool:
        return pdg.is_ion(self.pid)


class ParticleCollection(abc.MutableSet):
    """Searchable collection of immutable `.Particle` instances."""

    def __init__(self, particles: Optional[Iterable[Particle]] = None) -> None:
        self.__particles: Dict[str, Particle] = dict()
        self.__pid_to_name: Dict[int, str] = dict()
        if particles is not None:
            self.update(particles)

    def __contains__(self, instance: object) -> bool:
        if isinstance(instance, str):
            return instance in self.__particles
        if isinstance(instance, Particle):
            return instance.pid in self.__pid_to_name
        if isinstance(instance, int):
            return instance in self.__pid_to_name
        raise NotImplementedError(
            f"Cannot search for type {instance.__class__.__name__}"
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, abc.Iterable):
            return set(self) == set(other)
        raise NotImplementedError(
            f"Cannot compare {self.__class__.__name__} with"
            f" {other.__class__.__name__}"
        )

    def __getitem__(self, particle_name: str) -> Particle:
        if particle_name in self.__particles:
            return self.__particles[particle_name]
        error_message = (
            f"No particle with name '{particle_name}' in the database"
        )
        candidates = [
            p.name
            for p in sorted(self, key=lambda p: p.mass)
            if p.name.startswith(particle_name)
        ]
        if not candidates:
            candidates = get_close_matches(particle_name, self.names, n=5)
        if len(candidates) == 1:
            error_message += f". Did you mean '{candidates[0]}'?"
        elif len(candidates) > 1:
            error_message += f". Did you mean one of these? {candidates}"
        raise KeyError(error_message)

    def __iter__(self) -> Iterator[Particle]:
        return self.__particles.values().__iter__()

    def __len__(self) -> int:
        return len(self.__particles)

    def __repr__(self) -> str:
        output = f"{self.__class__.__name__}({{"
        for particle in self:
            output += f"\n    {particle},"
        output += "})"
        return output

    def add(self, value: Particle) -> None:
        if value.pid in self.__pid_to_name:
            raise ValueError(
                f'Added particle "{value.name}" has the same PID {value.pid}'
                f' as existing particle "{self.__pid_to_name[value.pid]}"'
            )
        if value.name in self.__particles:
            logging.warning(f'Overwriting particle with name "{value.name}"')
            self.discard(value.name)
        self.__particles[value.name] = value
        self.__pid_to_name[value.pid] = value.name

    def discard(self, value: Union[Particle, str]) -> None:
        particle_name = ""
        if isinstance(value, Particle):
            particle_name = value.name
        elif isinstance(value, str):
            particle_name = value
        else:
            raise NotImplementedError(
                f"Cannot discard something of type {value.__class__.__name__}"
            )
        del self.__pid_to_name[self[particle_name].pid]
        del self.__particles[particle_name]

    def find(self, search_term: Union[int, str]) -> Particle:
        """Search for a particle by either name (`str`) or PID (`int`)."""
        if isinstance(search_term, str):
            particle_name = search_term
            return self.__getitem__(particle_name)
        if isinstance(search_term, int):
            if search_term not in self.__pid_to_name:
                raise KeyError(f"No particle with PID {search_term}")
            particle_name = self.__pid_to_name[search_term]
            return self.__getitem__(particle_name)
        raise NotImplementedError(
            f"Cannot search for a search term of type {type(search_term)}"
        )

    def filter(  # noqa: A003
        self, function: Callable[[Particle], bool]
    ) -> "ParticleCollection":
        """Search by `Particle` properties using a :code:`lambda` function.

        For example:

        >>> from channelsystem.particle import load_default_particles
        >>> particles = load_default_particles()
        >>> subset = particles.filter(
        ...     lambda p: p.is_nucleus() and p.charge == 1
        ... )
        >>> sorted(subset.names)
        ['H1', 'H2']
        """
        return ParticleCollection(
            {particle for particle in self if function(particle)}
        )

    def update(self, other: Iterable[Particle]) -> None:
        if not isinstance(other, abc.Iterable):
            raise TypeError(
                f"Cannot update {self.__class__.__name__} from "
                f"non-iterable class {other.__class__.__name__}"
            )
        for particle in other:
            self.add(particle)

    @property
    def names(self) -> Set[str]:
        return set(self.__particles)


def load_pdg() -> ParticleCollection:
    """Create a `.ParticleCollection` with all entries from the PDG.

    PDG info is imported from the `scikit-hep/particle
    <https://github.com/scikit-hep/particle>`_ package. Quarks are included,
    nuclear codes are not (see `load_nuclei`).
    """
    all_pdg_particles = PdgDatabase.findall(
        lambda item: item.charge is not None
        and item.J is not None  # remove new physics
        and abs(item.pdgid) < 1e9  # nuclei come from load_nuclei
        and not (item.mass is None and not item.name.startswith("nu"))
    )
    particle_collection = ParticleCollection()
    for pdg_particle in all_pdg_particles:
        new_particle = __convert_pdg_instance(pdg_particle)
        particle_collection.add(new_particle)
    return particle_collection


def load_nuclei(
    filename: str = ADDITIONAL_PARTICLES_DEFINITIONS_PATH,
) -> ParticleCollection:
    """Load the isotope definitions that the PDG tables do not provide.

    The default file :download:`additional_definitions.yml
    </../src/channelsystem/additional_definitions.yml>` contains the free
    nucleons in their nuclear notation and a selection of isotopes that are
    commonly used as neutrino targets or detector materials. It is not a full
    nuclear chart: a `.Target` made of an isotope that is missing here
    collapses to :math:`Z=A=0`.
    """
    with open(filename) as stream:
        definition = yaml.load(stream, Loader=yaml.SafeLoader)
    return ParticleCollection(
        Particle(**particle_def) for particle_def in definition["particles"]
    )


@lru_cache(maxsize=None)
def load_default_particles() -> ParticleCollection:
    """Load the default particle database of `channelsystem`.

    Runs `load_pdg` and supplements its output with `load_nuclei`. The result
    is created once per process and should be treated as read-only.
    """
    particles = load_pdg()
    particles.update(load_nuclei())
    return particles


def __sign(value: Union[float, int]) -> int:
    return int(copysign(1, value))


# cspell:ignore pdgid
def __convert_pdg_instance(pdg_particle: PdgDatabase) -> Particle:
    def convert_mass_width(value: Optional[float]) -> float:
        if value is None:
            return 0.0
        return float(value) / 1e3  # MeV to GeV

    if pdg_particle.charge is None:
        raise ValueError(f"PDG instance has no charge:\n{pdg_particle}")
    latex = None
    if pdg_particle.latex_name != "Unknown":
        latex = str(pdg_particle.latex_name)
    electron_ln, muon_ln, tau_ln = __compute_lepton_numbers(pdg_particle)
    return Particle(
        name=str(pdg_particle.name),
        latex=latex,
        pid=int(pdg_particle.pdgid),
        mass=convert_mass_width(pdg_particle.mass),
        width=convert_mass_width(pdg_particle.width),
        charge=float(pdg_particle.charge),
        spin=float(pdg_particle.J),
        baryon_number=__compute_baryon_number(pdg_particle),
        electron_lepton_number=electron_ln,
        muon_lepton_number=muon_ln,
        tau_lepton_number=tau_ln,
    )


def __compute_lepton_numbers(pdg_particle: PdgDatabase) -> tuple:
    lepton_numbers = [0, 0, 0]
    generation = {
        pdg.ELECTRON: 0,
        pdg.NU_E: 0,
        pdg.MUON: 1,
        pdg.NU_MU: 1,
        pdg.TAU: 2,
        pdg.NU_TAU: 2,
    }.get(abs(int(pdg_particle.pdgid)))
    if generation is not None:
        lepton_numbers[generation] = __sign(pdg_particle.pdgid)
    return tuple(lepton_numbers)


def __compute_baryon_number(pdg_particle: PdgDatabase) -> float:
    pid = int(pdg_particle.pdgid)
    if pdg.is_quark(pid) or pdg.is_antiquark(pid):
        return __sign(pid) / 3
    return float(__sign(pid) * pdg_particle.pdgid.is_baryon)
