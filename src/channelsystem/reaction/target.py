"""The object that a probe strikes."""

import logging
from copy import deepcopy
from typing import Any, Dict, Optional

from channelsystem import pdg
from channelsystem.kinematics import FourMomentum
from channelsystem.particle import ParticleCollection, load_default_particles


class Target:  # pylint: disable=too-many-public-methods
    """A neutrino interaction target.

    Transparent encapsulation of quite different physical systems: a nuclear
    target, a nuclear target with a struck nucleon (and possibly a struck
    quark within that nucleon), a free nucleon, or a free particle (such as an
    electron in inverse muon decay).

    Invalid assignments never raise. An isotope that is not a free nucleon
    and cannot be found in the particle database collapses to :math:`Z=A=0`,
    a struck nucleon that is not a proton or neutron is reset to `None`, and
    a struck quark that is not a (anti)quark is ignored. Check the predicates
    (`is_valid_nucleus`, `struck_nucleon_is_set`, ...) after assignment.

    Args:
        pid: PDG code of the target. Nuclear codes (``10LZZZAAAI``) are decoded
            into :math:`Z` and :math:`A`.
        particles: Particle database used for mass lookups and for checking
            whether an isotope exists. Defaults to
            `.load_default_particles`.
    """

    def __init__(
        self, pid: int, particles: Optional[ParticleCollection] = None
    ) -> None:
        if particles is None:
            particles = load_default_particles()
        self.__particles = particles
        self.__pid = int(pid)
        self.__z = 0
        self.__a = 0
        self.__struck_nucleon_pid: Optional[int] = None
        self.__struck_nucleon_p4: Optional[FourMomentum] = None
        self.__struck_quark_pid: Optional[int] = None
        self.__struck_quark_is_from_sea = False
        if pdg.is_ion(self.__pid):
            self.__set_za(pdg.ion_z(self.__pid), pdg.ion_a(self.__pid))

    @classmethod
    def from_za(
        cls,
        z: int,
        a: int,
        struck_nucleon_pid: Optional[int] = None,
        particles: Optional[ParticleCollection] = None,
    ) -> "Target":
        """Create a nuclear target from its proton and nucleon numbers.

        If the target is a free nucleon, the struck nucleon always matches it
        and a different ``struck_nucleon_pid`` is ignored with a warning.
        """
        z, a = int(z), int(a)
        target = cls(0, particles)
        if pdg.is_valid_za(z, a):
            target.__pid = pdg.ion_pid(z, a)
        target.__set_za(z, a)
        if struck_nucleon_pid is not None:
            if (
                target.is_free_nucleon()
                and struck_nucleon_pid != target.struck_nucleon_pid
            ):
                logging.warning(
                    f"Struck nucleon {struck_nucleon_pid} does not match free"
                    f" nucleon target {target.pid}, keeping"
                    f" {target.struck_nucleon_pid}"
                )
            else:
                target.set_struck_nucleon(struck_nucleon_pid)
        return target

    def __copy__(self) -> "Target":
        return self.__deepcopy__({})

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Target":
        # the particle database is shared, the four-momentum is not
        new_target = Target(0, self.__particles)
        new_target.__pid = self.__pid
        new_target.__z = self.__z
        new_target.__a = self.__a
        new_target.__struck_nucleon_pid = self.__struck_nucleon_pid
        new_target.__struck_nucleon_p4 = deepcopy(
            self.__struck_nucleon_p4, memo
        )
        new_target.__struck_quark_pid = self.__struck_quark_pid
        new_target.__struck_quark_is_from_sea = self.__struck_quark_is_from_sea
        return new_target

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Target):
            return (
                self.pid == other.pid
                and self.z == other.z
                and self.a == other.a
                and self.struck_nucleon_pid == other.struck_nucleon_pid
                and self.struck_quark_pid == other.struck_quark_pid
                and self.struck_quark_is_from_sea
                == other.struck_quark_is_from_sea
            )
        return NotImplemented

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.as_string()})"

    def __str__(self) -> str:
        output = f" target PDG code = {self.pid}\n"
        if self.is_nucleus() or self.is_free_nucleon():
            output += f" Z = {self.z}, A = {self.a}\n"
        if self.struck_nucleon_pid is not None:
            nucleon = self.__particles.find(self.struck_nucleon_pid)
            output += (
                f" struck nucleon = {nucleon.name},"
                f" P4 = {self.__struck_nucleon_p4}\n"
            )
        return output

    def as_string(self) -> str:
        output = str(self.pid)
        if self.struck_nucleon_is_set():
            output += f"[N={self.struck_nucleon_pid}]"
        if self.struck_quark_is_set():
            origin = "s" if self.struck_quark_is_from_sea else "v"
            output += f"[q={self.struck_quark_pid}({origin})]"
        return output

    @property
    def pid(self) -> int:
        return self.__pid

    @property
    def z(self) -> int:
        return self.__z

    @property
    def n(self) -> int:
        return self.__a - self.__z

    @property
    def a(self) -> int:
        return self.__a

    @property
    def struck_nucleon_pid(self) -> Optional[int]:
        return self.__struck_nucleon_pid

    @property
    def struck_nucleon_p4(self) -> Optional[FourMomentum]:
        if self.__struck_nucleon_p4 is None:
            logging.warning("Returning None struck nucleon four-momentum")
        return self.__struck_nucleon_p4

    @property
    def struck_quark_pid(self) -> Optional[int]:
        return self.__struck_quark_pid

    @property
    def struck_quark_is_from_sea(self) -> bool:
        return self.__struck_quark_is_from_sea

    def mass(self) -> float:
        """Mass of the target in GeV, or 0 if it is not in the database."""
        if self.__pid in self.__particles:
            return self.__particles.find(self.__pid).mass
        return 0.0

    def charge(self) -> float:
        """Charge of the target in units of :math:`e`."""
        if self.__pid in self.__particles:
            return self.__particles.find(self.__pid).charge
        return 0.0

    def struck_nucleon_mass(self) -> float:
        if self.__struck_nucleon_pid is None:
            logging.warning("Returning struck nucleon mass = 0")
            return 0.0
        return self.__particles.find(self.__struck_nucleon_pid).mass

    def is_free_nucleon(self) -> bool:
        return self.__a == 1 and self.__z in (0, 1)

    def is_proton(self) -> bool:
        return self.__a == 1 and self.__z == 1

    def is_neutron(self) -> bool:
        return self.__a == 1 and self.__z == 0

    def is_nucleus(self) -> bool:
        return self.__a > 1  # validity was ensured when Z, A were set

    def is_particle(self) -> bool:
        return (
            self.__pid in self.__particles and self.__a == 0 and self.__z == 0
        )

    def is_valid_nucleus(self) -> bool:
        if not pdg.is_valid_za(self.__z, self.__a):
            return False
        if self.is_free_nucleon():
            return True
        return pdg.ion_pid(self.__z, self.__a) in self.__particles

    def is_even_even(self) -> bool:
        if self.is_nucleus():
            return self.n % 2 == 0 and self.z % 2 == 0
        return False

    def is_odd_odd(self) -> bool:
        if self.is_nucleus():
            return self.n % 2 == 1 and self.z % 2 == 1
        return False

    def is_even_odd(self) -> bool:
        if self.is_nucleus():
            return not self.is_even_even() and not self.is_odd_odd()
        return False

    def struck_nucleon_is_set(self) -> bool:
        return self.__struck_nucleon_pid is not None

    def struck_quark_is_set(self) -> bool:
        return self.__struck_quark_pid is not None

    def set_struck_nucleon(self, pid: int) -> None:
        """Set the struck nucleon and put it at rest and on its mass shell.

        Anything other than a proton or neutron resets the struck nucleon.
        """
        if not pdg.is_neutron_or_proton(pid):
            logging.debug(
                f"Struck nucleon {pid} is not a nucleon, resetting to None"
            )
            self.__struck_nucleon_pid = None
            self.__struck_nucleon_p4 = None
            return
        self.__struck_nucleon_pid = pid
        mass = self.__particles.find(pid).mass
        self.set_struck_nucleon_p4(FourMomentum.at_rest(mass))

    def set_struck_nucleon_p4(self, p4: FourMomentum) -> None:
        self.__struck_nucleon_p4 = deepcopy(p4)

    def set_struck_quark(self, pid: int) -> None:
        if pdg.is_quark(pid) or pdg.is_antiquark(pid):
            self.__struck_quark_pid = pid
        else:
            logging.debug(f"Ignoring struck quark {pid}: not a (anti)quark")

    def set_struck_sea_quark(self, is_from_sea: bool) -> None:
        self.__struck_quark_is_from_sea = bool(is_from_sea)

    def __set_za(self, z: int, a: int) -> None:
        self.__z = z
        self.__a = a
        if not self.is_valid_nucleus():
            logging.warning("Invalid target -- Resetting to Z = 0, A = 0")
            self.__z = 0
            self.__a = 0
        if self.is_free_nucleon():
            if self.is_proton():
                self.set_struck_nucleon(pdg.PROTON)
            else:
                self.set_struck_nucleon(pdg.NEUTRON)
