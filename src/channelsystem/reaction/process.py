"""Classification of the scattering mechanism and the exchanged current."""

from enum import Enum, auto

import attr
from attr.validators import instance_of


class ScatteringType(Enum):
    """Types of scattering mechanisms in the form of an enumerate."""

    QUASI_ELASTIC = auto()
    DEEP_INELASTIC = auto()
    RESONANT = auto()
    COHERENT = auto()
    DIFFRACTIVE = auto()
    INVERSE_MUON_DECAY = auto()
    NUCLEON_ELECTRON_ELASTIC = auto()

    @property
    def abbreviation(self) -> str:
        return _SCATTERING_ABBREVIATIONS[self]


_SCATTERING_ABBREVIATIONS = {
    ScatteringType.QUASI_ELASTIC: "QES",
    ScatteringType.DEEP_INELASTIC: "DIS",
    ScatteringType.RESONANT: "RES",
    ScatteringType.COHERENT: "COH",
    ScatteringType.DIFFRACTIVE: "DFR",
    ScatteringType.INVERSE_MUON_DECAY: "IMD",
    ScatteringType.NUCLEON_ELECTRON_ELASTIC: "NuEEL",
}


class InteractionType(Enum):
    """Types of interaction currents in the form of an enumerate."""

    EM = auto()
    WEAK_CC = auto()
    WEAK_NC = auto()

    @property
    def label(self) -> str:
        return _INTERACTION_LABELS[self]


_INTERACTION_LABELS = {
    InteractionType.EM: "EM",
    InteractionType.WEAK_CC: "Weak[CC]",
    InteractionType.WEAK_NC: "Weak[NC]",
}


@attr.s(frozen=True)
class ProcessInfo:
    """Immutable pair of scattering mechanism and interaction current."""

    scattering_type: ScatteringType = attr.ib(
        validator=instance_of(ScatteringType)
    )
    interaction_type: InteractionType = attr.ib(
        validator=instance_of(InteractionType)
    )

    def is_resonant(self) -> bool:
        return self.scattering_type is ScatteringType.RESONANT

    def is_diffractive(self) -> bool:
        return self.scattering_type is ScatteringType.DIFFRACTIVE

    def is_weak_cc(self) -> bool:
        return self.interaction_type is InteractionType.WEAK_CC

    def is_weak_nc(self) -> bool:
        return self.interaction_type is InteractionType.WEAK_NC

    def is_em(self) -> bool:
        return self.interaction_type is InteractionType.EM

    def as_string(self) -> str:
        return (
            f"<{self.scattering_type.abbreviation}"
            f" - {self.interaction_type.label}>"
        )
