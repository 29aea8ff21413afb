"""Static catalog of exclusive reaction channels.

The catalog is pure data: each `SppChannel` names the nucleon that is struck
and the nucleon and pion that come out of a resonant single pion production
(SPP) reaction. `SPP_CHANNEL_TABLE` groups them per probe polarity and weak
current. In the reaction thread fed by this table we can have (for free and
nuclear targets):

.. code-block:: text

    neutrino CC:           neutrino NC:
        v p -> l- p pi+        v p -> v p pi0
        v n -> l- p pi0        v p -> v n pi+
        v n -> l- n pi+        v n -> v n pi0
                               v n -> v p pi-
    anti-neutrino CC:      anti-neutrino NC:
        vb n -> l+ n pi-       vb p -> vb p pi0
        vb p -> l+ n pi0       vb p -> vb n pi+
        vb p -> l+ p pi-       vb n -> vb n pi0
                               vb n -> vb p pi-

The order of the table entries defines the enumeration order of the
generators.
"""

from enum import Enum, auto
from typing import Dict, Optional, Tuple

import attr

from channelsystem import pdg

from .interaction import ExclusiveTag
from .process import InteractionType


class ProbePolarity(Enum):
    """Distinguishes neutrino from anti-neutrino probes."""

    NEUTRINO = auto()
    ANTINEUTRINO = auto()

    @staticmethod
    def from_pid(pid: int) -> Optional["ProbePolarity"]:
        """Polarity of a probe, or `None` if it is not a (anti)neutrino."""
        if pdg.is_neutrino(pid):
            return ProbePolarity.NEUTRINO
        if pdg.is_antineutrino(pid):
            return ProbePolarity.ANTINEUTRINO
        return None


@attr.s(frozen=True)
class SppChannelDefinition:
    polarity: ProbePolarity = attr.ib()
    interaction_type: InteractionType = attr.ib()
    struck_nucleon: int = attr.ib()
    final_nucleon: int = attr.ib()
    final_pion: int = attr.ib()


_NU = ProbePolarity.NEUTRINO
_NUBAR = ProbePolarity.ANTINEUTRINO
_CC = InteractionType.WEAK_CC
_NC = InteractionType.WEAK_NC
_P = pdg.PROTON
_N = pdg.NEUTRON


class SppChannel(Enum):
    """Resonant single pion production channels."""

    NU_P_CC_P_PIPLUS = SppChannelDefinition(_NU, _CC, _P, _P, pdg.PI_PLUS)
    NU_N_CC_P_PI0 = SppChannelDefinition(_NU, _CC, _N, _P, pdg.PI_ZERO)
    NU_N_CC_N_PIPLUS = SppChannelDefinition(_NU, _CC, _N, _N, pdg.PI_PLUS)
    NU_P_NC_P_PI0 = SppChannelDefinition(_NU, _NC, _P, _P, pdg.PI_ZERO)
    NU_P_NC_N_PIPLUS = SppChannelDefinition(_NU, _NC, _P, _N, pdg.PI_PLUS)
    NU_N_NC_N_PI0 = SppChannelDefinition(_NU, _NC, _N, _N, pdg.PI_ZERO)
    NU_N_NC_P_PIMINUS = SppChannelDefinition(_NU, _NC, _N, _P, pdg.PI_MINUS)
    NUBAR_N_CC_N_PIMINUS = SppChannelDefinition(
        _NUBAR, _CC, _N, _N, pdg.PI_MINUS
    )
    NUBAR_P_CC_N_PI0 = SppChannelDefinition(_NUBAR, _CC, _P, _N, pdg.PI_ZERO)
    NUBAR_P_CC_P_PIMINUS = SppChannelDefinition(
        _NUBAR, _CC, _P, _P, pdg.PI_MINUS
    )
    NUBAR_P_NC_P_PI0 = SppChannelDefinition(_NUBAR, _NC, _P, _P, pdg.PI_ZERO)
    NUBAR_P_NC_N_PIPLUS = SppChannelDefinition(
        _NUBAR, _NC, _P, _N, pdg.PI_PLUS
    )
    NUBAR_N_NC_N_PI0 = SppChannelDefinition(_NUBAR, _NC, _N, _N, pdg.PI_ZERO)
    NUBAR_N_NC_P_PIMINUS = SppChannelDefinition(
        _NUBAR, _NC, _N, _P, pdg.PI_MINUS
    )

    @property
    def struck_nucleon(self) -> int:
        return self.value.struck_nucleon

    @property
    def final_nucleon(self) -> int:
        return self.value.final_nucleon

    @property
    def final_pion(self) -> int:
        return self.value.final_pion

    @property
    def polarity(self) -> ProbePolarity:
        return self.value.polarity

    @property
    def interaction_type(self) -> InteractionType:
        return self.value.interaction_type

    def outgoing_lepton(self, probe_pid: int) -> int:
        """The lepton leaving the reaction for a given (anti)neutrino."""
        if self.interaction_type is InteractionType.WEAK_CC:
            return pdg.charged_lepton_partner(probe_pid)
        return probe_pid

    def final_state_pids(self, probe_pid: int) -> Tuple[int, int, int]:
        """PDG codes of the outgoing lepton, nucleon and pion."""
        return (
            self.outgoing_lepton(probe_pid),
            self.final_nucleon,
            self.final_pion,
        )

    def exclusive_tag(self) -> ExclusiveTag:
        return ExclusiveTag(
            n_protons=int(self.final_nucleon == pdg.PROTON),
            n_neutrons=int(self.final_nucleon == pdg.NEUTRON),
            n_pi_plus=int(self.final_pion == pdg.PI_PLUS),
            n_pi0=int(self.final_pion == pdg.PI_ZERO),
            n_pi_minus=int(self.final_pion == pdg.PI_MINUS),
        )

    def as_string(self) -> str:
        probe = "v" if self.polarity is ProbePolarity.NEUTRINO else "vb"
        current = "cc" if self.interaction_type is _CC else "nc"
        return (
            f"{probe} {_SYMBOLS[self.struck_nucleon]} ({current})"
            f" -> {_SYMBOLS[self.final_nucleon]} {_SYMBOLS[self.final_pion]}"
        )


_SYMBOLS = {
    pdg.PROTON: "p",
    pdg.NEUTRON: "n",
    pdg.PI_PLUS: "pi+",
    pdg.PI_ZERO: "pi0",
    pdg.PI_MINUS: "pi-",
}

SPP_CHANNEL_TABLE: Dict[
    Tuple[ProbePolarity, InteractionType], Tuple[SppChannel, ...]
] = {
    (_NU, _CC): (
        SppChannel.NU_P_CC_P_PIPLUS,
        SppChannel.NU_N_CC_P_PI0,
        SppChannel.NU_N_CC_N_PIPLUS,
    ),
    (_NU, _NC): (
        SppChannel.NU_P_NC_P_PI0,
        SppChannel.NU_P_NC_N_PIPLUS,
        SppChannel.NU_N_NC_N_PI0,
        SppChannel.NU_N_NC_P_PIMINUS,
    ),
    (_NUBAR, _CC): (
        SppChannel.NUBAR_N_CC_N_PIMINUS,
        SppChannel.NUBAR_P_CC_N_PI0,
        SppChannel.NUBAR_P_CC_P_PIMINUS,
    ),
    (_NUBAR, _NC): (
        SppChannel.NUBAR_P_NC_P_PI0,
        SppChannel.NUBAR_P_NC_N_PIPLUS,
        SppChannel.NUBAR_N_NC_N_PI0,
        SppChannel.NUBAR_N_NC_P_PIMINUS,
    ),
}


def get_spp_channels(
    polarity: ProbePolarity, interaction_type: Optional[InteractionType]
) -> Tuple[SppChannel, ...]:
    """Ordered channels for a polarity and current, empty if there are none."""
    if interaction_type is None:
        return tuple()
    return SPP_CHANNEL_TABLE.get((polarity, interaction_type), tuple())
