"""Collection of quantum number conservation rules for reaction channels.

A rule is a callable that takes the values of one quantum number for the
ingoing and the outgoing particles and outputs a boolean. The channel catalog
in :mod:`.channels` is data, so these rules are the place where it is audited:
`check_spp_channel` resolves the particles of a channel and reports every rule
that the channel violates.

For additive quantum numbers, the decorator `additive_quantum_number_rule`
can be used to automatically generate the appropriate behavior.
"""

from typing import Any, Callable, List, Protocol, Sequence, Set, Type

from channelsystem import pdg
from channelsystem.particle import Particle, ParticleCollection

from .channels import SppChannel


class EdgeQNConservationRule(Protocol):
    quantum_number: str

    def __call__(
        self, __ingoing_qns: List[Any], __outgoing_qns: List[Any]
    ) -> bool:
        ...


def additive_quantum_number_rule(
    quantum_number: str,
) -> Callable[[Any], Type[EdgeQNConservationRule]]:
    r"""Class decorator for creating an additive conservation rule.

    Use this decorator to create a `EdgeQNConservationRule` for a quantum
    number to which an additive conservation rule applies:

    .. math:: \sum q_{in} = \sum q_{out}

    Args:
        quantum_number: Name of the `.Particle` attribute to which you want to
            apply the additive conservation check, for instance
            :code:`"charge"`.
    """

    def decorator(rule_class: Any) -> Type[EdgeQNConservationRule]:
        def new_call(  # type: ignore
            self,  # pylint: disable=unused-argument
            ingoing_qns: List[float],
            outgoing_qns: List[float],
        ) -> bool:
            return abs(sum(ingoing_qns) - sum(outgoing_qns)) < 1e-9

        rule_class.__call__ = new_call
        rule_class.quantum_number = quantum_number
        rule_class.__doc__ = (
            f"""Decorated via `{additive_quantum_number_rule.__name__}`.\n\n"""
            f"""Check for `~.Particle.{quantum_number}` conservation."""
        )
        return rule_class

    return decorator


@additive_quantum_number_rule("charge")
class ChargeConservation:
    pass


@additive_quantum_number_rule("baryon_number")
class BaryonNumberConservation:
    pass


@additive_quantum_number_rule("electron_lepton_number")
class ElectronLNConservation:
    pass


@additive_quantum_number_rule("muon_lepton_number")
class MuonLNConservation:
    pass


@additive_quantum_number_rule("tau_lepton_number")
class TauLNConservation:
    pass


DEFAULT_RULES: Sequence[EdgeQNConservationRule] = (
    ChargeConservation(),
    BaryonNumberConservation(),
    ElectronLNConservation(),
    MuonLNConservation(),
    TauLNConservation(),
)


def find_violated_rules(
    ingoing: Sequence[Particle],
    outgoing: Sequence[Particle],
    rules: Sequence[EdgeQNConservationRule] = DEFAULT_RULES,
) -> Set[str]:
    """Names of the rules that a reaction ``ingoing -> outgoing`` violates."""
    violated_rules = set()
    for rule in rules:
        ingoing_qns = [getattr(p, rule.quantum_number) for p in ingoing]
        outgoing_qns = [getattr(p, rule.quantum_number) for p in outgoing]
        if not rule(ingoing_qns, outgoing_qns):
            violated_rules.add(rule.__class__.__name__)
    return violated_rules


def check_spp_channel(
    channel: SppChannel, probe_pid: int, particles: ParticleCollection
) -> Set[str]:
    """Check a catalog channel for a specific (anti)neutrino flavour."""
    if channel.polarity.from_pid(probe_pid) is not channel.polarity:
        raise ValueError(
            f"Channel {channel.as_string()} does not apply to probe"
            f" {probe_pid}"
        )
    ingoing = [
        particles.find(probe_pid),
        particles.find(channel.struck_nucleon),
    ]
    outgoing = [
        particles.find(pid) for pid in channel.final_state_pids(probe_pid)
    ]
    return find_violated_rules(ingoing, outgoing)


def is_conserving(
    channel: SppChannel, particles: ParticleCollection
) -> bool:
    """Check a catalog channel for all three lepton flavours."""
    sign = 1 if channel.polarity.from_pid(pdg.NU_E) is channel.polarity else -1
    return all(
        not check_spp_channel(channel, sign * flavour, particles)
        for flavour in (pdg.NU_E, pdg.NU_MU, pdg.NU_TAU)
    )
