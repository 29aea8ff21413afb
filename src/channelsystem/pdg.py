"""PDG Monte Carlo numbering scheme codes used throughout `channelsystem`.

Nuclear codes follow the ``10LZZZAAAI`` convention of the `PDG
<https://pdg.lbl.gov/2020/reviews/rpp2020-rev-monte-carlo-numbering.pdf>`_.
"""

PROTON = 2212
NEUTRON = 2112
PI_PLUS = 211
PI_ZERO = 111
PI_MINUS = -211

ELECTRON = 11
NU_E = 12
MUON = 13
NU_MU = 14
TAU = 15
NU_TAU = 16

FREE_PROTON_ION = 1000010010
FREE_NEUTRON_ION = 1000000010

_NEUTRINOS = {NU_E, NU_MU, NU_TAU}
_ION_BASE = 1000000000


def is_neutrino(pid: int) -> bool:
    return pid in _NEUTRINOS


def is_antineutrino(pid: int) -> bool:
    return -pid in _NEUTRINOS


def is_quark(pid: int) -> bool:
    return 1 <= pid <= 6


def is_antiquark(pid: int) -> bool:
    return 1 <= -pid <= 6


def is_proton(pid: int) -> bool:
    return pid == PROTON


def is_neutron(pid: int) -> bool:
    return pid == NEUTRON


def is_neutron_or_proton(pid: int) -> bool:
    return pid in (PROTON, NEUTRON)


def is_ion(pid: int) -> bool:
    return _ION_BASE <= pid < 2 * _ION_BASE


def is_valid_za(z: int, a: int) -> bool:
    """Whether ``z`` and ``a`` fit the ``ZZZAAA`` digits of an ion code."""
    return 1 <= a <= 999 and 0 <= z <= a


def ion_pid(z: int, a: int) -> int:
    """Nuclear code of an isotope with ``z`` protons and ``a`` nucleons."""
    if not is_valid_za(z, a):
        raise ValueError(f"No ion code for Z = {z}, A = {a}")
    return _ION_BASE + z * 10000 + a * 10


def ion_z(pid: int) -> int:
    return (pid // 10000) % 1000


def ion_a(pid: int) -> int:
    return (pid // 10) % 1000


def charged_lepton_partner(neutrino_pid: int) -> int:
    """Charged lepton that a (anti)neutrino turns into via a W exchange.

    >>> charged_lepton_partner(NU_MU)
    13
    >>> charged_lepton_partner(-NU_E)
    -11
    """
    if not (is_neutrino(neutrino_pid) or is_antineutrino(neutrino_pid)):
        raise ValueError(f"PID {neutrino_pid} is not a (anti)neutrino")
    if neutrino_pid > 0:
        return neutrino_pid - 1
    return neutrino_pid + 1
