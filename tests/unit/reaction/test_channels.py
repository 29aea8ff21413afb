from typing import Tuple

import pytest

from channelsystem.reaction.channels import (
    SPP_CHANNEL_TABLE,
    ProbePolarity,
    SppChannel,
    get_spp_channels,
)
from channelsystem.reaction.process import InteractionType

_CC = InteractionType.WEAK_CC
_NC = InteractionType.WEAK_NC
_NU = ProbePolarity.NEUTRINO
_NUBAR = ProbePolarity.ANTINEUTRINO


@pytest.mark.parametrize(
    "pid, polarity",
    [
        (14, _NU),
        (12, _NU),
        (-16, _NUBAR),
        (-12, _NUBAR),
        (11, None),
        (0, None),
    ],
)
def test_polarity_from_pid(pid: int, polarity):
    assert ProbePolarity.from_pid(pid) is polarity


@pytest.mark.parametrize(
    "polarity, interaction_type, expected",
    [
        (_NU, _CC, [(2212, 2212, 211), (2112, 2212, 111), (2112, 2112, 211)]),
        (
            _NU,
            _NC,
            [
                (2212, 2212, 111),
                (2212, 2112, 211),
                (2112, 2112, 111),
                (2112, 2212, -211),
            ],
        ),
        (
            _NUBAR,
            _CC,
            [(2112, 2112, -211), (2212, 2112, 111), (2212, 2212, -211)],
        ),
        (
            _NUBAR,
            _NC,
            [
                (2212, 2212, 111),
                (2212, 2112, 211),
                (2112, 2112, 111),
                (2112, 2212, -211),
            ],
        ),
    ],
)
def test_table_content_and_order(
    polarity: ProbePolarity,
    interaction_type: InteractionType,
    expected: Tuple[int, int, int],
):
    channels = get_spp_channels(polarity, interaction_type)
    assert [
        (ch.struck_nucleon, ch.final_nucleon, ch.final_pion)
        for ch in channels
    ] == expected
    for channel in channels:
        assert channel.polarity is polarity
        assert channel.interaction_type is interaction_type


def test_table_covers_all_channels():
    assert len(SPP_CHANNEL_TABLE) == 4
    listed = [ch for channels in SPP_CHANNEL_TABLE.values() for ch in channels]
    assert len(listed) == 14
    assert set(listed) == set(SppChannel)


@pytest.mark.parametrize("polarity", [_NU, _NUBAR])
def test_unsupported_current(polarity: ProbePolarity):
    assert get_spp_channels(polarity, None) == tuple()
    assert get_spp_channels(polarity, InteractionType.EM) == tuple()


@pytest.mark.parametrize("channel", list(SppChannel))
def test_exclusive_tag_is_single_pion(channel: SppChannel):
    tag = channel.exclusive_tag()
    assert tag.is_single_pion()
    assert tag.n_protons == int(channel.final_nucleon == 2212)
    assert tag.n_neutrons == int(channel.final_nucleon == 2112)


@pytest.mark.parametrize(
    "channel, probe_pid, expected",
    [
        (SppChannel.NU_P_CC_P_PIPLUS, 14, (13, 2212, 211)),
        (SppChannel.NU_N_CC_P_PI0, 12, (11, 2212, 111)),
        (SppChannel.NU_N_NC_P_PIMINUS, 16, (16, 2212, -211)),
        (SppChannel.NUBAR_P_CC_N_PI0, -14, (-13, 2112, 111)),
        (SppChannel.NUBAR_P_NC_N_PIPLUS, -12, (-12, 2112, 211)),
    ],
)
def test_final_state_pids(
    channel: SppChannel, probe_pid: int, expected: Tuple[int, int, int]
):
    assert channel.final_state_pids(probe_pid) == expected


def test_as_string():
    assert SppChannel.NU_P_CC_P_PIPLUS.as_string() == "v p (cc) -> p pi+"
    assert (
        SppChannel.NUBAR_N_NC_P_PIMINUS.as_string() == "vb n (nc) -> p pi-"
    )
