# pylint: disable=no-self-use
import logging
from typing import List

import pytest

from channelsystem.particle import ParticleCollection
from channelsystem.reaction import (
    DiffractiveInteractionListGenerator,
    GeneratorSettings,
    InitialState,
    InteractionListGenerator,
    SppInteractionListGenerator,
    Target,
    create_generator,
    create_generators,
)
from channelsystem.reaction.default_settings import (
    DEFAULT_GENERATOR_SETTINGS,
)

_RSPP_CC = GeneratorSettings(
    name="RSPP/CC", process="resonant-single-pion", is_cc=True
)
_RSPP_NC = GeneratorSettings(
    name="RSPP/NC", process="resonant-single-pion", is_nc=True
)
_RSPP_NONE = GeneratorSettings(
    name="RSPP/None", process="resonant-single-pion"
)
_DIFFRACTIVE = GeneratorSettings(name="DFRC/Default", process="diffractive")


def _final_states(interactions) -> List[str]:
    return [
        f"{i.initial_state.target.struck_nucleon_pid}"
        f"->{i.exclusive_tag.as_string()}"
        for i in interactions
    ]


def _initial_state(
    probe_pid: int, z: int, a: int, particles: ParticleCollection
) -> InitialState:
    return InitialState(
        probe_pid=probe_pid,
        target=Target.from_za(z, a, particles=particles),
    )


class TestSppInteractionListGenerator:
    @staticmethod
    @pytest.mark.parametrize(
        "probe_pid, z, a, settings, expected_count",
        [
            (14, 26, 56, _RSPP_CC, 3),
            (14, 26, 56, _RSPP_NC, 4),
            (-14, 26, 56, _RSPP_CC, 3),
            (-12, 18, 40, _RSPP_NC, 4),
            (14, 1, 1, _RSPP_CC, 1),
            (14, 1, 1, _RSPP_NC, 2),
            (14, 0, 1, _RSPP_CC, 2),
            (14, 0, 1, _RSPP_NC, 2),
            (-14, 1, 1, _RSPP_CC, 2),
            (-14, 0, 1, _RSPP_CC, 1),
        ],
    )
    def test_channel_count(
        particle_database: ParticleCollection,
        probe_pid: int,
        z: int,
        a: int,
        settings: GeneratorSettings,
        expected_count: int,
    ):
        initial_state = _initial_state(probe_pid, z, a, particle_database)
        generator = SppInteractionListGenerator(settings)
        interactions = generator.generate(initial_state)
        assert interactions is not None
        assert len(interactions) == expected_count
        assert interactions.generator_name == settings.name
        for interaction in interactions:
            assert interaction.process_info.is_resonant()
            assert (
                interaction.process_info.interaction_type
                is settings.interaction_type
            )
            assert interaction.exclusive_tag is not None
            assert interaction.exclusive_tag.is_single_pion()
            assert interaction.initial_state.probe_pid == probe_pid

    @staticmethod
    def test_numu_cc_on_iron(numu_on_iron: InitialState):
        generator = SppInteractionListGenerator(_RSPP_CC)
        interactions = generator.generate(numu_on_iron)
        assert interactions is not None
        assert _final_states(interactions) == [
            "2212->N(p=1,n=0);pi(+=1,0=0,-=0)",
            "2112->N(p=1,n=0);pi(+=0,0=1,-=0)",
            "2112->N(p=0,n=1);pi(+=1,0=0,-=0)",
        ]

    @staticmethod
    def test_free_proton_keeps_proton_channels(
        particle_database: ParticleCollection,
    ):
        initial_state = _initial_state(14, 1, 1, particle_database)
        generator = SppInteractionListGenerator(_RSPP_NC)
        interactions = generator.generate(initial_state)
        assert interactions is not None
        assert _final_states(interactions) == [
            "2212->N(p=1,n=0);pi(+=0,0=1,-=0)",
            "2212->N(p=0,n=1);pi(+=1,0=0,-=0)",
        ]

    @staticmethod
    def test_struck_nucleon_is_on_a_copy(numu_on_iron: InitialState):
        generator = SppInteractionListGenerator(_RSPP_NC)
        interactions = generator.generate(numu_on_iron)
        assert interactions is not None
        assert not numu_on_iron.target.struck_nucleon_is_set()
        targets = [i.initial_state.target for i in interactions]
        assert all(t.struck_nucleon_is_set() for t in targets)
        assert all(t.struck_nucleon_p4 is not None for t in targets)
        assert targets[0] is not targets[1]
        assert targets[0].struck_nucleon_p4 is not targets[1].struck_nucleon_p4

    @staticmethod
    @pytest.mark.parametrize("probe_pid", [11, 13, -13, 2212, 22])
    def test_unrecognized_probe(
        iron_target: Target, probe_pid: int, caplog
    ):
        initial_state = InitialState(probe_pid=probe_pid, target=iron_target)
        generator = SppInteractionListGenerator(_RSPP_CC)
        with caplog.at_level(logging.WARNING):
            assert generator.generate(initial_state) is None
        assert "Can not handle probe" in caplog.text

    @staticmethod
    def test_no_current_configured(numu_on_iron: InitialState, caplog):
        generator = SppInteractionListGenerator(_RSPP_NONE)
        with caplog.at_level(logging.ERROR):
            assert generator.generate(numu_on_iron) is None
        assert "null or empty interaction list" in caplog.text

    @staticmethod
    @pytest.mark.parametrize(
        "target_pid",
        [
            11,  # bare electron
            2212,  # proton code without nuclear composition
            1000030020,  # collapses to Z = A = 0
        ],
    )
    def test_no_admissible_channel(
        particle_database: ParticleCollection, target_pid: int, caplog
    ):
        initial_state = InitialState(
            probe_pid=14, target=Target(target_pid, particle_database)
        )
        for settings in (_RSPP_CC, _RSPP_NC):
            generator = SppInteractionListGenerator(settings)
            with caplog.at_level(logging.ERROR):
                assert generator.generate(initial_state) is None
        assert "null or empty interaction list" in caplog.text

    @staticmethod
    @pytest.mark.parametrize("z, a", [(0, 1001), (1, -999), (-1, 1001)])
    def test_out_of_range_target(
        particle_database: ParticleCollection, z: int, a: int
    ):
        initial_state = _initial_state(14, z, a, particle_database)
        for settings in (_RSPP_CC, _RSPP_NC):
            generator = SppInteractionListGenerator(settings)
            assert generator.generate(initial_state) is None


class TestDiffractiveInteractionListGenerator:
    @staticmethod
    @pytest.mark.parametrize("probe_pid", [14, -12, 11])
    def test_always_empty(iron_target: Target, probe_pid: int):
        initial_state = InitialState(probe_pid=probe_pid, target=iron_target)
        generator = DiffractiveInteractionListGenerator(_DIFFRACTIVE)
        interactions = generator.generate(initial_state)
        assert interactions is not None
        assert len(interactions) == 0
        assert interactions.generator_name == "DFRC/Default"


class TestFactory:
    @staticmethod
    def test_create_generator():
        generator = create_generator(_RSPP_NC)
        assert isinstance(generator, SppInteractionListGenerator)
        assert generator.name == "RSPP/NC"
        assert generator.settings is _RSPP_NC
        assert isinstance(
            create_generator(_DIFFRACTIVE),
            DiffractiveInteractionListGenerator,
        )

    @staticmethod
    def test_create_default_generators():
        generators = create_generators(DEFAULT_GENERATOR_SETTINGS)
        assert [g.name for g in generators] == [
            "RSPP/CC",
            "RSPP/NC",
            "DFRC/Default",
        ]
        assert all(
            isinstance(g, InteractionListGenerator) for g in generators
        )

    @staticmethod
    def test_abstract():
        with pytest.raises(TypeError):
            InteractionListGenerator(_RSPP_CC)  # type: ignore
