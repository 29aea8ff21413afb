# pylint: disable=no-self-use
import logging
from collections import Counter

import numpy as np
import pytest

from channelsystem.event import (
    EventRecord,
    InteractionGeneratorMap,
    InteractionSelector,
    UniformInteractionSelector,
)
from channelsystem.kinematics import FourMomentum

_PROBE_P4 = FourMomentum([2.5, 0.0, 0.0, 2.5])


def _draw(
    selector: InteractionSelector, generator_map: InteractionGeneratorMap
) -> str:
    event = selector.select(generator_map, _PROBE_P4)
    assert event is not None
    return event.as_string()


class TestUniformInteractionSelector:
    @staticmethod
    def test_select(numu_on_iron_map: InteractionGeneratorMap):
        selector = UniformInteractionSelector(seed=0)
        event = selector.select(numu_on_iron_map, _PROBE_P4)
        assert isinstance(event, EventRecord)
        summary = event.summary
        assert summary is not None
        assert summary.initial_state.probe_p4 == _PROBE_P4
        assert summary.initial_state.probe_p4 is not _PROBE_P4
        assert summary.process_info.is_resonant()
        candidates = [i.as_string() for i in numu_on_iron_map]
        assert summary.as_string() in candidates
        assert event.as_string() == summary.as_string()

    @staticmethod
    def test_probe_p4_is_converted(
        numu_on_iron_map: InteractionGeneratorMap,
    ):
        selector = UniformInteractionSelector(seed=0)
        for probe_p4 in ([2.5, 0.0, 0.0, 2.5], np.array([2.5, 0, 0, 2.5])):
            event = selector.select(numu_on_iron_map, probe_p4)
            assert event is not None
            stored = event.summary.initial_state.probe_p4  # type: ignore
            assert isinstance(stored, FourMomentum)
            assert stored == _PROBE_P4
        with pytest.raises(ValueError, match="shape"):
            selector.select(numu_on_iron_map, [2.5, 0.0, 2.5])

    @staticmethod
    def test_map_is_untouched(numu_on_iron_map: InteractionGeneratorMap):
        selector = UniformInteractionSelector(seed=1)
        for _ in range(20):
            event = selector.select(numu_on_iron_map, _PROBE_P4)
            assert event is not None
            assert event.summary not in list(numu_on_iron_map)
        assert all(
            interaction.initial_state.probe_p4 is None
            for interaction in numu_on_iron_map
        )

    @staticmethod
    def test_mutating_summary(numu_on_iron_map: InteractionGeneratorMap):
        selector = UniformInteractionSelector(seed=3)
        event = selector.select(numu_on_iron_map, _PROBE_P4)
        assert event is not None
        before = [i.as_string() for i in numu_on_iron_map]
        event.summary.initial_state.target.set_struck_nucleon(211)
        event.summary.initial_state.probe_pid = -14
        assert [i.as_string() for i in numu_on_iron_map] == before

    @staticmethod
    def test_single_interaction(numu_on_iron_map: InteractionGeneratorMap):
        single_map = InteractionGeneratorMap(
            [numu_on_iron_map.find_list("RSPP/CC")[1:2]]  # type: ignore
        )
        assert single_map.size() == 1
        selector = UniformInteractionSelector()
        drawn = {_draw(selector, single_map) for _ in range(20)}
        assert drawn == {single_map[0].as_string()}

    @staticmethod
    def test_null_map(caplog):
        selector = UniformInteractionSelector()
        with caplog.at_level(logging.ERROR):
            assert selector.select(None, _PROBE_P4) is None
        assert "Null interaction generator map" in caplog.text

    @staticmethod
    def test_empty_map(caplog):
        selector = UniformInteractionSelector()
        with caplog.at_level(logging.ERROR):
            event = selector.select(InteractionGeneratorMap([]), _PROBE_P4)
        assert event is None
        assert "Empty interaction generator map" in caplog.text

    @staticmethod
    def test_external_random_generator(
        numu_on_iron_map: InteractionGeneratorMap,
    ):
        selector = UniformInteractionSelector()
        random_generator = np.random.default_rng(seed=42)
        reference = np.random.default_rng(seed=42)
        for _ in range(10):
            event = selector.select(
                numu_on_iron_map, _PROBE_P4, random_generator
            )
            assert event is not None
            expected = numu_on_iron_map[int(reference.integers(7))]
            assert event.as_string() == expected.as_string()

    @staticmethod
    def test_seed_is_reproducible(numu_on_iron_map: InteractionGeneratorMap):
        def draw(seed: int):
            selector = UniformInteractionSelector(seed)
            return [_draw(selector, numu_on_iron_map) for _ in range(25)]

        assert draw(7) == draw(7)

    @staticmethod
    def test_uniform_frequencies(numu_on_iron_map: InteractionGeneratorMap):
        selector = UniformInteractionSelector(seed=12345)
        n_events = 7000
        counts = Counter(
            _draw(selector, numu_on_iron_map) for _ in range(n_events)
        )
        assert len(counts) == 7
        expected = n_events / 7
        for count in counts.values():
            assert count == pytest.approx(expected, rel=0.15)


def test_selector_is_abstract():
    with pytest.raises(TypeError):
        InteractionSelector()  # type: ignore


def test_event_record():
    event = EventRecord()
    assert event.summary is None
    assert event.as_string() == "<empty event>"
    with pytest.raises(TypeError):
        event.attach_summary("nu:14")  # type: ignore
