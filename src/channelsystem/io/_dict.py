"""Serialization from and to a `dict`."""

import json
from os.path import dirname, realpath
from typing import Any, Iterable, List

import attr
import jsonschema

from channelsystem.particle import Particle, ParticleCollection
from channelsystem.reaction.default_settings import GeneratorSettings


def from_particle_collection(particles: ParticleCollection) -> dict:
    return {
        "particles": [
            from_particle(p) for p in sorted(particles, key=lambda p: p.pid)
        ]
    }


def from_particle(particle: Particle) -> dict:
    return attr.asdict(
        particle,
        recurse=True,
        value_serializer=__value_serializer,
        filter=lambda attr, value: attr.default != value,
    )


def from_generator_settings(settings: GeneratorSettings) -> dict:
    return attr.asdict(
        settings, filter=lambda a, v: a.init and a.default != v
    )


def from_generator_settings_list(
    settings_list: Iterable[GeneratorSettings],
) -> dict:
    return {
        "generators": [
            from_generator_settings(settings) for settings in settings_list
        ]
    }


def __value_serializer(  # pylint: disable=unused-argument
    inst: type, field: attr.Attribute, value: Any
) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def build_particle_collection(
    definition: dict, do_validate: bool = True
) -> ParticleCollection:
    if do_validate:
        validate_particle_collection(definition)
    return ParticleCollection(
        build_particle(p) for p in definition["particles"]
    )


def build_particle(definition: dict) -> Particle:
    return Particle(**definition)


def build_generator_settings_list(
    definition: dict, do_validate: bool = True
) -> List[GeneratorSettings]:
    if do_validate:
        validate_generator_settings(definition)
    return [
        build_generator_settings(settings_def)
        for settings_def in definition["generators"]
    ]


def build_generator_settings(definition: dict) -> GeneratorSettings:
    return GeneratorSettings(**definition)


def validate_particle_collection(instance: dict) -> None:
    jsonschema.validate(instance=instance, schema=__SCHEMA_PARTICLES)


def validate_generator_settings(instance: dict) -> None:
    jsonschema.validate(instance=instance, schema=__SCHEMA_GENERATORS)


__CHANNELSYSTEM_PATH = dirname(dirname(realpath(__file__)))
with open(f"{__CHANNELSYSTEM_PATH}/schemas/particle-list.json") as __STREAM:
    __SCHEMA_PARTICLES = json.load(__STREAM)
with open(
    f"{__CHANNELSYSTEM_PATH}/schemas/generator-settings.json"
) as __STREAM:
    __SCHEMA_GENERATORS = json.load(__STREAM)
