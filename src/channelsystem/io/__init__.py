"""Serialization module for `channelsystem`.

The `.io` module provides tools to export or import particle lists and
interaction list generator configurations to and from disk. Definitions are
validated against the JSON schemas that ship with the package.
"""

import json
from collections import abc
from pathlib import Path

import attr
import yaml

from channelsystem.particle import Particle, ParticleCollection
from channelsystem.reaction.default_settings import GeneratorSettings

from . import _dict


def asdict(instance: object) -> dict:
    if isinstance(instance, Particle):
        return _dict.from_particle(instance)
    if isinstance(instance, ParticleCollection):
        return _dict.from_particle_collection(instance)
    if isinstance(instance, GeneratorSettings):
        return _dict.from_generator_settings(instance)
    if isinstance(instance, abc.Sequence) and all(
        isinstance(item, GeneratorSettings) for item in instance
    ):
        return _dict.from_generator_settings_list(instance)
    raise NotImplementedError(
        "No conversion for dict available for class"
        f" {instance.__class__.__name__}"
    )


def fromdict(definition: dict) -> object:
    keys = set(definition.keys())
    if __REQUIRED_PARTICLE_FIELDS <= keys:
        return _dict.build_particle(definition)
    if __REQUIRED_SETTINGS_FIELDS <= keys:
        return _dict.build_generator_settings(definition)
    if keys == {"particles"}:
        return _dict.build_particle_collection(definition)
    if keys == {"generators"}:
        return _dict.build_generator_settings_list(definition)
    raise NotImplementedError(f"Could not determine type from keys {keys}")


__REQUIRED_PARTICLE_FIELDS = {
    field.name
    for field in attr.fields(Particle)
    if field.default == attr.NOTHING
}
__REQUIRED_SETTINGS_FIELDS = {
    field.name
    for field in attr.fields(GeneratorSettings)
    if field.default == attr.NOTHING
}


def load(filename: str) -> object:
    with open(filename) as stream:
        file_extension = _get_file_extension(filename)
        if file_extension == "json":
            definition = json.load(stream)
            return fromdict(definition)
        if file_extension in ["yaml", "yml"]:
            definition = yaml.load(stream, Loader=yaml.SafeLoader)
            return fromdict(definition)
    raise NotImplementedError(
        f'No loader defined for file type "{file_extension}"'
    )


class _IncreasedIndent(yaml.Dumper):
    # pylint: disable=too-many-ancestors
    def increase_indent(self, flow=False, indentless=False):  # type: ignore
        return super().increase_indent(flow, False)

    def write_line_break(self, data=None):  # type: ignore
        """See https://stackoverflow.com/a/44284819."""
        super().write_line_break(data)
        if len(self.indents) == 1:
            super().write_line_break()


def write(instance: object, filename: str) -> None:
    file_extension = _get_file_extension(filename)
    if file_extension == "json":
        with open(filename, "w") as stream:
            json.dump(asdict(instance), stream, indent=2)
        return
    if file_extension in ["yaml", "yml"]:
        with open(filename, "w") as stream:
            yaml.dump(
                asdict(instance),
                stream,
                sort_keys=False,
                Dumper=_IncreasedIndent,
                default_flow_style=False,
            )
        return
    raise NotImplementedError(
        f'No writer defined for file type "{file_extension}"'
    )


def _get_file_extension(filename: str) -> str:
    path = Path(filename)
    extension = path.suffix.lower()
    if not extension:
        raise ValueError(f"No file extension in file {filename}")
    extension = extension[1:]
    return extension
