"""Default configuration for the interaction list generators."""

from typing import Dict, Optional, Tuple

import attr
from attr.validators import in_, instance_of

from .process import InteractionType

RESONANT_SINGLE_PION = "resonant-single-pion"
DIFFRACTIVE = "diffractive"
SUPPORTED_PROCESSES = (RESONANT_SINGLE_PION, DIFFRACTIVE)


@attr.s(frozen=True, kw_only=True)
class GeneratorSettings:
    """Configuration of one interaction list generator.

    Args:
        name: Label under which the generator reports its interactions, for
            instance :code:`"RSPP/CC"`.
        process: Which generator variant to create, see
            `SUPPORTED_PROCESSES`.
        is_cc: Generate weak charged current channels.
        is_nc: Generate weak neutral current channels.

    A generator handles at most one current, so setting both flags raises a
    `ValueError`. If neither is set, the generator produces no channels.
    """

    name: str = attr.ib(validator=instance_of(str))
    process: str = attr.ib(validator=in_(SUPPORTED_PROCESSES))
    is_cc: bool = attr.ib(default=False, converter=bool)
    is_nc: bool = attr.ib(default=False, converter=bool)

    @is_nc.validator
    def __check_currents(self, _: attr.Attribute, value: bool) -> None:
        if value and self.is_cc:
            raise ValueError(
                f"Generator {self.name} cannot be configured for both weak"
                " charged and neutral currents"
            )

    @property
    def interaction_type(self) -> Optional[InteractionType]:
        if self.is_cc:
            return InteractionType.WEAK_CC
        if self.is_nc:
            return InteractionType.WEAK_NC
        return None


DEFAULT_GENERATOR_SETTINGS: Tuple[GeneratorSettings, ...] = (
    GeneratorSettings(
        name="RSPP/CC", process=RESONANT_SINGLE_PION, is_cc=True
    ),
    GeneratorSettings(
        name="RSPP/NC", process=RESONANT_SINGLE_PION, is_nc=True
    ),
    GeneratorSettings(name="DFRC/Default", process=DIFFRACTIVE, is_cc=True),
)


def get_default_settings(name: str) -> GeneratorSettings:
    """Look up one of the `DEFAULT_GENERATOR_SETTINGS` by name."""
    settings_by_name: Dict[str, GeneratorSettings] = {
        settings.name: settings for settings in DEFAULT_GENERATOR_SETTINGS
    }
    if name not in settings_by_name:
        raise KeyError(
            f"No default generator settings {name!r}. Choose from"
            f" {sorted(settings_by_name)}"
        )
    return settings_by_name[name]
