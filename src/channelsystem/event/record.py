"""Minimal event record that is seeded by an interaction selector."""

from typing import Optional

from channelsystem.reaction.interaction import Interaction


class EventRecord:
    """Holds the summary `.Interaction` of a simulated event.

    The record owns its summary: attaching a new one replaces the previous
    interaction.
    """

    def __init__(self) -> None:
        self.__summary: Optional[Interaction] = None

    @property
    def summary(self) -> Optional[Interaction]:
        return self.__summary

    def attach_summary(self, interaction: Interaction) -> None:
        if not isinstance(interaction, Interaction):
            raise TypeError(
                f"Cannot attach a {interaction.__class__.__name__} as event"
                " summary"
            )
        self.__summary = interaction

    def as_string(self) -> str:
        if self.__summary is None:
            return "<empty event>"
        return self.__summary.as_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.as_string()})"
