"""Shared behaviour: appending "Bar" and licensing information."""

from __future__ import annotations

from dataclasses import dataclass


def append_bar(s: str) -> str:
    """The string with "Bar" appended."""
    return s + "Bar"


class Licensed:
    """Mixin giving a default licensing description."""

    def licensing_info(self) -> str:
        """Licensing information shared by all software."""
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str