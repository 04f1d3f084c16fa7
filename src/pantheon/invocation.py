"""Request-scoped data shared by the translator and the runner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class CommandName(StrEnum):
    """Subcommands of the pantheon group."""

    FORMAT = "format"
    MOUNT = "mount"
    UMOUNT = "umount"
    CHECKPOINT = "checkpoint"


@dataclass(frozen=True)
class Invocation:
    """One parsed pantheon command.

    ``flags`` only holds flags the caller set explicitly, keyed by canonical name.
    A flag set to its default value is present; an unset flag is absent.
    """

    command: CommandName
    args: tuple[str, ...] = ()
    flags: dict[str, Any] = field(default_factory=dict)

    def is_set(self, name: str) -> bool:
        return name in self.flags


@dataclass(frozen=True)
class TranslatedCommand:
    """Native command name plus its argument tokens."""

    target: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [self.target, *self.args]
