"""Flag schemas and reconstruction of explicitly-set flags into CLI tokens."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import click
from click.core import ParameterSource
from typer.core import TyperOption

from pantheon.errors import UnsupportedFlagTypeError
from pantheon.invocation import Invocation

_EXPLICIT_SOURCES = frozenset({ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT})


class FlagKind(StrEnum):
    BOOL = "bool"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    STRING_LIST = "string-list"


@dataclass(frozen=True)
class FlagSpec:
    """One declared flag. The first name is the canonical one."""

    names: tuple[str, ...]
    kind: FlagKind
    help: str = ""
    default: Any = None

    @property
    def name(self) -> str:
        return self.names[0]

    @property
    def param_name(self) -> str:
        return self.name.replace("-", "_")

    def to_option(self, *, panel: str | None = None) -> TyperOption:
        decls = [self.param_name, *(_option_decl(name) for name in self.names)]
        common: dict[str, Any] = {"param_decls": decls, "help": self.help, "rich_help_panel": panel}
        match self.kind:
            case FlagKind.BOOL:
                return TyperOption(is_flag=True, default=False, **common)
            case FlagKind.STRING:
                return TyperOption(type=click.STRING, default=self.default, show_default=True, **common)
            case FlagKind.INT:
                return TyperOption(type=click.INT, default=self.default, show_default=True, **common)
            case FlagKind.FLOAT:
                return TyperOption(type=click.FLOAT, default=self.default, show_default=True, **common)
            case FlagKind.STRING_LIST:
                return TyperOption(type=click.STRING, multiple=True, **common)
            case _:
                raise UnsupportedFlagTypeError(f"unsupported flag type for flag {self.name}: {self.kind!r}")


type FlagSchema = tuple[FlagSpec, ...]


def _option_decl(name: str) -> str:
    return f"-{name}" if len(name) == 1 else f"--{name}"


def _mismatch(spec: FlagSpec, value: Any) -> UnsupportedFlagTypeError:
    return UnsupportedFlagTypeError(
        f"unsupported flag type for flag {spec.name}: {spec.kind} cannot render {type(value).__name__}"
    )


def render_flag(spec: FlagSpec, value: Any) -> list[str]:
    """Render one explicitly-set flag value into tokens."""

    option = f"--{spec.name}"
    match spec.kind:
        case FlagKind.BOOL:
            if not isinstance(value, bool):
                raise _mismatch(spec, value)
            return [option] if value else []
        case FlagKind.STRING:
            if not isinstance(value, str):
                raise _mismatch(spec, value)
            return [f"{option}={value}"]
        case FlagKind.INT:
            if isinstance(value, bool) or not isinstance(value, int):
                raise _mismatch(spec, value)
            return [f"{option}={value:d}"]
        case FlagKind.FLOAT:
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise _mismatch(spec, value)
            return [f"{option}={float(value):f}"]
        case FlagKind.STRING_LIST:
            if isinstance(value, str) or not isinstance(value, list | tuple):
                raise _mismatch(spec, value)
            if not all(isinstance(item, str) for item in value):
                raise _mismatch(spec, value)
            return [f"{option}={item}" for item in value]
        case _:
            raise UnsupportedFlagTypeError(f"unsupported flag type for flag {spec.name}: {spec.kind!r}")


def reconstruct_flags(schema: Iterable[FlagSpec], invocation: Invocation) -> list[str]:
    """Rebuild the caller's explicitly-set flags in schema order."""

    tokens: list[str] = []
    for spec in schema:
        if not invocation.is_set(spec.name):
            continue
        tokens.extend(render_flag(spec, invocation.flags[spec.name]))
    return tokens


def invocation_flags(ctx: click.Context, schema: Iterable[FlagSpec]) -> dict[str, Any]:
    """Collect the flags of ``schema`` the caller set explicitly on ``ctx``."""

    flags: dict[str, Any] = {}
    for spec in schema:
        if ctx.get_parameter_source(spec.param_name) not in _EXPLICIT_SOURCES:
            continue
        value = ctx.params.get(spec.param_name)
        flags[spec.name] = list(value) if spec.kind is FlagKind.STRING_LIST else value
    return flags
