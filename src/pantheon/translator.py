"""Translate pantheon commands into native host tool commands."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from pantheon.errors import InvalidInvocationError
from pantheon.flags import FlagSchema, reconstruct_flags
from pantheon.invocation import CommandName, Invocation, TranslatedCommand
from pantheon.paths import strip_query, validate_path
from pantheon.schemas import (
    PANTHEON_CHECKPOINT_FLAGS,
    PANTHEON_FORMAT_FLAGS,
    PANTHEON_MOUNT_FLAGS,
    PANTHEON_UMOUNT_FLAGS,
)

STORAGE_SCHEME = "badger"
FORCED_TRASH_DAYS = 999


def encode_meta_location(location: str) -> str:
    """Prefix the storage scheme, keeping any query suffix."""

    return f"{STORAGE_SCHEME}://{location}"


def _positionals(invocation: Invocation, count: int) -> tuple[str, ...]:
    if len(invocation.args) != count:
        raise InvalidInvocationError(
            f"{invocation.command} expects {count} argument(s), got {len(invocation.args)}"
        )
    return invocation.args


def translate_format(invocation: Invocation, schema: FlagSchema = PANTHEON_FORMAT_FLAGS) -> TranslatedCommand:
    meta_location, name = _positionals(invocation, 2)
    if invocation.is_set("trash-days"):
        raise InvalidInvocationError(f"trash-days is fixed to {FORCED_TRASH_DAYS} in pantheon mode")

    validate_path(strip_query(meta_location), must_exist=False)

    args = [encode_meta_location(meta_location), name, f"--trash-days={FORCED_TRASH_DAYS}"]
    args.extend(reconstruct_flags(schema, invocation))
    return TranslatedCommand("format", tuple(args))


def translate_mount(invocation: Invocation, schema: FlagSchema = PANTHEON_MOUNT_FLAGS) -> TranslatedCommand:
    meta_location, mount_point = _positionals(invocation, 2)

    validate_path(strip_query(meta_location), must_exist=True)

    args = [encode_meta_location(meta_location), mount_point]
    args.extend(reconstruct_flags(schema, invocation))
    return TranslatedCommand("mount", tuple(args))


def translate_umount(invocation: Invocation, schema: FlagSchema = PANTHEON_UMOUNT_FLAGS) -> TranslatedCommand:
    (mount_point,) = _positionals(invocation, 1)

    args = [mount_point]
    args.extend(reconstruct_flags(schema, invocation))
    return TranslatedCommand("umount", tuple(args))


def translate_checkpoint(
    invocation: Invocation, schema: FlagSchema = PANTHEON_CHECKPOINT_FLAGS
) -> TranslatedCommand:
    # clone never receives flags.
    del schema
    old_meta_dir, new_meta_dir = _positionals(invocation, 2)

    validate_path(old_meta_dir, must_exist=True)
    validate_path(new_meta_dir, must_exist=False)

    return TranslatedCommand("clone", (old_meta_dir, new_meta_dir))


_TRANSLATORS: dict[CommandName, Callable[..., TranslatedCommand]] = {
    CommandName.FORMAT: translate_format,
    CommandName.MOUNT: translate_mount,
    CommandName.UMOUNT: translate_umount,
    CommandName.CHECKPOINT: translate_checkpoint,
}


def translate(invocation: Invocation, schema: FlagSchema | None = None) -> TranslatedCommand:
    """Map one pantheon invocation onto the native command it stands for."""

    try:
        translator = _TRANSLATORS[CommandName(invocation.command)]
    except ValueError as exc:
        raise InvalidInvocationError(f"unknown pantheon command: {invocation.command}") from exc
    translated = translator(invocation) if schema is None else translator(invocation, schema)
    logger.debug(
        "pantheon.translate command={} target={} args={}",
        invocation.command,
        translated.target,
        list(translated.args),
    )
    return translated
