"""The pantheon command group."""

from __future__ import annotations

from typing import Any, ClassVar

import click
import typer
from loguru import logger
from typer.core import TyperCommand

from pantheon.config import Settings, load_settings
from pantheon.errors import PantheonError
from pantheon.flags import FlagSchema, invocation_flags
from pantheon.invocation import CommandName, Invocation
from pantheon.runner import SubprocessRunner
from pantheon.schemas import (
    PANTHEON_CHECKPOINT_FLAGS,
    PANTHEON_FORMAT_FLAGS,
    PANTHEON_MOUNT_FLAGS,
    PANTHEON_UMOUNT_FLAGS,
)
from pantheon.translator import translate

FLAGS_META_KEY = "pantheon.flags"
INHERITED_PANEL = "Inherited flags"


class InheritedFlagsCommand(TyperCommand):
    """Typer command that also accepts the flags of the native command it stands for.

    Inherited flag values are moved out of the callback arguments into
    ``ctx.meta[FLAGS_META_KEY]``, holding only the flags the caller set.
    """

    schema: ClassVar[FlagSchema] = ()

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.params.extend(spec.to_option(panel=INHERITED_PANEL) for spec in self.schema)

    def invoke(self, ctx: click.Context) -> Any:
        ctx.meta[FLAGS_META_KEY] = invocation_flags(ctx, self.schema)
        for spec in self.schema:
            ctx.params.pop(spec.param_name, None)
        return super().invoke(ctx)


def inherits(schema: FlagSchema) -> type[InheritedFlagsCommand]:
    return type("InheritedFlagsCommand", (InheritedFlagsCommand,), {"schema": schema})


def build_runner(settings: Settings) -> SubprocessRunner:
    return SubprocessRunner(executable=settings.executable)


def _execute(ctx: typer.Context, command: CommandName, *args: str) -> None:
    invocation = Invocation(command, args, dict(ctx.meta.get(FLAGS_META_KEY, {})))
    try:
        translated = translate(invocation)
        status = build_runner(load_settings()).run(translated.argv)
    except PantheonError as exc:
        logger.error("{}", exc)
        raise typer.Exit(1) from exc
    if status != 0:
        raise typer.Exit(status)


app = typer.Typer(add_completion=False)


@app.callback(invoke_without_command=True)
def pantheon(ctx: typer.Context) -> None:
    """Controlling PantheonFS related features."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command(
    "format",
    cls=inherits(PANTHEON_FORMAT_FLAGS),
    epilog=(
        "Examples:\n\n"
        "# Format a simple volume with local metadata\n\n"
        "$ pfs pantheon format /var/lib/juicefs/myfs myfs\n\n"
        "# Format with custom storage options\n\n"
        "$ pfs pantheon format /var/lib/juicefs/myfs myfs --storage s3 --bucket https://mybucket.s3.amazonaws.com"
    ),
)
def format_volume(
    ctx: typer.Context,
    meta_location: str = typer.Argument(..., metavar="META-DIR", help="Metadata directory, may carry a ?query"),
    name: str = typer.Argument(..., metavar="NAME", help="Volume name"),
) -> None:
    """Format a volume in PantheonFS mode."""
    _execute(ctx, CommandName.FORMAT, meta_location, name)


@app.command(
    "mount",
    cls=inherits(PANTHEON_MOUNT_FLAGS),
    epilog=(
        "Examples:\n\n"
        "# Mount a pantheon volume\n\n"
        "$ pfs pantheon mount /var/lib/juicefs/myfs /mnt/jfs\n\n"
        "# Mount in background\n\n"
        "$ pfs pantheon mount /var/lib/juicefs/myfs /mnt/jfs -d"
    ),
)
def mount_volume(
    ctx: typer.Context,
    meta_location: str = typer.Argument(..., metavar="META-DIR", help="Metadata directory, may carry a ?query"),
    mount_point: str = typer.Argument(..., metavar="MOUNTPOINT", help="Where to mount the volume"),
) -> None:
    """Mount a volume in PantheonFS mode."""
    _execute(ctx, CommandName.MOUNT, meta_location, mount_point)


@app.command(
    "umount",
    cls=inherits(PANTHEON_UMOUNT_FLAGS),
    epilog=(
        "Examples:\n\n"
        "# Unmount a volume\n\n"
        "$ pfs pantheon umount /mnt/jfs\n\n"
        "# Force unmount\n\n"
        "$ pfs pantheon umount /mnt/jfs -f"
    ),
)
def umount_volume(
    ctx: typer.Context,
    mount_point: str = typer.Argument(..., metavar="MOUNTPOINT", help="Mount point to unmount"),
) -> None:
    """Unmount a volume."""
    _execute(ctx, CommandName.UMOUNT, mount_point)


@app.command(
    "checkpoint",
    cls=inherits(PANTHEON_CHECKPOINT_FLAGS),
    epilog="Examples:\n\n$ pfs pantheon checkpoint /var/lib/juicefs/myfs /var/lib/juicefs/myfs-branch2",
)
def checkpoint(
    ctx: typer.Context,
    old_meta_dir: str = typer.Argument(..., metavar="OLD-META-DIR", help="Metadata directory to copy"),
    new_meta_dir: str = typer.Argument(..., metavar="NEW-META-DIR", help="Metadata directory to create"),
) -> None:
    """Create a checkpoint of the entire filesystem by copying metadata to a new directory.

    The old metadata should not be mounted when creating a checkpoint.
    """
    _execute(ctx, CommandName.CHECKPOINT, old_meta_dir, new_meta_dir)
