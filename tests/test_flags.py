import click
import pytest

from pantheon.errors import UnsupportedFlagTypeError
from pantheon.flags import FlagKind, FlagSpec, invocation_flags, reconstruct_flags, render_flag
from pantheon.invocation import CommandName, Invocation

SCHEMA = (
    FlagSpec(("background", "d"), FlagKind.BOOL),
    FlagSpec(("log",), FlagKind.STRING),
    FlagSpec(("options", "o"), FlagKind.STRING_LIST),
    FlagSpec(("buffer-size",), FlagKind.INT, default=300),
    FlagSpec(("free-space-ratio",), FlagKind.FLOAT, default=0.1),
)


def _invocation(**flags: object) -> Invocation:
    return Invocation(CommandName.MOUNT, ("/meta", "/mnt"), {name.replace("_", "-"): value for name, value in flags.items()})


@pytest.mark.parametrize(
    ("spec", "value", "expected"),
    [
        (FlagSpec(("writeback",), FlagKind.BOOL), True, ["--writeback"]),
        (FlagSpec(("writeback",), FlagKind.BOOL), False, []),
        (FlagSpec(("log",), FlagKind.STRING), "/var/log/jfs.log", ["--log=/var/log/jfs.log"]),
        (FlagSpec(("log",), FlagKind.STRING), "", ["--log="]),
        (FlagSpec(("capacity",), FlagKind.INT), 1 << 40, ["--capacity=1099511627776"]),
        (FlagSpec(("shards",), FlagKind.INT), -1, ["--shards=-1"]),
        (FlagSpec(("ratio",), FlagKind.FLOAT), 0.25, ["--ratio=0.250000"]),
        (FlagSpec(("ratio",), FlagKind.FLOAT), 1e20, ["--ratio=100000000000000000000.000000"]),
        (FlagSpec(("ratio",), FlagKind.FLOAT), 2, ["--ratio=2.000000"]),
        (FlagSpec(("options", "o"), FlagKind.STRING_LIST), ["b", "a"], ["--options=b", "--options=a"]),
        (FlagSpec(("options", "o"), FlagKind.STRING_LIST), (), []),
    ],
)
def test_render_flag(spec: FlagSpec, value: object, expected: list[str]) -> None:
    assert render_flag(spec, value) == expected


@pytest.mark.parametrize(
    ("kind", "value"),
    [
        (FlagKind.BOOL, "true"),
        (FlagKind.STRING, 3),
        (FlagKind.INT, "5"),
        (FlagKind.INT, True),
        (FlagKind.FLOAT, "0.5"),
        (FlagKind.STRING_LIST, "a,b"),
        (FlagKind.STRING_LIST, [1, 2]),
    ],
)
def test_render_flag_rejects_mismatched_values(kind: FlagKind, value: object) -> None:
    with pytest.raises(UnsupportedFlagTypeError):
        render_flag(FlagSpec(("flag",), kind), value)


def test_render_flag_rejects_unknown_kind() -> None:
    spec = FlagSpec(("duration",), "duration")  # type: ignore[arg-type]
    with pytest.raises(UnsupportedFlagTypeError, match="duration"):
        render_flag(spec, "1s")


def test_reconstruct_follows_schema_order_not_caller_order() -> None:
    forward = _invocation(background=True, log="/l", options=["x"], buffer_size=1, free_space_ratio=0.5)
    backward = _invocation(free_space_ratio=0.5, buffer_size=1, options=["x"], log="/l", background=True)

    expected = ["--background", "--log=/l", "--options=x", "--buffer-size=1", "--free-space-ratio=0.500000"]
    assert reconstruct_flags(SCHEMA, forward) == expected
    assert reconstruct_flags(SCHEMA, backward) == expected


def test_reconstruct_skips_unset_and_false_flags() -> None:
    invocation = _invocation(background=False, buffer_size=300)
    assert reconstruct_flags(SCHEMA, invocation) == ["--buffer-size=300"]


def test_reconstruct_expands_each_list_value_in_order() -> None:
    invocation = _invocation(options=["allow_other", "ro", "allow_other"])
    assert reconstruct_flags(SCHEMA, invocation) == [
        "--options=allow_other",
        "--options=ro",
        "--options=allow_other",
    ]


def test_reconstruct_ignores_flags_outside_the_schema() -> None:
    invocation = _invocation(log="/l", unknown="x")
    assert reconstruct_flags(SCHEMA, invocation) == ["--log=/l"]


def _context(args: list[str]) -> click.Context:
    command = click.Command("mount", params=[spec.to_option() for spec in SCHEMA])
    return command.make_context("mount", args)


def test_invocation_flags_keeps_only_explicit_values() -> None:
    ctx = _context(["--log", "/l", "-o", "a", "-o", "b"])
    assert invocation_flags(ctx, SCHEMA) == {"log": "/l", "options": ["a", "b"]}


def test_invocation_flags_marks_default_values_as_set() -> None:
    ctx = _context(["--buffer-size", "300", "-d"])
    assert invocation_flags(ctx, SCHEMA) == {"background": True, "buffer-size": 300}


def test_short_alias_resolves_to_canonical_name() -> None:
    ctx = _context(["-d"])
    flags = invocation_flags(ctx, SCHEMA)
    invocation = Invocation(CommandName.MOUNT, ("/meta", "/mnt"), flags)
    assert reconstruct_flags(SCHEMA, invocation) == ["--background"]
