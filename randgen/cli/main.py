# Copyright (c) Animica.
# SPDX-License-Identifier: MIT
"""
randgen.cli.main
----------------

Print random values from the command line.

Examples:
  # 32 secure random bytes as hex (default) or base64:
  randgen bytes 32
  randgen bytes 32 --format base64

  # Roll five dice with the fast, non-cryptographic source:
  randgen int 1 6 --count 5 --fast

  # Negative bounds need "--" so they are not parsed as options:
  randgen int -- -100 100

  # Tokens:
  randgen string 24
  randgen string 8 --hex
  randgen string 6 --alphabet 0123456789

  # Effective configuration:
  randgen config

Environment:
  RANDGEN_MAX_REDRAWS / RANDGEN_FLOAT_BITS / RANDGEN_SECURE_DEVICE / RANDGEN_METRICS
  (see randgen.config.RandConfig.from_env)

Exit codes:
  0 success, 1 entropy source unavailable, 2 invalid arguments.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional

import typer

from ..config import RandConfig
from ..constants import BASE64_ALPHABET, HEX_ALPHABET
from ..errors import DomainError, EntropyUnavailable, InvalidArgumentError
from ..generator import Rand
from ..utils.bytes import to_base64, to_hex

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="randgen",
    help="Print uniformly distributed random values (secure by default).",
    no_args_is_help=True,
    add_completion=False,
)


class ByteFormat(str, Enum):
    hex = "hex"
    base64 = "base64"


# -----------------------
# Helpers
# -----------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _rand(ctx: typer.Context) -> Rand:
    rand = ctx.obj
    if not isinstance(rand, Rand):  # pragma: no cover - callback always sets it
        rand = Rand(RandConfig.from_env())
        ctx.obj = rand
    return rand


def _emit(produce: Callable[[], Any], count: int, fmt: Callable[[Any], str] = str) -> None:
    for _ in range(count):
        try:
            value = produce()
        except (InvalidArgumentError, DomainError) as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=2)
        except EntropyUnavailable as e:
            logger.error("entropy unavailable: %s", e)
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(fmt(value))


_COUNT = typer.Option(1, "--count", "-n", min=1, help="How many values to print.")
_FAST = typer.Option(
    False, "--fast", help="Use the fast NON-cryptographic source for this call."
)


# -----------------------
# CLI
# -----------------------


@app.callback()
def _root(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="JSON or YAML config file (default: RANDGEN_* env)."
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
) -> None:
    _configure_logging(log_level)
    try:
        cfg = RandConfig.from_file(str(config)) if config else RandConfig.from_env()
    except (OSError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config")
    rand = Rand(cfg)
    ctx.call_on_close(rand.close)
    ctx.obj = rand


@app.command("bytes")
def cmd_bytes(
    ctx: typer.Context,
    length: int = typer.Argument(..., help="Number of bytes."),
    fmt: ByteFormat = typer.Option(ByteFormat.hex, "--format", "-f", help="Output encoding."),
    count: int = _COUNT,
    fast: bool = _FAST,
) -> None:
    """Print LENGTH random bytes, hex or base64 encoded."""
    rand = _rand(ctx)
    encode = to_hex if fmt is ByteFormat.hex else to_base64
    _emit(lambda: rand.get_bytes(length, secure=not fast), count, encode)


@app.command("int")
def cmd_int(
    ctx: typer.Context,
    min_value: int = typer.Argument(..., metavar="MIN", help="Lower bound (inclusive)."),
    max_value: int = typer.Argument(..., metavar="MAX", help="Upper bound (inclusive)."),
    count: int = _COUNT,
    fast: bool = _FAST,
) -> None:
    """Print integers uniformly distributed over [MIN, MAX]."""
    rand = _rand(ctx)
    _emit(lambda: rand.get_integer(min_value, max_value, secure=not fast), count)


@app.command("float")
def cmd_float(ctx: typer.Context, count: int = _COUNT, fast: bool = _FAST) -> None:
    """Print floats in [0, 1]."""
    rand = _rand(ctx)
    _emit(lambda: rand.get_float(secure=not fast), count, repr)


@app.command("bool")
def cmd_bool(ctx: typer.Context, count: int = _COUNT, fast: bool = _FAST) -> None:
    """Print true or false with equal probability."""
    rand = _rand(ctx)
    _emit(lambda: rand.get_boolean(secure=not fast), count, lambda v: "true" if v else "false")


@app.command("string")
def cmd_string(
    ctx: typer.Context,
    length: int = typer.Argument(..., help="Number of characters."),
    alphabet: Optional[str] = typer.Option(
        None, "--alphabet", "-a", help="Characters to draw from (default: base64)."
    ),
    hex_: bool = typer.Option(False, "--hex", help="Shortcut for --alphabet 0123456789abcdef."),
    count: int = _COUNT,
    fast: bool = _FAST,
) -> None:
    """Print strings of LENGTH characters drawn from an alphabet."""
    if hex_ and alphabet is not None:
        raise typer.BadParameter("use either --hex or --alphabet", param_hint="--hex")
    chars = HEX_ALPHABET if hex_ else (BASE64_ALPHABET if alphabet is None else alphabet)
    rand = _rand(ctx)
    _emit(lambda: rand.get_string(length, chars, secure=not fast), count)


@app.command("config")
def cmd_config(ctx: typer.Context) -> None:
    """Print the effective configuration as JSON."""
    typer.echo(_rand(ctx).config.to_json())


def main() -> None:  # pragma: no cover
    app(prog_name="randgen")


if __name__ == "__main__":  # pragma: no cover
    main()
