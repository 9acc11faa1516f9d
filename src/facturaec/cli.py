"""Command line entry points for facturaec."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Sequence

from . import __version__
from .commands import convert, detect

Handler = Callable[[Sequence[str]], int | None]


@dataclass(frozen=True)
class CommandSpec:
    """A ``facturaec`` subcommand and the handler that implements it."""

    name: str
    summary: str
    handler: Handler

    def run(self, argv: Sequence[str]) -> int:
        try:
            result = self.handler(list(argv))
        except SystemExit as exc:  # argparse exits on --help and usage errors
            return _exit_code(exc.code)
        return 0 if result is None else int(result)


def _exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    print(str(code), file=sys.stderr)
    return 1


_COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        name="detect",
        summary="Detecta el tipo de comprobante SRI de cada archivo XML.",
        handler=detect.main,
    ),
    CommandSpec(
        name="convert",
        summary="Convierte comprobantes SRI al formato canónico de facturaec.",
        handler=convert.main,
    ),
)

_BY_NAME: Mapping[str, CommandSpec] = {command.name: command for command in _COMMANDS}


def available_commands() -> Iterable[CommandSpec]:
    return _COMMANDS


def build_parser() -> argparse.ArgumentParser:
    """Return the top-level parser, which only selects the subcommand.

    Options after the command name belong to the command's own parser.
    """

    listing = "\n".join(f"  {command.name:<10}{command.summary}" for command in _COMMANDS)
    parser = argparse.ArgumentParser(
        prog="facturaec",
        description="Herramientas para comprobantes electrónicos SRI",
        epilog=f"comandos:\n{listing}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("command", choices=sorted(_BY_NAME), metavar="comando")
    return parser


def run(command: str, argv: Sequence[str] = ()) -> int:
    """Run the registered *command* with ``argv``."""

    try:
        spec = _BY_NAME[command]
    except KeyError:
        raise ValueError(f"Comando desconocido: {command}") from None
    return spec.run(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    head, rest = args[:1], args[1:]

    try:
        namespace = build_parser().parse_args(head)
    except SystemExit as exc:
        return _exit_code(exc.code)

    return run(namespace.command, rest)


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
