# enigmacli.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from debug import Debug
from server import serve
from settings import DEFAULT_SETTINGS_FILE, ConfigurationError, load_machine
from utilities import BLOCK, format_blocks

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


@dataclass(slots=True)
class Config:
    """Runtime switches for the front ends (the machine itself is set from the settings file)."""

    settings: Path = Path(DEFAULT_SETTINGS_FILE)
    block: int = BLOCK              # display block size
    host: str = "127.0.0.1"
    port: int = 8080


# ────────────────────────────────────────────────────────────────────────
#  1. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt with a three-rotor Enigma set from a JSON settings file")
    p.add_argument("-m", "--message", metavar="TEXT", help="Message to encrypt. If omitted, you are prompted for one.")
    p.add_argument("--config", metavar="FILE", default=DEFAULT_SETTINGS_FILE, help=f"Machine settings JSON. Default: {DEFAULT_SETTINGS_FILE}")
    p.add_argument("--block", type=int, default=BLOCK, help=f"Ciphertext group size. Default: {BLOCK}")
    p.add_argument("--serve", action="store_true", help="Serve POST / over HTTP instead of encrypting one message.")
    p.add_argument("--host", default="127.0.0.1", help="Bind address for --serve. Default: 127.0.0.1")
    p.add_argument("--port", type=int, default=8080, help="Port for --serve. Default: 8080")
    p.add_argument("--debug", nargs="+", metavar="COMPONENT", choices=Debug.component_names(), default=[], help="Log the given components: %(choices)s")
    p.add_argument("--log-file", metavar="FILE", help="Also write log output to FILE.")
    args = p.parse_args(argv)
    if args.block < 1:
        p.error("--block must be at least 1")
    return args


def read_message() -> str:
    try:
        return input("Enter message (all in CAPS): ")
    except EOFError:
        return ""


# ────────────────────────────────────────────────────────────────────────
#  2. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    cfg = Config(settings=Path(args.config), block=args.block, host=args.host, port=args.port)

    Debug.setup(log_to=args.log_file)
    debug.enable(*args.debug)

    try:
        machine = load_machine(cfg.settings)
    except ConfigurationError as e:
        sys.exit(f"Configuration error: {e}")
    print(f"Machine set using {cfg.settings}")

    if args.serve:
        serve(machine, cfg.host, cfg.port, block=cfg.block)
        return

    message = args.message if args.message is not None else read_message()
    print(format_blocks(machine.encrypt(message), cfg.block))


if __name__ == "__main__":
    main()
