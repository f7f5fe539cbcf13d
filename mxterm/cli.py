"""Command line entry: emit an inline-image escape sequence."""

from __future__ import annotations

import argparse
import base64
import json
import os
import sys
from typing import Any, Mapping, Optional, Sequence

APC_BEGIN = "\x1b_begin;{};{}\x1b\\"
APC_END = "\x1b_end;{}\x1b\\"
APC_INSERT = "\x1b_insert;{};{}\x1b\\"

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def apc_params(params: Mapping[str, Any]) -> str:
    """Encode APC parameters as compact JSON with sorted keys."""
    text = json.dumps(params, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    for char, escaped in _JSON_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def image_sequence(path: str, env: Optional[Mapping[str, str]] = None) -> str:
    """Build the APC sequence that inserts an image.

    Over SSH the file is embedded as base64, otherwise its name is sent.
    """
    env = os.environ if env is None else env
    if "SSH_TTY" in env:
        with open(path, "rb") as handle:
            encoded = base64.b64encode(handle.read()).decode("ascii")
        return APC_INSERT.format("image", apc_params({"base64": encoded}))
    return APC_INSERT.format("image", apc_params({"filename": path}))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and print the requested escape sequence."""
    parser = argparse.ArgumentParser(prog="mxterm")
    parser.add_argument("-image", "--image", default="", dest="image")
    args = parser.parse_args(argv)

    if args.image:
        try:
            sequence = image_sequence(args.image)
        except OSError as err:
            sys.stderr.write(f"{err}\n")
            return 1
        sys.stdout.write(sequence)
        sys.stdout.flush()
    return 0