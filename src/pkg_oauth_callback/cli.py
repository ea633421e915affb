# src/pkg_oauth_callback/cli.py

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from .domain.entities import ErrorCallback, TokenCallback
from .env import settings_from_env
from .integrations.common.callback_factory import create_callback_dependencies

EXIT_TOKEN = 0
EXIT_ERROR = 1
EXIT_NO_MATCH = 2


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Decode an OAuth2/OIDC implicit-flow redirect fragment",
    )

    parser.add_argument(
        "value",
        help="Fragment (with or without the leading '#'), or a full URL with --url.",
    )
    parser.add_argument(
        "--url",
        action="store_true",
        help="Treat VALUE as a full redirect URL and decode its fragment.",
    )
    parser.add_argument(
        "--strict-prefix",
        action="store_true",
        help="Require 'access_token' / 'error' to be a whole key "
             "(defaults from env OAUTH_CALLBACK_STRICT_PREFIX).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log routing decisions to stderr.",
    )

    return parser.parse_args(args=argv)


def _run(args: argparse.Namespace) -> tuple[int, dict[str, Any]]:
    settings = settings_from_env()
    if args.strict_prefix:
        settings.strict_prefix = True

    callbacks = create_callback_dependencies(settings)
    if args.url:
        result = callbacks.classify_url(args.value)
    else:
        result = callbacks.classify(args.value)

    if isinstance(result, TokenCallback):
        return EXIT_TOKEN, {"kind": "token", "callback": result.to_dict()}
    if isinstance(result, ErrorCallback):
        return EXIT_ERROR, {"kind": "error", "callback": result.to_dict()}
    return EXIT_NO_MATCH, {"kind": "no_match", "callback": None}


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    code, summary = _run(args)
    json.dump({"ok": True, **summary}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return code


if __name__ == "__main__":
    sys.exit(main())
