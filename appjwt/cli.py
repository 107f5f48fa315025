"""Command-line entry point: print a signed application JWT."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from appjwt.algorithms import DEFAULT_REGISTRY
from appjwt.config import Settings
from appjwt.durations import format_duration, parse_duration
from appjwt.exceptions import AppJWTError
from appjwt.issuer import TokenIssuer
from appjwt.keys import read_key_file
from appjwt.models import DEFAULT_DURATION, IssuanceParameters

logger = logging.getLogger(__name__)


def _duration(text: str):
    try:
        return parse_duration(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="appjwt",
        description="Generate a signed JWT that authenticates as an application (e.g. a GitHub App)",
    )
    p.add_argument(
        "--iss",
        type=int,
        default=settings.issuer,
        help="required: the application (issuer) ID, e.g. the GitHub App ID",
    )
    p.add_argument("--iat", type=int, default=None, help="the unixtime this JWT was issued at (defaults to now)")
    p.add_argument("--exp", type=int, default=None, help="the unixtime this JWT will expire")
    p.add_argument(
        "--dur",
        type=_duration,
        default=None,
        help=f"how long this JWT is valid before it expires, e.g. 5m or 1h30m (default {format_duration(DEFAULT_DURATION)})",
    )
    p.add_argument(
        "--alg",
        default=settings.algorithm,
        help=f"the signing algorithm (default {settings.algorithm}; one of {', '.join(DEFAULT_REGISTRY.names())})",
    )
    p.add_argument("--pem", default=settings.pem_path, help="required: the pem file used for signing JWTs")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return p


def _fail(parser: argparse.ArgumentParser, error: AppJWTError) -> int:
    message = " ".join(error.message.split())
    print(f"{parser.prog}: error: {message}", file=sys.stderr)
    parser.print_help(sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = Settings.from_env()
    except AppJWTError as e:
        return _fail(build_parser(Settings()), e)

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.getLevelName(settings.log_level)
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        # A missing issuer is reported before anything about the key file.
        material = read_key_file(args.pem) if args.iss else b""
        params = IssuanceParameters(
            issuer_id=args.iss,
            key_material=material,
            issued_at=args.iat,
            expires_at=args.exp,
            duration=args.dur,
            algorithm=args.alg,
            key_password=settings.key_password,
        )
        signed = TokenIssuer().issue(params)
    except AppJWTError as e:
        logger.debug(f"Issuance failed: {e!r}")
        return _fail(parser, e)

    print(signed.token)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
