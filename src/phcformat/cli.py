"""phc CLI: encode, decode and check PHC strings."""

import argparse
import json
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError


def _parse_param(text: str) -> tuple[str, str]:
    """argparse type for --param NAME=VALUE."""
    name, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{text}'")
    return name, value


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main():
    """Main CLI entry point for phc commands."""
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        phc_version = get_version("phc-format")
    except PackageNotFoundError:
        phc_version = "dev"

    parser = argparse.ArgumentParser(
        prog="phc",
        description="Encode, decode and check PHC password-hash strings"
    )
    parser.add_argument("--version", action="version", version=f"phc {phc_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details to stderr."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # decode command
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a PHC string and print its fields as JSON",
        parents=[parent_parser]
    )
    decode_parser.add_argument(
        "phc",
        help="PHC string, e.g. '$argon2id$v=19$m=4096,t=3,p=1$<salt>$<hash>'"
    )

    # encode command
    encode_parser = subparsers.add_parser(
        "encode",
        help="Encode fields into a PHC string",
        parents=[parent_parser]
    )
    encode_parser.add_argument(
        "--id",
        dest="record_id",
        required=True,
        help="Algorithm identifier"
    )
    encode_parser.add_argument(
        "--version",
        dest="record_version",
        type=int,
        default=None,
        help="Algorithm version (emitted as v=<N>)"
    )
    encode_parser.add_argument(
        "--param",
        dest="params",
        type=_parse_param,
        action="append",
        default=None,
        metavar="NAME=VALUE",
        help="Parameter (repeatable, order preserved)"
    )
    encode_parser.add_argument(
        "--salt",
        default=None,
        help="Salt as base64 (padding optional)"
    )
    encode_parser.add_argument(
        "--hash",
        default=None,
        help="Hash as base64 (padding optional); ignored without --salt"
    )

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Check whether a string is a well-formed PHC string",
        parents=[parent_parser]
    )
    check_parser.add_argument(
        "phc",
        help="PHC string to check"
    )

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    _configure_logging(args.verbose)

    from .kernel.grammar import FormatViolation

    if args.command == "decode":
        try:
            from .api import decode

            record = decode(args.phc)
            if not args.quiet:
                print(json.dumps(record.to_json_dict(), indent=2))
        except FormatViolation as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    elif args.command == "encode":
        try:
            from .api import encode
            from .kernel.b64 import decode_b64

            fields = {"id": args.record_id}
            if args.record_version is not None:
                fields["version"] = args.record_version
            if args.params:
                fields["params"] = dict(args.params)
            if args.salt is not None:
                fields["salt"] = decode_b64(args.salt, "salt")
            if args.hash is not None:
                fields["hash"] = decode_b64(args.hash, "hash")

            phc = encode(fields)
            if not args.quiet:
                print(phc)
        except FormatViolation as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    elif args.command == "check":
        from .api import check

        result = check(args.phc)
        if not args.quiet:
            print(f"Status: {'OK' if result.ok else 'FAILED'}")
            if result.ok:
                print(f"Id: {result.id}")
            else:
                print(f"Code: {result.code.value}")
                print(f"Message: {result.message}")
        if not result.ok:
            sys.exit(1)


if __name__ == "__main__":
    main()
