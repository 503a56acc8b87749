"""icu-encode command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from icuencode import APP_NAME, __version__
from icuencode.parsers import MessageFileError
from icuencode.parsers.message_file import (
    MessageFileData, dumps_messages, parse_message_file, save_message_file,
)
from icuencode.services.encoder import transform
from icuencode.services.settings import Settings

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Rewrite go-i18n message files into ICU MessageFormat.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    enc = sub.add_parser("encode", help="Convert a message file in place")
    enc.add_argument("-f", "--file", required=True, type=Path,
                     help="go-i18n message file (JSON or YAML)")
    enc.add_argument("-o", "--output", type=Path,
                     help="Write to this file instead of rewriting --file")
    enc.add_argument("--dry-run", action="store_true",
                     help="Print the result instead of writing it")
    enc.add_argument("--plural-argument", metavar="NAME",
                     help="Name of the plural count argument (default: PluralCount)")
    enc.add_argument("--no-sort-keys", dest="sort_keys", action="store_false", default=None,
                     help="Keep keys in file order")
    enc.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def encode_file(path: str | Path, output: Optional[str | Path] = None,
                settings: Optional[Settings] = None,
                dry_run: bool = False) -> MessageFileData:
    """Convert one message file and return the encoded data.

    The file is only written once every message has been encoded, so a
    decode or variant error leaves it untouched.
    """
    settings = settings or Settings.get()
    data = parse_message_file(path)
    log.info("Encoding %s (%d messages)", data.path, data.total_count)

    encoded = transform(data.messages, settings["plural_argument"])
    skipped = data.total_count - len(encoded)
    if skipped:
        log.info("Skipped %d unsupported values", skipped)

    result = MessageFileData(path=data.path, messages=encoded, format=data.format)
    if not dry_run:
        save_message_file(result, output, **settings.output_options)
        log.info("Wrote %d messages to %s", len(encoded), output or data.path)
    return result


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # before Settings.get(), which may log warnings
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s: %(message)s")

    settings = Settings.get()
    settings.update(plural_argument=args.plural_argument, sort_keys=args.sort_keys)
    if not args.verbose:
        logging.getLogger().setLevel(settings["log_level"])

    try:
        result = encode_file(args.file, args.output, settings, dry_run=args.dry_run)
    except (MessageFileError, OSError) as exc:
        print(f"{APP_NAME}: error: {exc}", file=sys.stderr)
        return 1

    if args.dry_run:
        sys.stdout.write(dumps_messages(result.messages, result.format, **settings.output_options))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
