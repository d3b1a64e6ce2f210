"""
Command-line front end.

    adfgvx encrypt --key UM --message LUCAS          -> XFFAADGAAG
    adfgvx decrypt --key-file io/key.txt             (io/encrypted.txt -> io/decrypted.txt)

With no --message/--input the file layout of the old field tool is used:
io/message.txt -> io/encrypted.txt -> io/decrypted.txt. Only the first
line of each input file is read.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .cipher import ADFGVXCipher
from .errors import ADFGVXError
from .stages.stage1_polybius import DEFAULT_SQUARE, SQUARES

logger = logging.getLogger(__name__)

EXIT_OK        = 0
EXIT_IO_ERROR  = 1
EXIT_CIPHER    = 3

DEFAULT_PATHS = {
    "encrypt": ("io/message.txt", "io/encrypted.txt"),
    "decrypt": ("io/encrypted.txt", "io/decrypted.txt"),
}


def read_line(path: str) -> str:
    """First line of `path` (or stdin for '-') without its line terminator."""
    if path == "-":
        line = sys.stdin.readline()
    else:
        with open(path, "r", encoding="latin-1") as f:
            line = f.readline()
    return line.rstrip("\r\n")


def write_text(path: str, text: str):
    if path == "-":
        print(text)
        return
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="latin-1") as f:
        f.write(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adfgvx",
        description="ADFGVX field cipher: Polybius substitution + keyed columnar transposition.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    key_group = common.add_mutually_exclusive_group(required=True)
    key_group.add_argument("-k", "--key", help="Transposition key.")
    key_group.add_argument("--key-file", help="File whose first line is the key.")
    text_group = common.add_mutually_exclusive_group()
    text_group.add_argument("-m", "--message", help="Text to process (instead of --input).")
    text_group.add_argument("-i", "--input", help="Input file ('-' for stdin).")
    common.add_argument("-o", "--output", help="Output file ('-' for stdout).")
    common.add_argument(
        "--square",
        choices=sorted(SQUARES),
        default=os.environ.get("ADFGVX_SQUARE", DEFAULT_SQUARE),
        help="Polybius square (default: %(default)s, or $ADFGVX_SQUARE).",
    )
    common.add_argument("--strict", action="store_true",
                        help="Fail on unsupported characters instead of dropping them.")
    common.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("encrypt", parents=[common], help="Plaintext -> ADFGVX ciphertext.")
    sub.add_parser("decrypt", parents=[common], help="ADFGVX ciphertext -> plaintext.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.square not in SQUARES:
        parser.error(f"ADFGVX_SQUARE={args.square!r} is not one of {sorted(SQUARES)}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    default_in, default_out = DEFAULT_PATHS[args.command]
    if args.message is not None:
        output = args.output or "-"
    else:
        output = args.output or default_out

    try:
        key = args.key if args.key is not None else read_line(args.key_file)
        text = args.message if args.message is not None else read_line(args.input or default_in)
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return EXIT_IO_ERROR

    try:
        cipher = ADFGVXCipher(key, square=args.square, strict=args.strict)
        if args.command == "encrypt":
            result = cipher.encrypt(text)
        else:
            result = cipher.decrypt(text)
    except ADFGVXError as e:
        logger.error("%s failed: %s", args.command.capitalize(), e)
        return EXIT_CIPHER

    try:
        write_text(output, result)
    except OSError as e:
        logger.error("Cannot write output: %s", e)
        return EXIT_IO_ERROR

    logger.info("%s: %d chars in, %d chars out -> %s",
                args.command, len(text), len(result), output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
