import argparse
import logging
import sys
from pathlib import Path

from . import AUTHOR, VERSION_STR
from .error import Error, InitError, InitResult
from .glif import GlyphSpec, write_glif
from .log import LOG_ENV_VAR, level_from_name, resolve_level, setup_logging
from .ufo import BundleSpec, init_ufo

log = logging.getLogger(__package__)

PROG = "MFEKinit"


def glif_main(args) -> InitResult:
    spec = GlyphSpec(
        name=args.name,
        encoding=args.encoding,
        width=args.width,
        height=args.height,
    )
    return write_glif(spec, args.outfile)


def ufo_main(args) -> InitResult:
    return init_ufo(BundleSpec(Path(args.out), args.delete_if_exists))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG, description="Initialize empty UFO fonts and .glif files.", epilog=f"Written by {AUTHOR}"
    )
    parser.add_argument("--version", "-V", action="version", version="%(prog)s {}".format(VERSION_STR))
    parser.add_argument(
        "--log-level",
        "-l",
        type=level_from_name,
        metavar="LEVEL",
        help=f"debug, info, warn, error or critical (default: ${LOG_ENV_VAR}, else info)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    glif = subparsers.add_parser(
        "glif", aliases=["GLIF"], help="Initialize an empty .glif file", description="Initialize an empty .glif file"
    )
    glif.add_argument("--name", "-n", metavar="GLYPHNAME", default="glyph", help="Name of the glyph")
    glif.add_argument("--encoding", "-e", metavar="ENCODING", help="Unicode encoding of the glyph")
    glif.add_argument("--width", "-w", metavar="WIDTH", default="0", help="Width of the glyph")
    glif.add_argument(
        "--height",
        "-H",
        metavar="HEIGHT",
        help="Height of the glyph (note: you probably don't want to set this, it's used for vertical "
        "kerning e.g. for CJK, not to define ascender height)",
    )
    glif.add_argument("outfile", metavar="OUTFILE", nargs="?", help="Output filename (default: standard output)")
    glif.set_defaults(func=glif_main)

    ufo = subparsers.add_parser(
        "ufo",
        aliases=["UFO"],
        help="Initialize an empty .ufo font",
        description="Initialize an empty .ufo font",
    )
    ufo.add_argument("out", metavar="OUT", help="Output .ufo font")
    ufo.add_argument(
        "--delete-if-exists",
        "-D",
        action="store_true",
        help="Delete existing UFO font if exists (by default, UFO is moved out of the way)",
    )
    ufo.set_defaults(func=ufo_main)

    return parser


def main(args=None) -> int:
    parser = build_parser()
    opts = parser.parse_args(args)

    level, rejected = resolve_level(opts.log_level)
    setup_logging(level)
    if rejected is not None:
        log.warning("Ignoring unknown log level %s=%r, using info", LOG_ENV_VAR, rejected)
    log.debug("%s v%s", PROG, VERSION_STR)

    if opts.command is None:
        parser.print_help(sys.stderr)
        res = Error(InitError.NoCommand)
    else:
        res = opts.func(opts)

    if isinstance(res, Error):
        log.error(res.message)

    return res.exit_code


if __name__ == "__main__":
    sys.exit(main())
