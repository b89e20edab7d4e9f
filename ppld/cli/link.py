""" Linker driver.

Link object files and libraries into an executable or a shared library.
Object files and -l namespecs are passed to the linker in the order in
which they appear on the command line.
"""

import argparse
import sys
from .base import base_parser, out_parser, LogSetup, OnceAction
from .. import driver
from ..driver.options import options_from_args, parse_arguments
from ..driver.options import DEFAULT_TARGET_TRIPLE
from ..engine.gnu import GnuLinkEngine, GNU_LD_DEFAULT_PATH


parser = argparse.ArgumentParser(
    formatter_class=argparse.RawDescriptionHelpFormatter,
    description=__doc__,
    parents=[base_parser, out_parser],
    allow_abbrev=False,
)
parser.add_argument(
    "obj", nargs="*", help="the object files to link"
)
parser.add_argument(
    "-l",
    dest="library",
    help="Add the archive or object file specified by namespec to the list "
    "of files to link.",
    action="append",
    default=[],
    metavar="namespec",
)
parser.add_argument(
    "-L",
    dest="search_dir",
    help="Add searchdir to the list of paths that will be searched for "
    "archive libraries.",
    action="append",
    default=[],
    metavar="searchdir",
)
parser.add_argument(
    "--sysroot",
    help="Use directory as the location of the sysroot.",
    action=OnceAction,
    metavar="directory",
)
parser.add_argument(
    "--soname",
    help="Set internal name of shared library",
    action=OnceAction,
    metavar="name",
)
parser.add_argument(
    "--dynamic-linker",
    help="Set the name of the dynamic linker.",
    action=OnceAction,
    metavar="program",
)
parser.add_argument(
    "--shared", help="Create a shared library.", action="store_true",
    default=False
)
parser.add_argument(
    "--symbolic",
    "-Bsymbolic",
    help="Bind references within the shared library (default).",
    dest="symbolic",
    action="store_true",
    default=True,
)
parser.add_argument(
    "--no-symbolic",
    help="Do not bind references within the shared library.",
    dest="symbolic",
    action="store_false",
)
parser.add_argument(
    "--wrap",
    help="Use a wrap function for symbol.",
    action="append",
    default=[],
    metavar="symbol",
)
parser.add_argument(
    "--portable",
    help="Use a portable function for symbol.",
    action="append",
    default=[],
    metavar="symbol",
)
parser.add_argument(
    "--mtriple",
    "-C",
    help="Specify the target triple (default: {})".format(
        DEFAULT_TARGET_TRIPLE),
    default=DEFAULT_TARGET_TRIPLE,
    metavar="triple",
)
parser.add_argument(
    "--ld-path",
    help="The ld executable to run (default: {})".format(
        GNU_LD_DEFAULT_PATH),
    default=GNU_LD_DEFAULT_PATH,
    metavar="program",
)
parser.add_argument(
    "--static",
    help="Only use static archives when searching namespecs.",
    action="store_true",
    default=False,
)
parser.add_argument(
    "--dry-run",
    help="Print the linker command instead of running it.",
    action="store_true",
    default=False,
)


def link(args=None, engine=None):
    """ Run linker from command line """
    if args is None:
        args = sys.argv[1:]
    argv = list(args)
    args = parse_arguments(parser, argv)
    with LogSetup(args) as log_setup:
        options = options_from_args(parser, args, argv)
        if engine is None:
            engine = GnuLinkEngine(
                ld_path=args.ld_path, static=args.static,
                dry_run=args.dry_run)
        driver.run(options, engine, reporter=log_setup.reporter)


if __name__ == "__main__":
    link()
