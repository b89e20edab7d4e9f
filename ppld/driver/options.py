""" The option model.

Turns the parsed command line into a single :class:`LinkOptions` value.
Object files and namespecs are tagged with the position they had on the
command line, so that their relative order can be restored later.
"""

import logging
import platform
from ..common import UsageError
from .plan import ObjectFile, NameSpec


logger = logging.getLogger('options')

DEFAULT_TARGET_TRIPLE = '{}-unknown-{}'.format(
    platform.machine() or 'unknown', platform.system().lower() or 'unknown')

LIBRARY_FLAG = '-l'


class LinkOptions:
    """ All values given on the command line for a single link """
    def __init__(
            self, objects, namespecs=(), output='', soname='', sysroot='',
            dynamic_linker='', wraps=(), portables=(), search_dirs=(),
            shared=False, symbolic=True,
            target_triple=DEFAULT_TARGET_TRIPLE):
        self.objects = list(objects)
        self.namespecs = list(namespecs)
        self.output = output
        self.soname = soname
        self.sysroot = sysroot
        self.dynamic_linker = dynamic_linker
        self.wraps = list(wraps)
        self.portables = list(portables)
        self.search_dirs = list(search_dirs)
        self.shared = shared
        self.symbolic = symbolic
        self.target_triple = target_triple

    def __repr__(self):
        return 'LinkOptions({} objects, {} namespecs)'.format(
            len(self.objects), len(self.namespecs))


def value_flags(parser):
    """ Get the option strings of the parser which consume a value """
    flags = set()
    for action in parser._actions:
        if action.option_strings and action.nargs != 0:
            flags.update(action.option_strings)
    return flags


def assign_positions(argv, flags):
    """ Scan the raw arguments for the positions of the link inputs.

    Positions are 1-based indices into argv. Returns a tuple with the
    positions of the object files and the positions of the namespecs.
    """
    objects = []
    libraries = []
    args = iter(enumerate(argv, start=1))
    for position, arg in args:
        if arg == '--':
            objects.extend(p for p, _ in args)
            break
        elif arg.startswith('--'):
            if '=' not in arg and arg in flags:
                next(args, None)
        elif arg.startswith('-') and arg != '-':
            if arg in flags:
                if arg == LIBRARY_FLAG:
                    libraries.append(position)
                next(args, None)
            elif arg.startswith(LIBRARY_FLAG):
                libraries.append(position)
        else:
            objects.append(position)
    return objects, libraries


def parse_arguments(parser, argv):
    """ Parse argv, all arguments after ``--`` are object files.

    The object files are optional for the parser, so that they can all
    come after ``--``. At least one is required in total.
    """
    if '--' in argv:
        index = argv.index('--')
        head, tail = argv[:index], argv[index + 1:]
    else:
        head, tail = argv, []
    args = parser.parse_intermixed_args(head)
    args.obj = list(args.obj or []) + tail
    if not args.obj:
        parser.error('the following arguments are required: obj')
    return args


def options_from_args(parser, args, argv):
    """ Create link options from the parse result of parser on argv """
    object_positions, library_positions = assign_positions(
        argv, value_flags(parser))

    if len(object_positions) != len(args.obj):
        raise UsageError(
            'Cannot determine positions of input files {}'.format(
                ', '.join(args.obj)))
    if len(library_positions) != len(args.library):
        raise UsageError(
            'Cannot determine positions of namespecs {}'.format(
                ', '.join(args.library)))

    objects = [
        ObjectFile(position, path)
        for position, path in zip(object_positions, args.obj)]
    namespecs = [
        NameSpec(position, name)
        for position, name in zip(library_positions, args.library)]
    logger.debug('Objects: %s', objects)
    logger.debug('Namespecs: %s', namespecs)

    return LinkOptions(
        objects,
        namespecs=namespecs,
        output=args.output or '',
        soname=args.soname or '',
        sysroot=args.sysroot or '',
        dynamic_linker=args.dynamic_linker or '',
        wraps=args.wrap,
        portables=args.portable,
        search_dirs=args.search_dir,
        shared=args.shared,
        symbolic=args.symbolic,
        target_triple=args.mtriple,
    )
