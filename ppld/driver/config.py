""" The link configuration and its builder """

import enum
import logging
from collections import namedtuple
from ..common import ConfigurationError


logger = logging.getLogger('config')

# Searched after all user supplied directories:
SYSTEM_SEARCH_DIRS = ('/lib', '/usr/lib')


class OutputKind(enum.Enum):
    EXECUTABLE = 'executable'
    SHARED_LIBRARY = 'shared-library'


LinkConfiguration = namedtuple(
    'LinkConfiguration', [
        'target_triple', 'soname', 'sysroot', 'dynamic_linker', 'wraps',
        'portables', 'search_dirs', 'output_kind', 'symbolic'])


def build_configuration(options, output_filename):
    """ Create the link configuration from the given options.

    Args:
        options: the :class:`ppld.driver.options.LinkOptions`.
        output_filename: the resolved output path, which is the soname
            when no soname was given.

    Returns:
        An immutable :class:`LinkConfiguration`.
    """
    try:
        # 1. soname
        if options.soname:
            soname = options.soname
        else:
            soname = output_filename

        # 2. sysroot and 3. dynamic linker
        sysroot = options.sysroot or None
        dynamic_linker = options.dynamic_linker or None

        # 4. and 5. symbol sets, duplicates are left to the engine
        wraps = tuple(options.wraps)
        portables = tuple(options.portables)

        # 6. search directories
        search_dirs = tuple(options.search_dirs) + SYSTEM_SEARCH_DIRS

        # 7. output kind
        if options.shared:
            output_kind = OutputKind.SHARED_LIBRARY
        else:
            output_kind = OutputKind.EXECUTABLE

        config = LinkConfiguration(
            target_triple=options.target_triple,
            soname=str(soname),
            sysroot=sysroot,
            dynamic_linker=dynamic_linker,
            wraps=wraps,
            portables=portables,
            search_dirs=search_dirs,
            output_kind=output_kind,
            symbolic=bool(options.symbolic),  # 8.
        )
    except (MemoryError, TypeError, ValueError) as ex:
        raise ConfigurationError(
            'Failed to create the linker configuration! '
            '(detail: {})'.format(ex))

    logger.debug(
        'Configured %s link for %s', output_kind.value, config.target_triple)
    return config
