""" Link engine which delegates to a GNU style ``ld`` executable.

All inputs are resolved to concrete files before ``ld`` is started, so
that a missing object or library is reported for exactly that input.
"""

import logging
import os
import shlex
import subprocess
import sys
from ..driver.config import OutputKind, SYSTEM_SEARCH_DIRS
from .base import LinkEngine, EngineError


GNU_LD_DEFAULT_PATH = 'ld'


def quote_command(command):
    """ Format a command so that it can be pasted into a shell """
    return ' '.join(map(shlex.quote, command))


class GnuLinkEngine(LinkEngine):
    """ Drive a GNU ld compatible linker.

    Args:
        ld_path: the linker executable to run.
        static: only consider static archives when resolving namespecs.
        dry_run: print the linker command instead of running it.
    """

    logger = logging.getLogger('gnu-ld')

    def __init__(
            self, ld_path=GNU_LD_DEFAULT_PATH, static=False, dry_run=False,
            stdout=None):
        self.ld_path = ld_path
        self.static = static
        self.dry_run = dry_run
        self.stdout = stdout
        self.config = None
        self.output = None
        self.inputs = []

    def configure(self, config):
        self.config = config
        if config.portables:
            self.logger.debug(
                'Portable symbols are not supported by ld: %s',
                ', '.join(config.portables))

    def set_output(self, path):
        directory = os.path.dirname(os.path.abspath(path))
        if not os.path.isdir(directory):
            raise EngineError('No such directory {}'.format(directory))
        if not os.access(directory, os.W_OK):
            raise EngineError('Permission denied')
        if os.path.isdir(path):
            raise EngineError('Is a directory')
        self.output = path

    def add_object(self, path):
        if not os.path.exists(path):
            raise EngineError('No such file or directory')
        if not os.path.isfile(path):
            raise EngineError('Not a regular file')
        if not os.access(path, os.R_OK):
            raise EngineError('Permission denied')
        self.inputs.append(path)

    def add_namespec(self, name):
        filename = self.find_library(name)
        self.logger.debug('Namespec %s resolved to %s', name, filename)
        self.inputs.append(filename)

    def library_names(self, name):
        """ Get the candidate filenames for the given namespec """
        if name.startswith(':'):
            return [name[1:]]
        if self.static:
            return ['lib{}.a'.format(name)]
        return ['lib{}.so'.format(name), 'lib{}.a'.format(name)]

    def search_dirs(self):
        """ Get the search directories with the sysroot applied """
        if self.config is None:
            return []
        sysroot = self.config.sysroot
        search_dirs = self.config.search_dirs
        # The system directories are always the last entries
        first_system = len(search_dirs) - len(SYSTEM_SEARCH_DIRS)
        directories = []
        for index, directory in enumerate(search_dirs):
            if directory.startswith('='):
                directory = directory[1:]
                if sysroot:
                    directory = sysroot + directory
            elif sysroot and index >= first_system:
                directory = sysroot + directory
            directories.append(directory)
        return directories

    def find_library(self, name):
        """ Search the library given by namespec in the search dirs """
        candidates = self.library_names(name)
        for directory in self.search_dirs():
            for candidate in candidates:
                filename = os.path.join(directory, candidate)
                if os.path.isfile(filename):
                    return filename
        raise EngineError('Cannot find {}'.format(' or '.join(candidates)))

    def command(self):
        """ Compose the ld command line """
        config = self.config
        command = [self.ld_path]
        if config.sysroot:
            command.append('--sysroot={}'.format(config.sysroot))
        if config.output_kind is OutputKind.SHARED_LIBRARY:
            command.append('-shared')
            command.extend(('-soname', config.soname))
            if config.symbolic:
                command.append('-Bsymbolic')
        if config.dynamic_linker:
            command.extend(('--dynamic-linker', config.dynamic_linker))
        for symbol in config.wraps:
            command.append('--wrap={}'.format(symbol))
        command.extend('-L{}'.format(d) for d in self.search_dirs())
        command.extend(self.inputs)
        command.extend(('-o', self.output))
        return command

    def link(self):
        if self.config is None or self.output is None:
            raise EngineError('Engine is not configured')
        command = self.command()
        self.logger.debug('Running %s', quote_command(command))

        if self.dry_run:
            print(quote_command(command), file=self.stdout or sys.stdout)
            return

        try:
            result = subprocess.run(
                command, stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                universal_newlines=True)
        except OSError as ex:
            raise EngineError('Cannot run {}: {}'.format(self.ld_path, ex))

        if result.stdout:
            self.logger.info(result.stdout.strip())
        if result.returncode != 0:
            raise EngineError(
                result.stderr.strip() or
                '{} exited with code {}'.format(
                    self.ld_path, result.returncode))
