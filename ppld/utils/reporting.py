"""
    To create a report of what happened during a link, this file
    implements several reporting types.

    Reports can be written to plain text, or into the void.
"""

import abc
import traceback
from .. import __version__


class ReportGenerator(metaclass=abc.ABCMeta):
    """ Implement all these function to create a custom reporting generator """

    def header(self):
        pass

    def footer(self):
        pass

    @abc.abstractmethod
    def heading(self, level, title):
        raise NotImplementedError()

    @abc.abstractmethod
    def dump_raw_text(self, text):
        raise NotImplementedError()

    @abc.abstractmethod
    def dump_exception(self, einfo):
        """ List the given exception in report """
        raise NotImplementedError()

    def dump_configuration(self, config):
        pass

    def dump_plan(self, plan):
        pass

    def dump_driver_error(self, driver_error):
        self.heading(3, 'Error')
        self.dump_raw_text(driver_error.msg)


class DummyReportGenerator(ReportGenerator):
    """ Report generator which reports into the void """
    def heading(self, level, title):
        pass

    def dump_exception(self, einfo):
        pass

    def dump_raw_text(self, text):
        pass


class TextReportGenerator(ReportGenerator):
    def __init__(self, dump_file):
        self.dump_file = dump_file

    def print(self, *args, end='\n'):
        """ Convenience helper for printing to dumpfile """
        print(*args, end=end, file=self.dump_file)

    def header(self):
        self.print('Report of ppld {}'.format(__version__))

    def heading(self, level, title):
        self.print()
        self.print(title)
        markers = {1: '=', 2: '-'}
        marker = markers[level] if level in markers else '~'
        self.print(marker * len(title))
        self.print()

    def dump_raw_text(self, text):
        self.print(text)

    def dump_exception(self, einfo):
        self.print(''.join(traceback.format_exception(*einfo)))

    def dump_configuration(self, config):
        """ Write the fields of the link configuration """
        self.heading(2, 'Configuration')
        for name, value in zip(config._fields, config):
            self.print('{:>16}: {}'.format(name, value))

    def dump_plan(self, plan):
        """ Write the link inputs in the order they are linked """
        self.heading(2, 'Inputs')
        for item in plan:
            self.print('{:>4} {}'.format(item.position, item))
