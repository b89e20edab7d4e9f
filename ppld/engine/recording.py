""" An engine which only records what it is asked to do. """

from .base import LinkEngine, EngineError


class RecordingEngine(LinkEngine):
    """ Link engine which keeps a log of all calls.

    Use ``failures`` to make certain calls fail. It maps an operation name
    to either ``True`` (always fail) or a set of arguments for which the
    operation fails, for example ``{'add_object': {'bad.o'}}``.
    """
    def __init__(self, failures=None):
        self.failures = failures or {}
        self.calls = []
        self.config = None
        self.output = None
        self.inputs = []
        self.linked = False

    def __repr__(self):
        return 'RecordingEngine({} calls)'.format(len(self.calls))

    def _record(self, operation, argument=None):
        self.calls.append((operation, argument))
        failure = self.failures.get(operation)
        if failure is True or (failure and argument in failure):
            raise EngineError('{} failed'.format(operation))

    def configure(self, config):
        self._record('configure', config)
        self.config = config

    def set_output(self, path):
        self._record('set_output', path)
        self.output = path

    def add_object(self, path):
        self._record('add_object', path)
        self.inputs.append(path)

    def add_namespec(self, name):
        self._record('add_namespec', name)
        self.inputs.append('-l' + name)

    def link(self):
        self._record('link')
        self.linked = True

    @property
    def operations(self):
        """ The names of the operations called so far """
        return [operation for operation, _ in self.calls]
