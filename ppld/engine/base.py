import abc


class EngineError(Exception):
    """ Raised by an engine when one of its operations fails """
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg


class LinkEngine(metaclass=abc.ABCMeta):
    """ Interface of a link engine.

    The driver calls :meth:`configure` first, then :meth:`set_output`,
    then :meth:`add_object` and :meth:`add_namespec` in command line
    order, and finally :meth:`link`. Each method returns nothing on
    success and raises :class:`EngineError` on failure.
    """

    @abc.abstractmethod
    def configure(self, config):
        """ Accept the :class:`ppld.driver.config.LinkConfiguration` """
        raise NotImplementedError()

    @abc.abstractmethod
    def set_output(self, path):
        """ Prepare the output file """
        raise NotImplementedError()

    @abc.abstractmethod
    def add_object(self, path):
        """ Register an object file as input """
        raise NotImplementedError()

    @abc.abstractmethod
    def add_namespec(self, name):
        """ Register a library by its namespec """
        raise NotImplementedError()

    @abc.abstractmethod
    def link(self):
        """ Perform the link """
        raise NotImplementedError()
