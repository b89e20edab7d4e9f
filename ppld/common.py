"""
   Error handling routines
   Diagnostic utils
"""


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class LinkDriverError(Exception):
    """ Base of all errors which abort a link invocation """
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __repr__(self):
        return '"{}"'.format(self.msg)


class UsageError(LinkDriverError):
    """ The command line is malformed """
    pass


class ConfigurationError(LinkDriverError):
    """ The link configuration could not be created or was rejected """
    pass


class OutputResolutionError(LinkDriverError):
    """ No output path could be determined """
    pass


class FileOpenError(LinkDriverError):
    """ The output file cannot be opened or created """
    def __init__(self, msg, filename):
        super().__init__(msg)
        self.filename = filename


class InputResolutionError(LinkDriverError):
    """ A single object file or namespec cannot be registered """
    def __init__(self, msg, item):
        super().__init__(msg)
        self.item = item


class LinkEngineError(LinkDriverError):
    """ The link itself failed """
    pass
