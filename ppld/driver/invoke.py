""" Sequence the calls into a link engine.

Every step must succeed before the next one is taken. The first failure
is raised as one of the driver errors, and the engine is not asked to
link anything after a failure.
"""

import logging
from ..common import ConfigurationError, FileOpenError
from ..common import InputResolutionError, LinkEngineError
from ..engine.base import EngineError
from .plan import ObjectFile, NameSpec


logger = logging.getLogger('invoke')


def invoke_link(engine, config, output_filename, plan):
    """ Configure the engine, register output and inputs, and link """
    try:
        engine.configure(config)
    except EngineError as ex:
        raise ConfigurationError(
            'Failed to configure the linker! (detail: {})'.format(ex.msg))

    prepare_input_output(engine, output_filename, plan)

    logger.info('Linking %s', output_filename)
    try:
        engine.link()
    except EngineError as ex:
        raise LinkEngineError(
            'Failed to linking! (detail: {})'.format(ex.msg))


def prepare_input_output(engine, output_filename, plan):
    # The output must be set up before the inputs
    try:
        engine.set_output(output_filename)
    except EngineError as ex:
        raise FileOpenError(
            'Failed to open the output file! (detail: {}: {})'.format(
                output_filename, ex.msg), output_filename)

    for item in plan:
        if isinstance(item, ObjectFile):
            logger.debug('Adding object %s', item.path)
            try:
                engine.add_object(item.path)
            except EngineError as ex:
                raise InputResolutionError(
                    'Failed to open the input file! (detail: {}: {})'.format(
                        item.path, ex.msg), item)
        elif isinstance(item, NameSpec):
            logger.debug('Adding namespec %s', item.name)
            try:
                engine.add_namespec(item.name)
            except EngineError as ex:
                raise InputResolutionError(
                    'Failed to open the namespec! (detail: {}: {})'.format(
                        item.name, ex.msg), item)
        else:  # pragma: no cover
            raise NotImplementedError(str(item))
