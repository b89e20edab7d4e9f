""" The argument to plan compiler.

The driver turns parsed options into a link configuration and an ordered
list of inputs, and sequences the calls into a link engine.
"""

import logging
from ..common import UsageError
from .config import build_configuration
from .invoke import invoke_link
from .output import determine_output_filename
from .plan import plan_inputs


logger = logging.getLogger('driver')


def run(options, engine, reporter=None):
    """ Perform one link attempt.

    Args:
        options: the parsed :class:`ppld.driver.options.LinkOptions`.
        engine: the :class:`ppld.engine.LinkEngine` to drive.
        reporter: optional report generator.

    Raises a subclass of :class:`ppld.common.LinkDriverError` on the
    first failure.
    """
    if not options.objects:
        raise UsageError('No input files')

    output_filename = determine_output_filename(
        options.output, [o.path for o in options.objects])
    logger.debug('Output file is %s', output_filename)

    config = build_configuration(options, output_filename)
    logger.debug('Configuration: %s', config)

    plan = plan_inputs(options.objects, options.namespecs)
    logger.debug('Planned %s inputs', len(plan))

    if reporter:
        reporter.dump_configuration(config)
        reporter.dump_plan(plan)

    invoke_link(engine, config, output_filename, plan)
    return output_filename
