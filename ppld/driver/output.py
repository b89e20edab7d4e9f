""" Determine the output filename of a link """

import logging
import os
from ..common import OutputResolutionError


logger = logging.getLogger('output')

DEFAULT_OUTPUT_PATH = 'a.out'


def determine_output_filename(output, inputs):
    """ Get the output path from the user value or from the inputs.

    When no output was given, a single input yields ``a.out`` next to
    that input. Multiple inputs yield ``a.out`` in the current directory.
    """
    if output:
        return output

    if len(inputs) > 1:
        logger.warning('Use %s for output file!', DEFAULT_OUTPUT_PATH)
        return DEFAULT_OUTPUT_PATH

    input_path = inputs[0]
    try:
        output_path = os.path.abspath(input_path)
    except OSError as ex:
        raise OutputResolutionError(
            'Failed to determine the absolute path of `{}`! '
            '(detail: {})'.format(input_path, ex))

    directory = os.path.dirname(output_path)
    return os.path.join(directory, DEFAULT_OUTPUT_PATH)
