""" Link engines.

An engine receives the link configuration, the output path and the
ordered inputs, and performs the actual link.
"""

from .base import LinkEngine, EngineError
from .gnu import GnuLinkEngine
from .recording import RecordingEngine

__all__ = ['LinkEngine', 'EngineError', 'GnuLinkEngine', 'RecordingEngine']
