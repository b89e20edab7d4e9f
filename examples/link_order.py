"""Example to show how the link inputs are ordered.

Object files and namespecs are parsed into separate lists, but the
engine receives them in command line order.
"""

from ppld.cli.link import link
from ppld.engine import RecordingEngine


engine = RecordingEngine()
link(['crt1.o', '-lc', 'main.o', '-lm', '-o', 'app'], engine=engine)

for operation, argument in engine.calls:
    print(operation, argument)
