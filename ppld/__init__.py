""" A linker driver implemented in pure Python.

It turns linker style command lines into a link configuration and an
ordered list of inputs, and hands both to a link engine.

Example usage:

>>> from ppld.driver.plan import ObjectFile, NameSpec, plan_inputs
>>> plan_inputs([ObjectFile(1, 'a.o')], [NameSpec(2, 'c')])
[ObjectFile(position=1, path='a.o'), NameSpec(position=2, name='c')]

"""

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))
