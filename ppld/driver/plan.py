""" Ordering of link inputs.

Object files and namespecs are collected in two separate lists, but their
relative order on the command line matters: an archive only resolves the
symbols which are undefined at the moment it is visited. The planner
merges both lists back into command line order.
"""

from collections import namedtuple


ObjectFile = namedtuple('ObjectFile', ['position', 'path'])
NameSpec = namedtuple('NameSpec', ['position', 'name'])

# Position 0 marks an exhausted list, real positions start at 1.
NO_POSITION = 0


def head_position(items, index):
    if index < len(items):
        return items[index].position
    return NO_POSITION


def plan_inputs(objects, namespecs):
    """ Merge object files and namespecs into a single ordered plan.

    Both lists must be ordered by position already. The merge is stable
    and compares the heads of both lists; an exhausted list never wins.
    """
    plan = []
    file_index = lib_index = 0
    while True:
        file_pos = head_position(objects, file_index)
        lib_pos = head_position(namespecs, lib_index)

        if file_pos != NO_POSITION and (
                lib_pos == NO_POSITION or file_pos < lib_pos):
            plan.append(objects[file_index])
            file_index += 1
        elif lib_pos != NO_POSITION and (
                file_pos == NO_POSITION or lib_pos < file_pos):
            plan.append(namespecs[lib_index])
            lib_index += 1
        else:
            break
    return plan
