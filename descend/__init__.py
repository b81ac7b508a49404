# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`descend` is a small query engine over labeled trees:
shallow and deep matcher primitives, and a compiler for multi-level descent queries.
'''

from .combinators import all_present, first_present, random_present
from .compose import BranchStep, compile_descent, descend, Descent, MatchStep, mk_step, ScalarStep
from .exceptions import NoMatchError
from .match import (collect_children_by_tag, find_child_by_attr, find_child_by_class, find_child_by_tag,
  find_descendant_by_attr, find_descendant_by_attr_match, find_descendant_by_class, find_descendant_by_class_match,
  find_descendant_by_id, find_descendant_by_id_match, find_descendant_by_tag)
from .node import attrs_of, children_of, intern_tag, is_node, Node, tag_of
