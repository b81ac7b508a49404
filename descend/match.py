# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Matcher primitives for picking and finding nodes.

Shallow matchers (`collect_children_*`, `find_child_*`) examine only the direct children of the node argument, never the node itself.
A node argument that is not a `Node` (e.g. None or text) is treated as having no children,
so shallow matchers can be chained without checking intermediate results.

Deep matchers (`find_descendant_*`) perform a pre-order search that tests the node argument itself first,
then its descendants left to right, returning the first match.
The node argument must be a `Node`.

Tags are compared by identity; attribute values are compared after trimming the stored value.
All matchers return None when nothing matches.
'''

from re import Pattern
from typing import Optional

from .node import intern_tag, Node
from .string import matches, trim


# Shallow.

def collect_children_by_tag(tag:str, node:Optional[Node]) -> list[Node]:
  'Return all direct children of `node` with tag `tag`, in order.'
  if not isinstance(node, Node): return []
  tag = intern_tag(tag)
  return [c for c in node._ if isinstance(c, Node) and c.tag is tag]


def find_child_by_tag(tag:str, node:Optional[Node]) -> Optional[Node]:
  'Return the first direct child of `node` with tag `tag`.'
  if not isinstance(node, Node): return None
  tag = intern_tag(tag)
  for c in node._:
    if isinstance(c, Node) and c.tag is tag: return c
  return None


def find_child_by_attr(attr_name:str, match_value:str, node:Optional[Node]) -> Optional[Node]:
  'Return the first direct child of `node` whose trimmed `attr_name` value equals `match_value`.'
  if not isinstance(node, Node): return None
  for c in node._:
    if not isinstance(c, Node): continue
    val = c.attrs.get(attr_name)
    if val is not None and trim(val) == match_value: return c
  return None


def find_child_by_class(match_value:str, node:Optional[Node]) -> Optional[Node]:
  return find_child_by_attr('class', match_value, node)


# Deep.

def find_descendant_by_tag(tag:str, node:Node) -> Optional[Node]:
  'Return `node` or its first descendant (pre-order) with tag `tag`.'
  return _find_descendant_by_tag(intern_tag(tag), node)

def _find_descendant_by_tag(tag:str, node:Node) -> Optional[Node]:
  if node.tag is tag: return node
  for c in node._:
    if isinstance(c, Node):
      found = _find_descendant_by_tag(tag, c)
      if found is not None: return found
  return None


def find_descendant_by_attr(attr_name:str, match_value:str, node:Node) -> Optional[Node]:
  'Return `node` or its first descendant (pre-order) whose trimmed `attr_name` value equals `match_value`.'
  val = node.attrs.get(attr_name)
  if val is not None and trim(val) == match_value: return node
  for c in node._:
    if isinstance(c, Node):
      found = find_descendant_by_attr(attr_name, match_value, c)
      if found is not None: return found
  return None


def find_descendant_by_attr_match(attr_name:str, pattern:str|Pattern, node:Node) -> Optional[Node]:
  '''
  Return `node` or its first descendant (pre-order) whose `attr_name` value is matched by the regex `pattern`.
  The value is not trimmed, and the pattern may match anywhere in it.
  '''
  val = node.attrs.get(attr_name)
  if val is not None and matches(pattern, val): return node
  for c in node._:
    if isinstance(c, Node):
      found = find_descendant_by_attr_match(attr_name, pattern, c)
      if found is not None: return found
  return None


def find_descendant_by_class(match_value:str, node:Node) -> Optional[Node]:
  return find_descendant_by_attr('class', match_value, node)

def find_descendant_by_class_match(pattern:str|Pattern, node:Node) -> Optional[Node]:
  return find_descendant_by_attr_match('class', pattern, node)

def find_descendant_by_id(match_value:str, node:Node) -> Optional[Node]:
  return find_descendant_by_attr('id', match_value, node)

def find_descendant_by_id_match(pattern:str|Pattern, node:Node) -> Optional[Node]:
  return find_descendant_by_attr_match('id', pattern, node)
