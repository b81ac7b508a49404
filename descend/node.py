# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`node` provides the `Node` class, a generic labeled tree for HTML, SVG, XML, and similar document formats.
Trees are produced by an external parser and converted with `Node.from_raw` or `Node.from_etree`.
'''

import re
from itertools import chain
from sys import intern
from typing import Any, cast, Dict, Iterable, Iterator, List, Match, Type, TypeVar, Union
from xml.etree.ElementTree import Comment, Element, ProcessingInstruction

from .string import repr_lim


_Node = TypeVar('_Node', bound='Node')

Tag = str # Always interned; see `intern_tag`.
NodeAttrs = Dict[str,Any]
NodeChild = Union[str,'Node']
NodeChildren = List[NodeChild]
NodeChildLax = Union[NodeChild,int,float]
NodeChildOrChildrenLax = Union[NodeChildLax,Iterable[NodeChildLax]]


def intern_tag(name:str) -> Tag:
  '''
  Return the canonical tag object for `name`.
  All nodes hold canonical tags, so that tags can be compared by identity.
  '''
  return intern(name)


class Node:
  '''
  A tree element with a tag, an attribute mapping, and an ordered list of children.
  Unlike xml.etree.ElementTree.Element, child nodes and text are interleaved in the `_` list.

  Nodes do not hold a reference to their parent; trees are acyclic.
  '''

  __slots__ = ('tag', 'attrs', '_')

  tag:Tag
  attrs:NodeAttrs
  _:NodeChildren

  def __init__(self,
   *_node_positional_children:NodeChildLax, # Additional children can be passed as positional arguments.
   tag:str,
   _:NodeChildOrChildrenLax=(),
   cl:str|None=None,
   attrs:NodeAttrs|None=None,
   **kw_attrs:Any # Additional attrs can be passed as keyword arguments. These take precedence over keys in `attrs`.
   ) -> None:
    '''
    Note: the initializer uses the `attrs` dict and `_` list references if provided.
    This avoids excess copying when converting parser output.
    Keyword attribute names have underscores replaced with hyphens, e.g. `data_x` sets `data-x`.
    The `cl` argument is shorthand for the `class` attribute.
    Numeric attribute values and children are converted to strings.
    '''
    if not tag: raise ValueError('Node requires a nonempty tag')
    self.tag = intern_tag(tag)

    if attrs is None: attrs = {} # Important: use existing dict ref if provided.
    for k, v in kw_attrs.items():
      attrs[k.replace('_', '-')] = v
    if cl is not None and cl != attrs.setdefault('class', cl):
      raise ValueError(f'conflicting class values: {attrs["class"]!r}; {cl!r}')
    for k, v in attrs.items():
      if isinstance(v, str): continue
      if isinstance(v, _node_child_classes_lax_converted): attrs[k] = str(v)
      else: raise TypeError(f'Invalid attr value type: {k!r}: {type(v)!r}; value: {repr_lim(v)!r}')
    self.attrs = attrs

    if isinstance(_, node_child_classes_lax): # Single child argument; wrap it in a list.
      children:list = [_]
    elif isinstance(_, list):
      children = _
    else:
      children = list(_)
    children.extend(_node_positional_children)
    for i, c in enumerate(children):
      if isinstance(c, node_child_classes): continue
      if isinstance(c, _node_child_classes_lax_converted): children[i] = str(c)
      else: raise TypeError(f'Invalid child type: {type(c)!r}; value: {repr_lim(c)!r}')
    self._ = cast(NodeChildren, children)


  def __repr__(self) -> str:
    try: # `__repr__` may get called during exception handling during initialization, when attributes are not yet set.
      words = ''.join(chain(
        (attr_summary(k, v, text_limit=32) for k, v in self.attrs.items()),
        (child_summary(c, text_limit=32) for c in self._)))
      return f'<{self.tag}:{words}>'
    except AttributeError:
      return super().__repr__()


  def __getitem__(self, key:str) -> Any: return self.attrs[key]

  def get(self, key:str, default=None) -> Any: return self.attrs.get(key, default)

  def __iter__(self) -> Iterator[NodeChild]: return iter(self._)


  @classmethod
  def from_raw(cls:Type[_Node], raw:Dict) -> _Node:
    'Create a Node tree from a raw data dictionary of the form `{"tag": str, "attrs": dict, "_": list}`.'
    tag = raw['tag']
    attrs = raw.get('attrs', {})
    raw_children = raw.get('_', [])
    if not isinstance(tag, str): raise ValueError(f'Node tag must be `str`; received: {tag!r}')
    if not isinstance(attrs, dict): raise ValueError(f'Node attrs must be `dict`; received: {attrs!r}')
    for k, v in attrs.items():
      if not isinstance(k, str): raise ValueError(f'Node attr key must be `str`; received: {k!r}')
      if not isinstance(v, node_attr_classes_lax):
        raise ValueError(f'Node attr value must be `str` or a number; received: {k!r}: {v!r}')
    children:NodeChildren = []
    for c in raw_children:
      if isinstance(c, node_child_classes): children.append(c)
      elif isinstance(c, dict): children.append(cls.from_raw(c))
      else: raise ValueError(f'Node child must be `str`, `Node`, or `dict`; received: {c!r}')
    return cls(tag=tag, attrs=dict(attrs), _=children)


  @classmethod
  def from_etree(cls:Type[_Node], el:Element) -> _Node:
    '''
    Create a Node tree from a standard library element tree.
    Element text and tails become text children.
    Comments become nodes with a '!COMMENT' tag, and processing instructions nodes with a '!PI' tag.
    '''
    tag = el.tag
    # `Comment` and `ProcessingInstruction` are factory functions used as tags; convert them to strings.
    if tag is Comment: tag = '!COMMENT'
    elif tag is ProcessingInstruction: tag = '!PI'
    children:NodeChildren = []
    text = el.text
    if text: children.append(text)
    for child in el:
      children.append(cls.from_etree(child))
      text = child.tail
      if text: children.append(text)
    return cls(tag=cast(str, tag), attrs=dict(el.attrib), _=children)


  def child_nodes(self) -> Iterator['Node']:
    'Yield child nodes, skipping text.'
    return (c for c in self._ if isinstance(c, Node))


  @property
  def texts(self) -> Iterator[str]:
    'Yield the text of the tree sequentially.'
    for c in self._:
      if isinstance(c, str): yield c
      else: yield from c.texts


  @property
  def text(self) -> str:
    'Return the text of the tree joined as a single string.'
    return ''.join(self.texts)


  @property
  def cl(self) -> str:
    '`cl` is shortand for the `class` attribute.'
    return str(self.attrs.get('class', ''))


  @property
  def id(self) -> str: return str(self.attrs.get('id', ''))


  def summarize(self, levels=1, indent=0) -> str:
    'Return a multiline summary of the tree, descending `levels` deep.'
    nl_indent = '\n' + '  ' * indent
    return ''.join(self._summarize(levels, nl_indent))

  def _summarize(self, levels:int, nl_indent:str) -> Iterator[str]:
    if levels == 0:
      yield repr(self)
      return
    attr_words = ''.join(attr_summary(k, v, text_limit=32) for k, v in self.attrs.items())
    nl_indent1 = nl_indent + '  '
    yield f'<{self.tag}:{attr_words}'
    for c in self._:
      yield nl_indent1
      if isinstance(c, Node):
        yield from c._summarize(levels-1, nl_indent1)
      else:
        yield repr(c)
    yield '>'


node_child_classes = (str, Node)
_node_child_classes_lax_converted = (int, float)
node_child_classes_lax = node_child_classes + _node_child_classes_lax_converted
node_attr_classes_lax = (str,) + _node_child_classes_lax_converted


# Accessors for the external node interface.

def is_node(obj:Any) -> bool: return isinstance(obj, Node)

def tag_of(node:Node) -> Tag: return node.tag

def attrs_of(node:Node) -> NodeAttrs: return node.attrs

def children_of(node:Node) -> NodeChildren: return node._


def attr_summary(key:str, val:Any, *, text_limit:int) -> str:
  ks = key if _word_re.fullmatch(key) else repr(key)
  return f' {ks}={repr_lim(val, text_limit)}'


def child_summary(child:NodeChild, text_limit:int) -> str:
  if isinstance(child, Node):
    text = html_ws_re.sub(newline_or_space_for_ws, child.text).strip()
    if text: return f' {child.tag}:{repr_lim(text, limit=text_limit)}'
    return ' ' + child.tag
  text = html_ws_re.sub(newline_or_space_for_ws, child)
  return ' ' + repr_lim(text, limit=text_limit)


def newline_or_space_for_ws(match:Match) -> str:
  'Collapse whitespace to either a newline or single space.'
  return '\n' if '\n' in match[0] else ' '


# HTML defines ASCII whitespace as "U+0009 TAB, U+000A LF, U+000C FF, U+000D CR, or U+0020 SPACE."
html_ws_re = re.compile(r'[\t\n\f\r ]+')

_word_re = re.compile(r'[-\w]+')
