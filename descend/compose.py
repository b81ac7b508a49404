# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Descent query compiler.

A descent is a list of match steps, each of which narrows the result of the previous step by one level,
using the shallow matchers `find_child_by_tag` (for the 'tag' selector) or `find_child_by_attr` (for any other attribute).

A step is either a scalar match, `(attr, value)`,
or a branch, `(attr, (combinator, [candidate, ...]))`.
A branch evaluates the previous step once, matches each candidate against that shared result,
and passes the per-candidate results positionally to the combinator.
The combinator alone decides the outcome; see `descend.combinators`.

For example, `[('class', 'a'), ('tag', (first_present, ['h1', 'h2'])), ('class', 'c')]` compiles to the equivalent of:

  find_child_by_attr('class', 'c',
    (lambda _2: first_present(find_child_by_tag('h1', _2), find_child_by_tag('h2', _2)))(
      find_child_by_attr('class', 'a', root)))

Step shapes are not validated; a malformed branch fails when the query is evaluated.
'''

from typing import Any, Callable, Iterable, NamedTuple, Optional, Sequence, Union

from .exceptions import NoMatchError
from .io import env_flag, errL
from .match import find_child_by_attr, find_child_by_tag
from .string import repr_lim


class ScalarStep(NamedTuple):
  'Match the child whose `attr` (or tag, if `attr` is "tag") equals `value`.'
  attr:str
  value:str


class BranchStep(NamedTuple):
  '''
  `form` is a `(combinator, candidates)` pair.
  Match each of `candidates` against the same parent, then call `combinator` with the results.
  `combinator` must accept at least `len(candidates)` positional arguments; a mismatch is a caller error.
  `candidates` must be a sequence, not a one-shot iterator, because it is iterated on every evaluation.
  The form is unpacked only when the step is evaluated or rendered.
  '''
  attr:str
  form:tuple[Callable[...,Any],Sequence[str]]

  @property
  def combinator(self) -> Callable[...,Any]: return self.form[0]

  @property
  def candidates(self) -> Sequence[str]: return self.form[1]


MatchStep = Union[ScalarStep,BranchStep]
MatchStepLax = Union[MatchStep,tuple[str,Any]]

_Query = Callable[[Any],Any]
_Matcher = Callable[[str,Any],Any]


def mk_step(step:MatchStepLax) -> MatchStep:
  'Convert an `(attr, match)` pair to a typed step. A tuple match is a `(combinator, candidates)` branch form.'
  if isinstance(step, (ScalarStep, BranchStep)): return step
  attr, match = step
  if isinstance(match, tuple): return BranchStep(attr, match)
  return ScalarStep(attr, match)


def step_matcher(attr:str) -> _Matcher:
  'Return the shallow matcher for the selector `attr`, as a function of (value, node).'
  if attr == 'tag': return find_child_by_tag
  return lambda value, node: find_child_by_attr(attr, value, node)


def fmt_step(step:MatchStep) -> str:
  if isinstance(step, ScalarStep): return f'{step.attr}={step.value!r}'
  combinator, candidates = step.form
  return f'{step.attr}={_fn_name(combinator)}{list(candidates)!r}'


class Descent:
  '''
  A compiled descent query. Call it with a root node to evaluate it.
  The result is that of the last step, or None; an empty descent returns the root unchanged.
  '''

  __slots__ = ('steps', 'trace', '_query')

  def __init__(self, steps:Iterable[MatchStepLax], trace:Optional[bool]=None) -> None:
    self.steps = tuple(mk_step(s) for s in steps)
    self.trace = env_flag('DESCEND_TRACE') if trace is None else trace
    query:_Query = _identity
    for step in self.steps:
      query = _compile_step(step, query, self.trace)
    self._query = query


  def __repr__(self) -> str: return f'Descent({self.expand()})'


  def __call__(self, root:Any) -> Any:
    return self._query(root)


  def eval(self, root_fn:Callable[[],Any]) -> Any:
    'Evaluate the root expression `root_fn` exactly once, then evaluate the descent against its result.'
    return self._query(root_fn())


  def require(self, root:Any) -> Any:
    'Evaluate the descent; raise NoMatchError if the result is None.'
    res = self._query(root)
    if res is None: raise NoMatchError(root, self.expand())
    return res


  def expand(self, root_expr='root') -> str:
    'Render the composed expression that this descent evaluates.'
    expr = root_expr
    for i, step in enumerate(self.steps, 1):
      fn = 'find_child_by_tag(' if step.attr == 'tag' else f'find_child_by_attr({step.attr!r}, '
      if isinstance(step, ScalarStep):
        expr = f'{fn}{step.value!r}, {expr})'
      else:
        combinator, candidates = step.form
        var = f'_{i}'
        calls = ', '.join(f'{fn}{c!r}, {var})' for c in candidates)
        expr = f'(lambda {var}: {_fn_name(combinator)}({calls}))({expr})'
    return expr


def compile_descent(steps:Iterable[MatchStepLax], trace:Optional[bool]=None) -> Descent:
  '''
  Compile `steps` into a single composed query.
  If `trace` is None, tracing is enabled by the DESCEND_TRACE environment variable.
  '''
  return Descent(steps, trace=trace)


def descend(root:Any, *steps:MatchStepLax, trace:Optional[bool]=None) -> Any:
  'Compile `steps` and evaluate the resulting descent against `root`.'
  return Descent(steps, trace=trace)(root)


def _compile_step(step:MatchStep, inner:_Query, trace:bool) -> _Query:
  'Return a query that applies `step` to the result of `inner`.'
  matcher = step_matcher(step.attr)

  if isinstance(step, ScalarStep):
    value = step.value
    def query(root:Any) -> Any:
      return matcher(value, inner(root))

  else:
    form = step.form
    def query(root:Any) -> Any:
      shared = inner(root) # Evaluated once for all candidates.
      combinator, candidates = form
      return combinator(*[matcher(c, shared) for c in candidates])

  if not trace: return query

  def traced_query(root:Any) -> Any:
    res = query(root)
    errL('descend: ', fmt_step(step), ' -> ', repr_lim(res))
    return res

  return traced_query


def _identity(root:Any) -> Any: return root


def _fn_name(fn:Any) -> str:
  return getattr(fn, '__qualname__', None) or repr(fn)
