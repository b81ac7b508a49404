# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from descend.combinators import all_present, first_present
from descend.compose import *
from descend.exceptions import NoMatchError
from descend.node import Node
from utest import utest, utest_call, utest_exc, utest_val


# Scalar descent.

a = Node(tag='a')
x = Node(Node(a, tag='div'), tag='x', cl='link')
doc = Node(x, tag='body')
no_link = Node(Node(Node(Node(tag='a'), tag='div'), tag='x'), tag='body')

link_steps = [('class', 'link'), ('tag', 'div'), ('tag', 'a')]

utest(a, descend, doc, *link_steps)
utest(None, descend, no_link, *link_steps)
utest(None, descend, x, *link_steps) # Shallow steps never match the root itself.
utest(doc, descend, doc) # No steps.
utest(None, descend, None, *link_steps)

link = compile_descent(link_steps)
utest(a, link, doc)
utest(a, link.require, doc)
utest_exc(NoMatchError, link.require, no_link)
utest_val((ScalarStep('class', 'link'), ScalarStep('tag', 'div'), ScalarStep('tag', 'a')), link.steps)
utest_val("find_child_by_tag('a', find_child_by_tag('div', find_child_by_attr('class', 'link', root)))", link.expand())
utest_val("find_child_by_attr('class', 'link', doc)", compile_descent([('class', 'link')]).expand('doc'))


# Branch descent.

def mk_heading_doc(heading_tag:str) -> tuple[Node,Node]:
  target = Node(tag='p', cl='c')
  return Node(Node(Node(target, tag=heading_tag), tag='section', cl='a'), tag='body'), target

branch_steps = [('class', 'a'), ('tag', (first_present, ['h1', 'h2'])), ('class', 'c')]

h1_doc, h1_target = mk_heading_doc('h1')
h2_doc, h2_target = mk_heading_doc('h2')
h3_doc, _ = mk_heading_doc('h3')

utest(h1_target, descend, h1_doc, *branch_steps)
utest(h2_target, descend, h2_doc, *branch_steps)
utest(None, descend, h3_doc, *branch_steps)

utest_val(
  "find_child_by_attr('class', 'c', "
  "(lambda _2: first_present(find_child_by_tag('h1', _2), find_child_by_tag('h2', _2)))("
  "find_child_by_attr('class', 'a', root)))",
  compile_descent(branch_steps).expand())

heading_step = mk_step(('tag', (first_present, ['h1', 'h2'])))
utest_val(BranchStep('tag', (first_present, ['h1', 'h2'])), heading_step)
utest_val(first_present, heading_step.combinator)
utest_val(['h1', 'h2'], heading_step.candidates)


@utest_call
def test_branch_reevaluation() -> None:
  descent = compile_descent(branch_steps)
  utest_val(h1_target, descent(h1_doc))
  utest_val(h2_target, descent(h2_doc)) # Candidates are iterated anew for each evaluation.
  utest_val(h1_target, descent(h1_doc))


@utest_call
def test_branch_results_in_candidate_order() -> None:
  b1 = Node(tag='b', id='1')
  b2 = Node(tag='b', id='2')
  root = Node(b2, b1, tag='r')
  utest_val([b1, b2], descend(root, ('id', (all_present, ['1', '3', '2']))))
  utest_val([], descend(root, ('id', (all_present, ['3']))))
  # A combinator receives the matcher results, not the candidates.
  utest_val((None, b2), descend(root, ('id', (lambda *results: results, ['0', '2']))))


@utest_call
def test_branch_evaluates_prefix_once() -> None:
  count = 0
  def root_expr() -> Node:
    nonlocal count
    count += 1
    return h2_doc

  descent = compile_descent(branch_steps)
  utest_val(h2_target, descent.eval(root_expr))
  utest_val(1, count, 'root expression evaluations')

  # Every step upstream of a branch is evaluated once, regardless of the number of candidates.
  calls:list[object] = []
  def counting_first(*results:object) -> object:
    calls.append(results)
    return first_present(*results)
  descent = compile_descent([
    ('class', 'a'),
    ('tag', (counting_first, ['h1', 'h2', 'h3'])),
    ('class', (counting_first, ['b', 'c']))])
  utest_val(h2_target, descent(h2_doc))
  utest_val(2, len(calls), 'combinator calls')
  utest_val((None, h2_target), calls[1], 'second branch results')


@utest_call
def test_malformed_branch_fails_at_evaluation() -> None:
  descent = compile_descent([('tag', ('not callable', ['h1']))]) # Compiles without validation.
  utest_exc(TypeError, descent, h1_doc)
  descent = compile_descent([('tag', (lambda a: a, ['h1', 'h2']))]) # Arity mismatch.
  utest_exc(TypeError, descent, h1_doc)
  # Branch forms of the wrong length also compile, and fail only when evaluated.
  descent = compile_descent([('tag', (first_present, 'h1', 'h2'))])
  utest_exc(ValueError, descent, h1_doc)
  descent = compile_descent([('tag', (first_present,))], trace=True)
  utest_exc(ValueError, descent, h1_doc)
  descent = compile_descent([('tag', ())])
  utest_exc(ValueError, descent, h1_doc)


@utest_call
def test_trace() -> None:
  from contextlib import redirect_stderr
  from io import StringIO
  err = StringIO()
  with redirect_stderr(err):
    descend(doc, *link_steps, trace=True)
  utest_val([
    "descend: class='link' -> <x: class='link' div>",
    "descend: tag='div' -> <div: a>",
    "descend: tag='a' -> <a:>"],
    err.getvalue().splitlines())

  err = StringIO()
  with redirect_stderr(err):
    descend(h3_doc, *branch_steps, trace=True)
  utest_val([
    "descend: class='a' -> <section: class='a' h3>",
    "descend: tag=first_present['h1', 'h2'] -> None",
    "descend: class='c' -> None"],
    err.getvalue().splitlines())

  err = StringIO()
  with redirect_stderr(err):
    descend(doc, *link_steps, trace=False)
  utest_val('', err.getvalue())


@utest_call
def test_trace_env() -> None:
  from os import environ
  prev = environ.pop('DESCEND_TRACE', None)
  try:
    utest_val(False, compile_descent(link_steps).trace, 'unset')
    environ['DESCEND_TRACE'] = '1'
    utest_val(True, compile_descent(link_steps).trace, 'DESCEND_TRACE=1')
    utest_val(False, compile_descent(link_steps, trace=False).trace, 'explicit trace=False')
    environ['DESCEND_TRACE'] = '0'
    utest_val(False, compile_descent(link_steps).trace, 'DESCEND_TRACE=0')
  finally:
    if prev is None: environ.pop('DESCEND_TRACE', None)
    else: environ['DESCEND_TRACE'] = prev
