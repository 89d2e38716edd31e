"""Tests for chain predicates and their combinators."""

import enum
import sys

import pytest

from memexplorer import (
    ACCEPT_ALL,
    AtMostOncePredicate,
    Chain,
    ChainPredicate,
    Hop,
    and_,
    not_,
    not_shared_state,
    object_predicate,
    or_,
)
from memexplorer.testing import Node


class Color(enum.Enum):
    RED = 1


def _counting(result, calls):
    def predicate(chain):
        calls.append(chain)
        return result
    return predicate


class TestCombinators:
    """Test and/or/not composition and short-circuiting."""

    def test_and_short_circuits_on_rejection(self):
        calls = []
        predicate = and_(lambda chain: False, _counting(True, calls))

        assert predicate(Chain.root(object())) is False
        assert calls == []

    def test_and_evaluates_all_when_accepting(self):
        calls = []
        predicate = ChainPredicate(lambda chain: True) & _counting(True, calls)

        assert predicate(Chain.root(object())) is True
        assert len(calls) == 1

    def test_or_short_circuits_on_acceptance(self):
        calls = []
        predicate = or_(lambda chain: True, _counting(False, calls))

        assert predicate(Chain.root(object())) is True
        assert calls == []

    def test_or_operator(self):
        predicate = ChainPredicate(lambda chain: False) | (lambda chain: True)
        assert predicate(Chain.root(object())) is True

    def test_left_plain_callable_operators(self):
        calls = []
        predicate = (lambda chain: False) & ChainPredicate(_counting(True, calls))
        assert predicate(Chain.root(object())) is False
        assert calls == []

    def test_not(self):
        chain = Chain.root(object())
        assert not_(ACCEPT_ALL)(chain) is False
        assert (~ACCEPT_ALL)(chain) is False
        assert ACCEPT_ALL.negate().negate()(chain) is True

    def test_results_coerced_to_bool(self):
        predicate = ChainPredicate(lambda chain: chain.value)
        assert predicate(Chain.root([1])) is True
        assert predicate(Chain.root([])) is False

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            and_(ACCEPT_ALL, 42)

    def test_empty_combinators(self):
        chain = Chain.root(object())
        assert and_()(chain) is True
        assert or_()(chain) is False


class TestAtMostOncePredicate:
    """Test identity-based single acceptance."""

    def test_accepts_each_identity_once(self):
        predicate = AtMostOncePredicate()
        obj = object()

        assert predicate(Chain.root(obj)) is True
        assert predicate(Chain.root([]).extend(Hop.index(0), obj)) is False
        assert predicate.has_seen(obj)
        assert len(predicate) == 1

    def test_identity_not_equality(self):
        predicate = AtMostOncePredicate()
        first, second = [1, 2], [1, 2]

        assert predicate(Chain.root(first)) is True
        assert predicate(Chain.root(second)) is True

    def test_rejection_does_not_record(self):
        """Objects rejected before this term is reached stay unseen."""
        once = AtMostOncePredicate()
        policy = and_(lambda chain: False, once)
        obj = object()

        assert policy(Chain.root(obj)) is False
        assert not once.has_seen(obj)

    def test_instances_are_independent(self):
        obj = object()
        assert AtMostOncePredicate()(Chain.root(obj))
        assert AtMostOncePredicate()(Chain.root(obj))


class TestNotSharedState:
    """Test exclusion of process-wide shared values."""

    @pytest.mark.parametrize("value", [None, True, False, Ellipsis, NotImplemented])
    def test_builtin_singletons_excluded(self, value):
        assert not_shared_state(Chain.root([]).extend(Hop.index(0), value)) is False

    def test_classes_and_modules_excluded(self):
        root = Chain.root([])
        assert not_shared_state(root.extend(Hop.index(0), int)) is False
        assert not_shared_state(root.extend(Hop.index(1), sys)) is False

    def test_enum_member_accepted_but_internals_excluded(self):
        member = Chain.root([]).extend(Hop.index(0), Color.RED)
        assert not_shared_state(member) is True
        assert not_shared_state(member.extend(Hop.field('_value_'), 1)) is False

    def test_ordinary_values_accepted(self):
        root = Chain.root({'a': 1})
        assert not_shared_state(root) is True
        assert not_shared_state(root.extend(Hop.value('a'), 'text')) is True

    def test_attribute_names_excluded(self):
        node = Node('n')
        table = Chain.root(node).extend(Hop.namespace(), node.__dict__)
        assert not_shared_state(table) is True
        assert not_shared_state(table.extend(Hop.key('name'), 'name')) is False
        assert not_shared_state(table.extend(Hop.value('name'), 'n')) is True
        # Keys of ordinary dictionaries are data
        plain = Chain.root({'name': 1})
        assert not_shared_state(plain.extend(Hop.key('name'), 'name')) is True


class TestObjectPredicate:
    """Test adaptation of plain object predicates."""

    def test_sees_terminal_object(self):
        seen = []
        predicate = object_predicate(lambda obj: seen.append(obj) or True)
        target = object()

        assert predicate(Chain.root([]).extend(Hop.index(0), target))
        assert seen == [target]

    def test_not_callable(self):
        with pytest.raises(TypeError):
            object_predicate("nope")
