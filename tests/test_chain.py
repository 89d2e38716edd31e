"""Tests for Chain and Hop path records."""

import pytest

from memexplorer import Chain, Hop, HopKind, chain_to_object


class TestHop:
    """Test hop construction and rendering."""

    def test_constructors_set_kind_and_label(self):
        assert Hop.root() == Hop(HopKind.ROOT)
        assert Hop.field('name') == Hop(HopKind.FIELD, 'name')
        assert Hop.index(3) == Hop(HopKind.INDEX, 3)
        assert Hop.key('k').kind is HopKind.KEY
        assert Hop.value('k').kind is HopKind.VALUE
        assert Hop.element().label is None

    def test_hops_are_immutable(self):
        hop = Hop.field('x')
        with pytest.raises(AttributeError):
            hop.label = 'y'

    def test_string_forms(self):
        assert str(Hop.root()) == "root"
        assert str(Hop.field('items')) == ".items"
        assert str(Hop.index(2)) == "[2]"
        assert str(Hop.value('k')) == "['k']"
        assert str(Hop.namespace()) == ".__dict__"


class TestChain:
    """Test the persistent path structure."""

    def test_root_chain(self):
        obj = object()
        chain = Chain.root(obj)

        assert chain.value is obj
        assert chain.parent is None
        assert chain.hop == Hop.root()
        assert chain.depth == 0
        assert chain.is_root()

    def test_extend_links_back_to_parent(self):
        root_obj, child_obj = [], {}
        root = Chain.root(root_obj)
        child = root.extend(Hop.index(0), child_obj)

        assert child.parent is root
        assert child.value is child_obj
        assert child.depth == 1
        assert not child.is_root()

    def test_value_is_not_copied(self):
        payload = [1, 2, 3]
        chain = Chain.root(payload)
        payload.append(4)
        assert chain.value is payload
        assert chain.value == [1, 2, 3, 4]

    def test_siblings_share_parent(self):
        root = Chain.root(object())
        left = root.extend(Hop.field('left'), object())
        right = root.extend(Hop.field('right'), object())

        assert left.parent is right.parent is root
        assert root.depth == 0

    def test_chain_cannot_be_mutated(self):
        chain = Chain.root(object())
        with pytest.raises(AttributeError):
            chain._value = None
        with pytest.raises(AttributeError):
            chain.extra = 1
        with pytest.raises(AttributeError):
            del chain._parent

    def test_hops_and_objects_follow_path(self):
        a, b, c = object(), object(), object()
        chain = Chain.root(a).extend(Hop.field('items'), b).extend(Hop.index(2), c)

        assert chain.hops() == [Hop.root(), Hop.field('items'), Hop.index(2)]
        assert chain.objects() == [a, b, c]

    def test_path_string(self):
        chain = (
            Chain.root({})
            .extend(Hop.value('data'), [])
            .extend(Hop.index(0), object())
            .extend(Hop.field('name'), 'x')
        )
        assert chain.path_string() == "root['data'][0].name"
        assert "root['data'][0].name" in repr(chain)

    def test_chain_to_object(self):
        obj = object()
        chain = Chain.root([]).extend(Hop.index(0), obj)
        assert chain_to_object(chain) is obj
