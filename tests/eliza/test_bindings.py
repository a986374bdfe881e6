"""Tests for the immutable binding store."""

from eliza import ElizaBindings, ElizaSymbol, symbols


class TestElizaBindings:
    """Test binding, consistency checks and accessors."""

    def test_empty_bindings(self):
        """Test empty bindings have no names and are not None."""
        bindings = ElizaBindings()
        assert len(bindings) == 0
        assert bindings.names() == []
        assert bindings.to_dict() == {}

    def test_bind_new_variable_returns_new_value(self):
        """Test binding an unbound variable extends a copy."""
        empty = ElizaBindings()
        bound = empty.bind(ElizaSymbol("?x"), ElizaSymbol("a"))

        assert bound is not None
        assert bound is not empty
        assert bound["?x"] == ElizaSymbol("a")
        assert "?x" not in empty

    def test_bind_same_value_returns_same_bindings(self):
        """Test re-binding an equal value leaves bindings unchanged."""
        bound = ElizaBindings().bind("?x", symbols("a", "b"))
        assert bound is not None
        assert bound.bind("?x", symbols("a", "b")) is bound

    def test_bind_different_value_fails(self):
        """Test re-binding a different value fails instead of overwriting."""
        bound = ElizaBindings().bind("?x", ElizaSymbol("a"))
        assert bound is not None
        assert bound.bind("?x", ElizaSymbol("b")) is None
        assert bound["?x"] == ElizaSymbol("a")

    def test_bind_with_custom_equality(self):
        """Test the consistency check uses the supplied equality."""
        bound = ElizaBindings().bind("?x", ElizaSymbol("Yes"))
        assert bound is not None

        def ignore_case(a, b):
            return str(a).lower() == str(b).lower()

        assert bound.bind("?x", ElizaSymbol("yes"), ignore_case) is bound

    def test_symbol_position_does_not_affect_consistency(self):
        """Test symbols read at different positions are still equal."""
        bound = ElizaBindings().bind("?x", ElizaSymbol("a", 3))
        assert bound is not None
        assert bound.bind("?x", ElizaSymbol("a", 17)) is bound

    def test_accessors(self):
        """Test lookup, membership, iteration and conversion."""
        bindings = ElizaBindings().bind("?x", ElizaSymbol("a"))
        assert bindings is not None
        bindings = bindings.bind("?y", symbols("b", "c"))
        assert bindings is not None

        assert bindings.lookup("?x") == ElizaSymbol("a")
        assert bindings.lookup("?z") is None
        assert bindings.is_bound("?y")
        assert not bindings.is_bound("?z")
        assert list(bindings) == ["?x", "?y"]
        assert bindings.to_python() == {"?x": "a", "?y": ["b", "c"]}

    def test_map_values_returns_new_bindings(self):
        """Test map_values transforms values without touching the original."""
        bindings = ElizaBindings().bind("?x", ElizaSymbol("a"))
        assert bindings is not None

        mapped = bindings.map_values(lambda value: ElizaSymbol("z"))
        assert mapped["?x"] == ElizaSymbol("z")
        assert bindings["?x"] == ElizaSymbol("a")

    def test_equality(self):
        """Test bindings compare by content."""
        first = ElizaBindings().bind("?x", ElizaSymbol("a"))
        second = ElizaBindings().bind("?x", ElizaSymbol("a"))
        assert first == second
        assert hash(first) == hash(second)
        assert first != ElizaBindings()

    def test_to_dict_is_a_copy(self):
        """Test modifying the exported dictionary does not change the bindings."""
        bindings = ElizaBindings().bind("?x", ElizaSymbol("a"))
        assert bindings is not None

        exported = bindings.to_dict()
        exported["?y"] = ElizaSymbol("b")
        assert "?y" not in bindings
