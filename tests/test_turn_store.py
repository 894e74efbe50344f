"""Tests for TurnStore."""

from dialogue_context.core.turn_store import TurnStore
from dialogue_context.types import Role, Turn


class TestTurnStore:
    def test_empty(self):
        store = TurnStore()
        assert len(store) == 0
        assert store.turns == ()
        assert list(store) == []

    def test_append_adds_user_then_model(self):
        store = TurnStore()
        store.append("hello", "hi there")
        assert store.turns == (
            Turn(role=Role.USER, text="hello"),
            Turn(role=Role.MODEL, text="hi there"),
        )

    def test_length_grows_by_two(self):
        store = TurnStore()
        for i in range(3):
            store.append(f"q{i}", f"a{i}")
            assert len(store) == 2 * (i + 1)

    def test_accepts_empty_strings(self):
        store = TurnStore()
        store.append("", "")
        assert len(store) == 2
        assert store.turns[0].text == ""

    def test_chronological_order(self):
        store = TurnStore()
        store.append("first", "one")
        store.append("second", "two")
        assert [t.text for t in store] == ["first", "one", "second", "two"]

    def test_turns_is_a_snapshot(self):
        store = TurnStore()
        store.append("a", "b")
        snapshot = store.turns
        store.append("c", "d")
        assert len(snapshot) == 2
        assert len(store.turns) == 4

    def test_tail(self):
        store = TurnStore()
        for i in range(4):
            store.append(f"q{i}", f"a{i}")
        assert [t.text for t in store.tail(3)] == ["a2", "q3", "a3"]

    def test_tail_larger_than_store(self):
        store = TurnStore()
        store.append("q", "a")
        assert [t.text for t in store.tail(10)] == ["q", "a"]

    def test_tail_zero(self):
        store = TurnStore()
        store.append("q", "a")
        assert store.tail(0) == []

    def test_turn_role_is_string_valued(self):
        store = TurnStore()
        store.append("q", "a")
        assert store.turns[0].role == "user"
        assert store.turns[1].role == "model"
