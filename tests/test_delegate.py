import unittest
from unittest.mock import MagicMock

import pytest

from plugbind import Container, NotFoundError, Provider


class TestDelegate(unittest.TestCase):
    root: Container

    def setUp(self):
        self.root = Container([], {"root-param": "root value"})

    def test_factories_receive_delegate(self):
        factory = MagicMock(return_value="value")
        child = Container([Provider(factories={"service": factory})], delegate=self.root)

        child.get("service")

        factory.assert_called_once_with(self.root)

    def test_extensions_receive_delegate(self):
        extension = MagicMock(return_value="extended")
        child = Container(
            [Provider(factories={"service": lambda _: "base"}), Provider(extensions={"service": extension})],
            delegate=self.root,
        )

        assert child.get("service") == "extended"
        extension.assert_called_once_with(self.root, "base")

    def test_bare_extension_receives_delegate(self):
        extension = MagicMock(return_value="extended")
        child = Container([Provider(extensions={"service": extension})], delegate=self.root)

        child.get("service")

        extension.assert_called_once_with(self.root, None)

    def test_child_does_not_expose_delegate_entries(self):
        child = Container([], delegate=self.root)

        assert not child.has("root-param")
        with pytest.raises(NotFoundError):
            child.get("root-param")

    def test_child_factory_reads_delegate_entries_through_context(self):
        child = Container([Provider(factories={"service": lambda c: c.get("root-param").upper()})], delegate=self.root)

        assert child.get("service") == "ROOT VALUE"

    def test_child_entries_are_invisible_to_delegate(self):
        child = Container([Provider(factories={"service": lambda _: "child"})], delegate=self.root)

        assert child.get("service") == "child"
        assert not self.root.has("service")

    def test_child_factory_cannot_reach_its_own_entries_through_context(self):
        child = Container(
            [Provider(factories={"service": lambda c: c.get("local"), "local": lambda _: "local"})],
            delegate=self.root,
        )

        with pytest.raises(NotFoundError, match='"local"'):
            child.get("service")

    def test_delegate_shared_by_several_children(self):
        first = Container([Provider(factories={"service": lambda c: c})], delegate=self.root)
        second = Container([Provider(factories={"service": lambda c: c})], delegate=self.root)

        assert first.get("service") is self.root
        assert second.get("service") is self.root

    def test_create_child_uses_parent_as_delegate(self):
        child = self.root.create_child([Provider(factories={"service": lambda c: c})], {"local": 1})

        assert child.get("service") is self.root
        assert child.get("local") == 1
        assert not child.has("root-param")
        assert not self.root.has("local")
