#!/usr/bin/env python3
"""
Unit tests for deterministic symbol ordering
"""

import unittest

from memalloc.core.models import Symbol
from memalloc.core.symbols import order_symbols


class TestOrderSymbols(unittest.TestCase):
    """Test sorting symbols by address with a descending-name tie-break"""

    def test_tie_broken_by_descending_name(self):
        """At the same address, B sorts before A"""
        a = Symbol(0x10, 'A')
        b = Symbol(0x10, 'B')
        ordered = order_symbols([a, b])
        self.assertEqual([name for _, name, _ in ordered], ['B', 'A'])

    def test_ascending_address(self):
        """Lower addresses come first regardless of name"""
        ordered = order_symbols([
            Symbol(0x20, 'a'),
            Symbol(0x10, '_sdata'),
            Symbol(0x10, '_edata'),
            Symbol(0x08, 'z'),
        ])
        self.assertEqual(
            [(addr, name) for addr, name, _ in ordered],
            [(0x08, 'z'), (0x10, '_sdata'), (0x10, '_edata'), (0x20, 'a')])

    def test_unnamed_symbols_dropped(self):
        """Symbols whose name is not valid text are skipped"""
        named = Symbol(0x10, 'named')
        ordered = order_symbols([Symbol(0x08, None), named])
        self.assertEqual(ordered, [(0x10, 'named', named)])

    def test_deterministic(self):
        """Input order does not affect the result"""
        symbols = [Symbol(0x10, n) for n in ('m', 'x', 'c', 'x2')]
        first = order_symbols(symbols)
        second = order_symbols(list(reversed(symbols)))
        self.assertEqual(
            [name for _, name, _ in first], [name for _, name, _ in second])
        self.assertEqual([name for _, name, _ in first], ['x2', 'x', 'm', 'c'])


if __name__ == '__main__':
    unittest.main()
