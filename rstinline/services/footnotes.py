#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Footnote sequencer — auto-numbered ``[#]_`` and auto-symbol ``[*]_`` labels.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections import deque

from rstinline.services.errors import FootnoteSymbolsExhausted


# -----------------------------------------------------------------------------

# HTML entity names, consumed front to back within one render.
DEFAULT_FOOTNOTE_SYMBOLS: tuple[str, ...] = (
    "asterisk", "dagger", "Dagger", "sect", "para",
    "numbersign", "spades", "hearts", "diams", "clubs",
)


# -----------------------------------------------------------------------------

class FootnoteSequencer:

    def __init__(self, symbols: tuple[str, ...] = DEFAULT_FOOTNOTE_SYMBOLS) -> None:
        self._default_symbols = tuple(symbols)
        self.reset()

    def reset(self) -> None:
        self.index = 0
        self.symbol_queue: deque[str] = deque(self._default_symbols)

    def next_number(self) -> int:
        self.index += 1
        return self.index

    def next_symbol(self, with_entity: bool = True) -> str:
        """Pop the next symbol name; ``&name;`` when *with_entity* is set."""
        if not self.symbol_queue:
            raise FootnoteSymbolsExhausted(len(self._default_symbols))
        symbol = self.symbol_queue.popleft()
        return f"&{symbol};" if with_entity else symbol


# -----------------------------------------------------------------------------
