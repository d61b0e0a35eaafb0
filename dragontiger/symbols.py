"""Interned symbols: equal strings share a single Symbol instance."""

from __future__ import annotations

_interned: dict[str | None, "Symbol"] = {}


class Symbol:
    """An interned string compared by identity.

    ``Symbol()`` is the null symbol, which stands for the absence of a name.
    """

    __slots__ = ("_text",)

    _text: str | None

    def __new__(cls, text=None):
        if isinstance(text, Symbol):
            return text
        if text is not None and not isinstance(text, str):
            raise TypeError(f"a symbol is built from a string, not {type(text).__name__}")
        symbol = _interned.get(text)
        if symbol is None:
            symbol = super().__new__(cls)
            symbol._text = text
            _interned[text] = symbol
        return symbol

    @property
    def text(self) -> str | None:
        """The interned string, or None for the null symbol."""
        return self._text

    def __str__(self) -> str:
        return "<null>" if self._text is None else self._text

    def __repr__(self) -> str:
        return f"Symbol({self._text!r})"

    def __eq__(self, other):
        if isinstance(other, Symbol):
            return self is other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __reduce__(self):
        return (Symbol, (self._text,))