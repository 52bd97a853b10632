from __future__ import annotations

from typing import Callable, Dict, Optional

# Un 'formatter' transforme le contenu brut d'une primitive universelle -> texte
ContentFormatter = Callable[[memoryview], str]


class FormatterRegistry:
    def __init__(self):
        self._handlers: Dict[int, ContentFormatter] = {}

    def register(self, tag: int, handler: ContentFormatter):
        self._handlers[tag] = handler

    def get(self, tag: int) -> Optional[ContentFormatter]:
        return self._handlers.get(tag)


# Registre global simple
_registry = FormatterRegistry()


def register(*tags: int):
    def deco(fn: ContentFormatter):
        for tag in tags:
            _registry.register(tag, fn)
        return fn

    return deco


def get_formatter(tag: int) -> Optional[ContentFormatter]:
    return _registry.get(tag)
