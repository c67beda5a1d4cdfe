"""Ordered stack of layers with overlays kept above ordinary layers."""

from __future__ import annotations

from typing import Iterator

from hazel.layer import Layer


class LayerStack:
    """Layers first, in push order, followed by overlays, in push order."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        """Insert a layer below all overlays and attach it."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        """Put an overlay on top of everything and attach it."""
        self._layers.append(overlay)
        overlay.on_attach()

    @staticmethod
    def _index_of(items: list[Layer], target: Layer) -> int | None:
        return next((i for i, item in enumerate(items) if item is target), None)

    def pop_layer(self, layer: Layer) -> bool:
        """Detach and remove a layer from the layer section; return whether it was there."""
        index = self._index_of(self._layers[: self._insert_index], layer)
        if index is None:
            return False
        layer.on_detach()
        del self._layers[index]
        self._insert_index -= 1
        return True

    def pop_overlay(self, overlay: Layer) -> bool:
        """Detach and remove an overlay from the overlay section; return whether it was there."""
        index = self._index_of(self._layers[self._insert_index :], overlay)
        if index is None:
            return False
        overlay.on_detach()
        del self._layers[self._insert_index + index]
        return True

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)