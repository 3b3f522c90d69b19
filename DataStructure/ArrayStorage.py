from typing import Any, List

class ArrayStorage:
    """
    Almacenamiento sobre lista dinámica de Python.
    El tope es el último índice.

    Complejidad: O(1) amortizado push/pop, O(1) peek
    """

    def __init__(self):
        self._items = []

    def push(self, value: Any):
        self._items.append(value)

    def pop(self) -> Any:
        return self._items.pop()

    def peek(self) -> Any:
        return self._items[-1]

    def size(self) -> int:
        return len(self._items)

    def clear(self):
        self._items.clear()

    def to_list(self) -> List:
        """Copia de los elementos desde el fondo hasta el tope"""
        return list(self._items)
