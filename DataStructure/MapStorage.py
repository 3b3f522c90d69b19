from typing import Any, Dict, List

class MapStorage:
    """
    Almacenamiento sobre diccionario indexado por posición (0..top).
    Mantiene un contador explícito del índice del tope.

    Complejidad: O(1) push/pop/peek
    """

    def __init__(self):
        self._items: Dict[int, Any] = {}
        self._top = -1  # -1 = pila vacía

    def push(self, value: Any):
        self._top += 1
        self._items[self._top] = value

    def pop(self) -> Any:
        value = self._items.pop(self._top)
        self._top -= 1
        return value

    def peek(self) -> Any:
        return self._items[self._top]

    def size(self) -> int:
        return self._top + 1

    def clear(self):
        self._items.clear()
        self._top = -1

    def to_list(self) -> List:
        """Copia de los elementos desde el fondo hasta el tope"""
        return [self._items[index] for index in range(self._top + 1)]
