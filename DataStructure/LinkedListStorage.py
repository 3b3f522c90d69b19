from typing import Any, List, Optional

class LinkedNode:
    """Nodo para lista simplemente enlazada"""

    def __init__(self, data, next_node: Optional["LinkedNode"] = None):
        self.data = data
        self.next = next_node  # Apunta al tope anterior


class LinkedListStorage:
    """
    Almacenamiento sobre lista simplemente enlazada.
    La cabeza es el tope; cada nodo apunta al elemento apilado antes que él.

    Complejidad: O(1) push/pop/peek en el peor caso
    """

    def __init__(self):
        self.head: Optional[LinkedNode] = None
        self._size = 0

    def push(self, value: Any):
        self.head = LinkedNode(value, self.head)
        self._size += 1

    def pop(self) -> Any:
        node = self.head
        self.head = node.next
        node.next = None  # Desprender el nodo extraído de la cadena
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        return self.head.data

    def size(self) -> int:
        return self._size

    def clear(self):
        # La cadena no tiene ciclos: basta con soltar la cabeza
        self.head = None
        self._size = 0

    def to_list(self) -> List:
        """Copia de los elementos desde el fondo hasta el tope"""
        result = []
        current = self.head
        while current:
            result.append(current.data)
            current = current.next
        result.reverse()
        return result
