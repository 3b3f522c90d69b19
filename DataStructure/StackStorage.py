from typing import Any, List, Protocol, runtime_checkable

@runtime_checkable
class StackStorage(Protocol):
    """
    Contrato que cumple cada representación interna de la pila.
    pop() y peek() asumen que la pila no está vacía: Stack lo verifica antes.
    """

    def push(self, value: Any) -> None: ...

    def pop(self) -> Any: ...

    def peek(self) -> Any: ...

    def size(self) -> int: ...

    def clear(self) -> None: ...

    def to_list(self) -> List: ...
