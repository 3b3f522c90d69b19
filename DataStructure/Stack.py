import logging
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union
from DataStructure.ArrayStorage import ArrayStorage
from DataStructure.LinkedListStorage import LinkedListStorage
from DataStructure.MapStorage import MapStorage
from DataStructure.StackErrors import StackOverflow, StackUnderflow
from DataStructure.StackStorage import StackStorage
from State.StackConfig import StackConfig, validate_capacity
from State.StorageKind import StorageKind

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

STORAGE_CLASSES: Dict[StorageKind, type] = {
    StorageKind.ARRAY: ArrayStorage,
    StorageKind.MAP: MapStorage,
    StorageKind.LINKED_LIST: LinkedListStorage,
}


class Stack(Generic[T]):
    """
    Pila (LIFO) con representación interna intercambiable.
    La misma interfaz funciona sobre lista dinámica, diccionario indexado
    o lista simplemente enlazada; el comportamiento externo es idéntico.

    Complejidad: O(1) push/pop/peek/size (amortizado en la lista dinámica)
    """

    def __init__(
        self,
        storage: Union[StorageKind, str, StackStorage, None] = None,
        capacity: Optional[int] = None,
    ):
        self._capacity = validate_capacity(capacity)
        self._storage = self._resolve_storage(storage)
        LOGGER.debug(
            "Pila creada: storage=%s capacity=%s", self.storage_kind, self._capacity
        )

    @classmethod
    def from_config(cls, config: StackConfig) -> "Stack":
        return cls(config.storage, config.capacity)

    @staticmethod
    def _resolve_storage(storage) -> StackStorage:
        if storage is None:
            storage = StorageKind.ARRAY
        if isinstance(storage, (StorageKind, str)):
            kind = storage if isinstance(storage, StorageKind) else StorageKind(storage)
            storage = STORAGE_CLASSES[kind]()
        elif isinstance(storage, type):
            raise TypeError(
                f"expected a stack storage instance, got the class {storage.__name__}"
            )
        elif not isinstance(storage, StackStorage):
            raise TypeError(f"{type(storage).__name__} does not implement StackStorage")
        elif getattr(storage, "_owned", False):
            raise ValueError("stack storage already owned by another Stack")
        elif storage.size() != 0:
            raise ValueError("stack storage must start empty")

        # Cada almacenamiento pertenece a una sola pila
        storage._owned = True
        return storage

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    @property
    def storage_kind(self) -> Optional[StorageKind]:
        """Tipo de representación interna (None si es una implementación propia)"""
        for kind, storage_cls in STORAGE_CLASSES.items():
            if type(self._storage) is storage_cls:
                return kind
        return None

    def push(self, value: T):
        """Agrega value como nuevo tope"""
        if self.is_full():
            LOGGER.debug("push rechazado: pila llena (capacity=%s)", self._capacity)
            raise StackOverflow(self._capacity)
        self._storage.push(value)

    def pop(self) -> T:
        """Extrae y retorna el item del tope"""
        if self.is_empty():
            LOGGER.debug("pop sobre pila vacía")
            raise StackUnderflow("pop from empty stack")
        return self._storage.pop()

    def peek(self) -> T:
        """Retorna el item del tope sin extraerlo"""
        if self.is_empty():
            LOGGER.debug("peek sobre pila vacía")
            raise StackUnderflow("peek from empty stack")
        return self._storage.peek()

    def is_empty(self) -> bool:
        """Verifica si la pila está vacía"""
        return self._storage.size() == 0

    def is_full(self) -> bool:
        """Verifica si una pila acotada alcanzó su capacidad"""
        return self._capacity is not None and self._storage.size() >= self._capacity

    def size(self) -> int:
        """Retorna el tamaño de la pila"""
        return self._storage.size()

    def clear(self):
        """Limpia la pila"""
        LOGGER.debug("Limpiando pila con %d elementos", self._storage.size())
        self._storage.clear()

    def to_list(self) -> List[Any]:
        """Copia de los elementos desde el fondo hasta el tope (sin extraer)"""
        return self._storage.to_list()

    def __repr__(self):
        kind = self.storage_kind or type(self._storage).__name__
        return f"Stack(storage={kind}, size={self.size()}, capacity={self._capacity})"
