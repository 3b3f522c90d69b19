from enum import Enum

class StorageKind(Enum):
    """Representaciones internas disponibles para la pila"""

    ARRAY = "array"
    MAP = "map"
    LINKED_LIST = "linked_list"

    def __str__(self) -> str:
        return self.value
