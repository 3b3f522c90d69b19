from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union
from State.StorageKind import StorageKind

def validate_capacity(capacity: Optional[int]) -> Optional[int]:
    """None = sin límite; de lo contrario un entero positivo"""
    if capacity is None:
        return None
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise TypeError(f"capacity must be an int or None, got {type(capacity).__name__}")
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")
    return capacity


@dataclass
class StackConfig:
    """
    Configuración de una pila: representación interna y capacidad opcional.
    Usar dataclass facilita la comparación y la conversión a dict.
    """

    storage: Union[StorageKind, str] = StorageKind.ARRAY
    capacity: Optional[int] = None

    def __post_init__(self):
        # Acepta el nombre de la representación ("map") además del enum
        if not isinstance(self.storage, StorageKind):
            self.storage = StorageKind(self.storage)
        self.capacity = validate_capacity(self.capacity)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StackConfig":
        unknown = set(data) - {"storage", "capacity"}
        if unknown:
            raise ValueError(f"unknown stack config keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["storage"] = self.storage.value
        return data
