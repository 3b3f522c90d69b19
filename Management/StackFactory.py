import logging
from typing import Any, Dict, List, Optional
from DataStructure.Stack import STORAGE_CLASSES, Stack
from State.StackConfig import StackConfig
from State.StorageKind import StorageKind

LOGGER = logging.getLogger(__name__)

class StackFactory:
    """
    Construye pilas a partir de una configuración.
    Mantiene su propio registro tipo -> clase de almacenamiento, de modo que
    un llamador puede sustituir una representación sin tocar Stack.
    """

    def __init__(self, default_config: Optional[StackConfig] = None):
        self.default_config = default_config or StackConfig()
        self._registry: Dict[StorageKind, type] = dict(STORAGE_CLASSES)

    def register(self, kind, storage_cls: type):
        """Asocia una clase de almacenamiento a un tipo (reemplaza la anterior)"""
        kind = kind if isinstance(kind, StorageKind) else StorageKind(kind)
        if not isinstance(storage_cls, type):
            raise TypeError(f"storage for {kind} must be a class, got {storage_cls!r}")
        self._registry[kind] = storage_cls
        LOGGER.debug("Almacenamiento %s registrado para %s", storage_cls.__name__, kind)

    def available_kinds(self) -> List[StorageKind]:
        return list(self._registry)

    def create(self, config: Optional[StackConfig] = None) -> Stack:
        """Crea una pila vacía; sin config usa la configuración por defecto"""
        config = config or self.default_config
        storage = self._registry[config.storage]()
        return Stack(storage, config.capacity)

    def create_from_dict(self, data: Dict[str, Any]) -> Stack:
        return self.create(StackConfig.from_dict(data))

    def __repr__(self) -> str:
        kinds = ", ".join(str(kind) for kind in self._registry)
        return f"<StackFactory kinds=[{kinds}] default={self.default_config.to_dict()}>"
