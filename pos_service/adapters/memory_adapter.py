# adapters/memory_adapter.py
import copy
from typing import Any, Optional

from pos_service.domain.models import StoreDocument
from pos_service.repositories.store_repository import StoreRepository


class InMemoryStoreAdapter(StoreRepository):
    """Implementación del repositorio en memoria, para pruebas y ejecuciones efímeras."""

    def __init__(self, initial: Optional[Any] = None):
        super().__init__()
        # Se guarda el documento crudo para que load() lo normalice igual que el archivo
        self._data = copy.deepcopy(initial) if initial is not None else StoreDocument().to_dict()

    def load(self) -> StoreDocument:
        return StoreDocument.from_dict(copy.deepcopy(self._data))

    def save(self, document: StoreDocument) -> None:
        self._data = copy.deepcopy(document.to_dict())

    @property
    def raw(self) -> Any:
        """Copia del último documento guardado, tal cual."""
        return copy.deepcopy(self._data)
