# repositories/store_repository.py
import threading
from abc import ABC, abstractmethod

from pos_service.domain.models import StoreDocument


class StoreRepository(ABC):
    """
    Interfaz abstracta para el almacenamiento del documento de la tienda.

    Los servicios mantienen `lock` durante todo el ciclo
    load -> modificar -> save para no perder actualizaciones dentro del
    mismo proceso.
    """

    def __init__(self):
        self.lock = threading.RLock()

    @abstractmethod
    def load(self) -> StoreDocument:
        """Devuelve el documento completo, ya normalizado."""
        pass

    @abstractmethod
    def save(self, document: StoreDocument) -> None:
        """Sobrescribe el documento completo."""
        pass
