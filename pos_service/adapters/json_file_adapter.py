# adapters/json_file_adapter.py
import json
import os
from pathlib import Path
from typing import Optional, Union

from pos_service.config import DB_FILE
from pos_service.domain.models import StoreDocument
from pos_service.logger import get_logger
from pos_service.repositories.store_repository import StoreRepository

logger = get_logger("store")


class JsonFileStoreAdapter(StoreRepository):
    """Implementación del repositorio sobre un único archivo JSON."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        super().__init__()
        self.path = Path(path or DB_FILE)

    def load(self) -> StoreDocument:
        # Si el archivo no existe se crea vacío
        if not self.path.exists():
            document = StoreDocument()
            self.save(document)
            return document

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            # Falla abierta: el servicio sigue disponible con un documento vacío
            logger.error("Error reading store %s: %s", self.path, e)
            return StoreDocument()

        if not isinstance(raw, dict):
            logger.warning("Store %s does not contain an object, ignoring it", self.path)
        return StoreDocument.from_dict(raw)

    def save(self, document: StoreDocument) -> None:
        # Reemplazo atómico: un lector ve el archivo anterior o el nuevo, completo
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document.to_dict(), f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            # Se registra y se continúa; quien llama no recibe confirmación
            logger.error("Error writing store %s: %s", self.path, e)
            if tmp_path.exists():
                tmp_path.unlink()
