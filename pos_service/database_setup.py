# database_setup.py
import json
from pathlib import Path
from typing import Optional, Union

from pos_service.domain.models import StoreDocument
from pos_service.logger import get_logger
from pos_service.repositories.store_repository import StoreRepository

logger = get_logger("setup")


def read_seed_file(seed_file: Union[str, Path]) -> Optional[StoreDocument]:
    """Lee y normaliza el archivo semilla. Devuelve None si no se puede leer."""
    try:
        with open(seed_file, "r", encoding="utf-8") as f:
            return StoreDocument.from_dict(json.load(f))
    except (OSError, ValueError, RecursionError) as e:
        logger.error("Error reading seed file %s: %s", seed_file, e)
        return None


def setup_store(repository: StoreRepository, seed_file: Optional[Union[str, Path]] = None) -> StoreDocument:
    """
    Crea el almacenamiento si no existe y, solo si el catálogo está vacío,
    lo puebla con los datos del archivo semilla.
    """
    with repository.lock:
        document = repository.load()
        if document.products or not seed_file:
            return document

        seed = read_seed_file(seed_file)
        if seed is None or not seed.products:
            logger.warning("Seed file %s has no products, store left empty", seed_file)
            return document

        document.products = seed.products
        if not document.sales:
            document.sales = seed.sales
        repository.save(document)
        logger.info("Store seeded with %d products and %d sales from %s",
                    len(document.products), len(document.sales), seed_file)
        return document
