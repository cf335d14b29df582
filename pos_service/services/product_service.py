# services/product_service.py
from typing import Any, Dict, List

from pos_service.domain.errors import NotFoundError
from pos_service.domain.models import Product, numeric_or_zero, int_or_zero
from pos_service.repositories.store_repository import StoreRepository

# Campos de texto que conservan el valor anterior cuando no vienen en la petición
TEXT_FIELDS = ("name", "description", "category", "image")


class ProductService:
    def __init__(self, repository: StoreRepository):
        self.repository = repository

    def list_products(self) -> List[Product]:
        """Caso de uso: listar todos los productos."""
        with self.repository.lock:
            return self.repository.load().products

    def get_product(self, product_id: int) -> Product:
        with self.repository.lock:
            product = self.repository.load().find_product(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    def create_product(self, fields: Dict[str, Any]) -> Product:
        """Caso de uso: crear un producto con el siguiente id disponible."""
        with self.repository.lock:
            document = self.repository.load()
            product = Product.from_dict({**fields, "id": document.next_product_id()})
            document.products.append(product)
            self.repository.save(document)
            return product

    def update_product(self, product_id: int, fields: Dict[str, Any]) -> Product:
        """
        Caso de uso: actualizar un producto existente.

        Los campos de texto ausentes conservan su valor. price y quantity se
        reemplazan siempre: si no vienen en la petición quedan en 0.
        """
        with self.repository.lock:
            document = self.repository.load()
            product = document.find_product(product_id)
            if product is None:
                raise NotFoundError("Product not found")

            for name in TEXT_FIELDS:
                value = fields.get(name)
                if value is not None:
                    setattr(product, name, value if isinstance(value, str) else str(value))
            product.price = max(0, numeric_or_zero(fields.get("price")))
            product.quantity = max(0, int_or_zero(fields.get("quantity")))

            self.repository.save(document)
            return product

    def delete_product(self, product_id: int) -> None:
        """Caso de uso: eliminar un producto. No falla si no existe."""
        with self.repository.lock:
            document = self.repository.load()
            document.products = [p for p in document.products if p.id != product_id]
            self.repository.save(document)
