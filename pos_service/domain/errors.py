# domain/errors.py
"""
Excepciones de dominio. Los servicios las lanzan cuando se viola una regla
de negocio y la capa HTTP las traduce al código de estado correspondiente.
"""


class DomainError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Entrada vacía o inválida."""
    status_code = 400


class NotFoundError(DomainError):
    """El producto solicitado no existe."""
    status_code = 404


class InsufficientStockError(DomainError):
    """La cantidad vendida supera el stock disponible del producto."""
    status_code = 400

    def __init__(self, product_id: int):
        super().__init__(f"Insufficient stock for product ID {product_id}")
        self.product_id = product_id
