from product_catalog.infra.db.models.base import Base
from product_catalog.infra.db.models.product import ProductRow

__all__ = ["Base", "ProductRow"]
