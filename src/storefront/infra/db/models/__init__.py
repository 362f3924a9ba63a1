from storefront.infra.db.models.base import Base
from storefront.infra.db.models.key_value import KeyValueRow

__all__ = ["Base", "KeyValueRow"]
