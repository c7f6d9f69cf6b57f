#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from storefront.data.models.order import OrderModel

__all__ = ["OrderModel"]
