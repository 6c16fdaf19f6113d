"""Registry of entity map configs, keyed by resource name."""

from collections.abc import Mapping

from retailhub.exceptions import ConfigurationError
from retailhub.mapping.configs.catalog import (
    MASTER_PRODUCT_CONFIG,
    PRODUCT_CATEGORY_CONFIG,
    PRODUCT_CONFIG,
    PRODUCT_STOCK_CONFIG,
)
from retailhub.mapping.configs.finance import (
    ACCOUNT_CATEGORY_CONFIG,
    ACCOUNT_CONFIG,
    ACCOUNT_TYPE_CONFIG,
    TRANSACTION_CONFIG,
)
from retailhub.mapping.configs.identity import ROLE_CONFIG
from retailhub.mapping.configs.sales import ORDER_CONFIG
from retailhub.mapping.entity_map_config import EntityMapConfig

ENTITY_MAP_CONFIGS: Mapping[str, EntityMapConfig] = {
    "product_category": PRODUCT_CATEGORY_CONFIG,
    "master_product": MASTER_PRODUCT_CONFIG,
    "product": PRODUCT_CONFIG,
    "product_stock": PRODUCT_STOCK_CONFIG,
    "role": ROLE_CONFIG,
    "account_category": ACCOUNT_CATEGORY_CONFIG,
    "account_type": ACCOUNT_TYPE_CONFIG,
    "account": ACCOUNT_CONFIG,
    "transaction": TRANSACTION_CONFIG,
    "order": ORDER_CONFIG,
}


def get_entity_map_config(resource: str) -> EntityMapConfig:
    """Return the mapping config for ``resource``.

    Raises:
        ConfigurationError: If no config is registered under that name
    """
    try:
        return ENTITY_MAP_CONFIGS[resource]
    except KeyError:
        raise ConfigurationError(
            f"No mapping configuration registered for resource '{resource}'",
            resource=resource,
        ) from None


__all__ = ["ENTITY_MAP_CONFIGS", "get_entity_map_config"]
