# app/services/seed_service.py
import logging

from app.stores import GiftSeed, RegistryStore

logger = logging.getLogger(__name__)

INITIAL_GIFT_ITEMS: list[GiftSeed] = [
    GiftSeed("Fralda P", "👶", 5),
    GiftSeed("Fralda M", "👶", 10),
    GiftSeed("Lenço umedecido", "🧴", 10),
    GiftSeed("Pomada para assaduras", "🩹", 5),
    GiftSeed("Sabonete líquido", "🧼", 3),
    GiftSeed("Toalha de boca", "🍼", 8),
    GiftSeed("Manta de bebê", "🧸", 2),
    GiftSeed("Shampoo infantil", "🧴", 3),
]


def seed_gift_items(store: RegistryStore, seeds: list[GiftSeed] = INITIAL_GIFT_ITEMS) -> bool:
    """
    Insert the default catalog if the gift_items table is empty.

    Returns True if anything was inserted.
    """
    if store.count_gift_items() > 0:
        logger.info("Gift items already present, skipping seed.")
        return False

    store.seed_gift_items(seeds)
    logger.info("Seeded %d gift items.", len(seeds))
    return True
