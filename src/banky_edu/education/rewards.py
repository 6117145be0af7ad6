"""
Loot dropped when a learner completes a module.
"""

from __future__ import annotations

import random
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Rarity(str, Enum):
    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    LEGENDARY = "Legendary"


class LootItem(BaseModel):
    """A collectible reward shown in the learner's inventory."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    emoji: str
    rarity: Rarity


LOOT_TABLE: tuple[LootItem, ...] = (
    LootItem(id="coin_bronze", name="Bronze Coin", emoji="🥉", rarity=Rarity.COMMON),
    LootItem(id="coin_silver", name="Silver Coin", emoji="🥈", rarity=Rarity.COMMON),
    LootItem(id="piggy", name="Savings Pig", emoji="🐷", rarity=Rarity.COMMON),
    LootItem(id="chart", name="Stonk Up", emoji="📈", rarity=Rarity.UNCOMMON),
    LootItem(id="bull", name="Bull Market", emoji="🐂", rarity=Rarity.UNCOMMON),
    LootItem(id="diamond", name="Diamond Hands", emoji="💎", rarity=Rarity.RARE),
    LootItem(id="bag", name="Secure The Bag", emoji="💰", rarity=Rarity.RARE),
    LootItem(id="rocket", name="Moon Shot", emoji="🚀", rarity=Rarity.LEGENDARY),
)

_BY_ID = {item.id: item for item in LOOT_TABLE}


def draw_loot(rng: random.Random | None = None) -> LootItem:
    """Draw one item uniformly from the loot table.

    Args:
        rng: Random source; pass a seeded ``random.Random`` for repeatable draws
    """
    return (rng or random).choice(LOOT_TABLE)


def find_loot(item_id: str) -> LootItem | None:
    """Look up an inventory item by id; unknown ids return None."""
    return _BY_ID.get(item_id)


__all__ = ["Rarity", "LootItem", "LOOT_TABLE", "draw_loot", "find_loot"]
