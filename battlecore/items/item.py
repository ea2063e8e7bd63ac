"""
Item module for the combat engine.

Defines the Item record looked up from the content catalog. Weapons, armor,
shields and consumables share one model; the item type decides which slot
the item fits and what its numeric effect means.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from ..core.constants import ItemType, StatKey


class Item(BaseModel):
    """
    Represents a catalog item that can be equipped or consumed.

    For weapons `effect` is the flat damage bonus, for armor and shields it is
    the armor class bonus, for consumables it is the amount restored.
    """

    id: str = Field(
        description="The unique catalog id of the item.",
    )
    name: str = Field(
        description="The display name of the item.",
    )
    description: str = Field(
        default="",
        description="A brief description of the item.",
    )
    item_type: ItemType = Field(
        description="The kind of item, which decides its equipment slot.",
    )
    effect: int = Field(
        default=0,
        description="Damage bonus, armor bonus or restored amount.",
    )
    light: bool = Field(
        default=False,
        description="Whether the weapon is light enough to dual wield.",
    )
    two_handed: bool = Field(
        default=False,
        description="Whether the weapon needs both hands.",
    )
    attack_stat: StatKey = Field(
        default=StatKey.STRENGTH,
        description="The ability score used to attack with this weapon.",
    )
    restores: Literal["hp", "mp"] | None = Field(
        default=None,
        description="For consumables, the pool refilled by `effect`.",
    )
    cost: int = Field(
        default=0,
        ge=0,
        description="Shop price in gold.",
    )

    @property
    def is_weapon(self) -> bool:
        return self.item_type == ItemType.WEAPON

    @property
    def colored_name(self) -> str:
        """Returns the item name with rich markup for terminal display."""
        color = {
            ItemType.WEAPON: "bold yellow",
            ItemType.ARMOR: "bold blue",
            ItemType.SHIELD: "bold blue",
            ItemType.CONSUMABLE: "bold green",
        }.get(self.item_type, "white")
        return f"[{color}]{self.name}[/]"

    def model_post_init(self, _: Any) -> None:
        """
        Validate the item's properties.

        Raises:
            ValueError: If a non-weapon carries weapon flags.

        """
        if not self.id:
            raise ValueError("Item id must not be empty.")
        if not self.is_weapon and (self.light or self.two_handed):
            raise ValueError(f"Only weapons can be light or two-handed: {self.id}")
        if self.light and self.two_handed:
            raise ValueError(f"A weapon cannot be both light and two-handed: {self.id}")
