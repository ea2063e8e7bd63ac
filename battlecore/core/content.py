import json
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from catchery import log_debug, log_warning

from .utils import Singleton

if TYPE_CHECKING:
    from ..actions.spell import Ability, Spell
    from ..character.combatant import Monster
    from ..character.talent import Talent
    from ..items.item import Item

# Content files bundled with the package.
DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class ContentRepository(metaclass=Singleton):
    """
    One-stop registry for every catalog record that needs fast by-id access.
    """

    spells: dict[str, "Spell"]
    abilities: dict[str, "Ability"]
    items: dict[str, "Item"]
    talents: dict[str, "Talent"]
    monsters: dict[str, "Monster"]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path | None):
                The directory containing data files to load. The bundled
                data directory is used when None on first use.

        """
        if data_dir:
            self.reload(Path(data_dir))
        elif not hasattr(self, "data_dir"):
            self.reload(DEFAULT_DATA_DIR)

    def reload(self, root: Path) -> None:
        """
        (Re)load all JSON assets from disk.

        Args:
            root (Path):
                The directory containing data files to load.
        """
        self.data_dir = root
        self.spells = _load_json_file(root / "spells.json", self._load_spells, "spells")
        self.abilities = _load_json_file(
            root / "abilities.json", self._load_abilities, "abilities"
        )
        self.items = _load_json_file(root / "items.json", self._load_items, "items")
        self.talents = _load_json_file(
            root / "talents.json", self._load_talents, "talents"
        )
        self.monsters = _load_json_file(
            root / "monsters.json", self._load_monsters, "monsters"
        )

    def _get_from_collection(self, collection_name: str, item_id: str) -> Any | None:
        """
        Generic helper to get an entry from any collection.

        Args:
            collection_name (str):
                Name of the collection attribute (e.g., 'items', 'spells')
            item_id (str):
                Id of the entry to retrieve

        Returns:
            Any | None:
                The entry if found, None otherwise

        """
        collection = getattr(self, collection_name, None)
        if collection is None:
            log_warning(
                f"Collection '{collection_name}' not found in ContentRepository.",
                {"collection_name": collection_name, "item_id": item_id},
            )
            return None
        entry = collection.get(item_id)
        if entry is None:
            log_warning(
                f"Unknown id '{item_id}' in collection '{collection_name}'.",
                {"collection_name": collection_name, "item_id": item_id},
            )
        return entry

    def get_spell(self, spell_id: str) -> "Spell | None":
        """Get a spell by id, or None if not found."""
        return self._get_from_collection("spells", spell_id)

    def get_ability(self, ability_id: str) -> "Ability | None":
        """Get an ability by id, or None if not found."""
        return self._get_from_collection("abilities", ability_id)

    def get_item(self, item_id: str) -> "Item | None":
        """Get an item by id, or None if not found."""
        return self._get_from_collection("items", item_id)

    def get_talent(self, talent_id: str) -> "Talent | None":
        """Get a talent by id, or None if not found."""
        return self._get_from_collection("talents", talent_id)

    def get_monster(self, monster_id: str) -> "Monster | None":
        """Get a monster template by id, or None if not found."""
        return self._get_from_collection("monsters", monster_id)

    def spawn_monster(self, monster_id: str) -> "Monster | None":
        """Get a fresh battle copy of a monster, or None if not found."""
        template = self.get_monster(monster_id)
        return template.spawn() if template else None

    def available_spells(self, level: int) -> list["Spell"]:
        """Spells a character of the given level may know."""
        return [s for s in self.spells.values() if s.level_required <= level]

    def available_talents(self, level: int, character_class: str) -> list["Talent"]:
        """Talents unlocked at the given level for the given class."""
        return [
            t
            for t in self.talents.values()
            if t.level <= level and t.is_available_to(character_class)
        ]

    @staticmethod
    def _load_spells(data: list[dict]) -> dict[str, "Spell"]:
        from ..actions.spell import Spell

        return _index(Spell, data, "spell")

    @staticmethod
    def _load_abilities(data: list[dict]) -> dict[str, "Ability"]:
        from ..actions.spell import Ability

        return _index(Ability, data, "ability")

    @staticmethod
    def _load_items(data: list[dict]) -> dict[str, "Item"]:
        from ..items.item import Item

        return _index(Item, data, "item")

    @staticmethod
    def _load_talents(data: list[dict]) -> dict[str, "Talent"]:
        from ..character.talent import Talent

        return _index(Talent, data, "talent")

    @staticmethod
    def _load_monsters(data: list[dict]) -> dict[str, "Monster"]:
        """
        Load monster templates from JSON data.

        Args:
            data (list[dict]): List of monster data dictionaries.

        Returns:
            dict[str, Monster]: Dictionary mapping ids to Monster templates.

        Raises:
            ValueError: If duplicate monster ids are found.

        """
        from ..character.combatant import Monster

        return _index(Monster, data, "monster")


def _index(model: type, data: list[dict], kind: str) -> dict[str, Any]:
    """Builds records from raw dictionaries and indexes them by id."""
    entries: dict[str, Any] = {}
    for entry_data in data:
        entry = model(**entry_data)
        if entry.id in entries:
            raise ValueError(f"Duplicate {kind} id: {entry.id}")
        entries[entry.id] = entry
    return entries


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """Helper to load and validate JSON files"""
    try:
        log_debug(
            f"Loading {description} using {loader_func.__name__}",
            {"file": str(filepath)},
        )
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data list in {filepath}")
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e


def get_repository(repository: ContentRepository | None = None) -> ContentRepository:
    """Returns the given repository, or the shared one."""
    return repository if repository is not None else ContentRepository()
