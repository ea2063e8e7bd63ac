"""
Module for printing combatants, effects and catalog entries in a formatted way.

The *_sheet functions build rich markup strings, the print_* functions send
them to the shared console.
"""

from rich.padding import Padding

from ..actions.spell import Ability, Castable, Spell
from ..character.character_stats import get_armor_class
from ..character.combatant import Combatant, Monster, Player
from ..effects.status_effect import StatusEffectDefinition
from ..items.item import Item
from .constants import ActionKind, ItemType, StatKey
from .content import ContentRepository, get_repository
from .dice import ability_modifier
from .utils import cprint, crule, make_bar


def _signed(value: int) -> str:
    return f"{value:+d}"


def status_effect_sheet(effect: StatusEffectDefinition) -> str:
    """
    Builds a one-line summary of a status effect definition.

    Args:
        effect (StatusEffectDefinition): The effect to describe.

    Returns:
        str: Rich markup with duration, modifiers and removal rules.

    """
    sheet = f"{effect.colored_name}, "
    if effect.description:
        sheet += f'[italic]"{effect.description}"[/], '
    sheet += f"{effect.default_duration} turns"
    if effect.tick_die:
        sheet += f", deals [red]1d{effect.tick_die}[/] per turn"
    elif effect.tick_damage:
        sheet += f", deals [red]{effect.tick_damage}[/] per turn"
    modifiers = [
        f"{_signed(value)} {label}"
        for label, value in (
            ("accuracy", effect.accuracy_modifier),
            ("AC", effect.ac_modifier),
            ("damage", effect.damage_modifier),
        )
        if value
    ]
    if modifiers:
        sheet += f", [bold]{', '.join(modifiers)}[/]"
    if effect.skips_turn:
        sheet += ", [bold red]skips turn[/]"
    if effect.can_be_saved():
        sheet += f", save {effect.save_stat.short_name} DC {effect.save_dc}"
    if effect.cure_item_id:
        sheet += f", cured by [green]{effect.cure_item_id}[/]"
    return sheet


def castable_sheet(entry: Castable) -> str:
    """Builds a one-line summary of a spell or an ability."""
    sheet = f"{entry.colored_name} ({entry.mp_cost} MP)"
    if entry.dice is not None:
        verb = "heals" if entry.kind == ActionKind.HEAL else "deals"
        sheet += f", {verb} [bold]{entry.dice}[/]"
    if isinstance(entry, Spell) and entry.auto_hit:
        sheet += ", always hits"
    if isinstance(entry, Ability):
        sheet += f", uses {entry.stat.short_name}"
    if entry.description:
        sheet += f' - [italic]"{entry.description}"[/]'
    return sheet


def item_sheet(item: Item) -> str:
    """Builds a one-line summary of an item."""
    sheet = item.colored_name
    if item.item_type == ItemType.WEAPON:
        flags = [flag for flag, on in (("light", item.light), ("two-handed", item.two_handed)) if on]
        sheet += f" {_signed(item.effect)} damage, {item.attack_stat.short_name}"
        if flags:
            sheet += f" ({', '.join(flags)})"
    elif item.item_type in (ItemType.ARMOR, ItemType.SHIELD):
        sheet += f" {_signed(item.effect)} AC"
    elif item.restores:
        sheet += f" restores {item.effect} {item.restores.upper()}"
    return sheet


def combatant_sheet(
    combatant: Combatant, repository: ContentRepository | None = None
) -> str:
    """
    Builds a multi-line summary of a player or a monster.

    Args:
        combatant (Combatant): The combatant to describe.
        repository (ContentRepository | None): Catalog for talent lookups.

    Returns:
        str: Rich markup, one line per section.

    """
    lines: list[str] = []
    ac = get_armor_class(combatant, 0, repository)
    if isinstance(combatant, Player):
        header = f"[bold cyan]{combatant.name}[/], level {combatant.level}"
        if combatant.character_class:
            header += f" [green]{combatant.character_class}[/]"
        lines.append(header)
    else:
        lines.append(f"[bold red]{combatant.name}[/]")
    lines.append(
        f"  HP: {make_bar(combatant.hp, combatant.max_hp, color='green')} "
        f"[green]{combatant.hp}/{combatant.max_hp}[/], AC: [yellow]{ac}[/]"
    )
    if isinstance(combatant, Player):
        if combatant.max_mp > 0:
            lines.append(
                f"  MP: {make_bar(combatant.mp, combatant.max_mp, color='blue')} "
                f"[blue]{combatant.mp}/{combatant.max_mp}[/]"
            )
        equipped = [
            f"{slot}: {item.colored_name}"
            for slot, item in (
                ("Weapon", combatant.weapon),
                ("Off-hand", combatant.off_hand),
                ("Armor", combatant.armor),
                ("Shield", combatant.shield),
            )
            if item is not None
        ]
        if equipped:
            lines.append(f"  {', '.join(equipped)}")
        if combatant.talents:
            lines.append(f"  Talents: {', '.join(sorted(combatant.talents))}")
    elif isinstance(combatant, Monster):
        lines.append(
            f"  Attack: {_signed(combatant.attack_bonus)}, damage [bold]{combatant.damage}[/]"
        )
        for ability in combatant.abilities:
            lines.append(
                f"  {ability.kind.colorize(ability.name)} "
                f"({ability.damage}, {int(ability.chance * 100)}%)"
            )
    lines.append(
        "  "
        + ", ".join(
            f"{stat.short_name}: {combatant.stats.get(stat)} "
            f"({_signed(ability_modifier(combatant.stats.get(stat)))})"
            for stat in StatKey
        )
    )
    if len(combatant.effects):
        lines.append(f"  Effects: {', '.join(combatant.effects.names())}")
    return "\n".join(lines)


def print_status_effect_sheet(effect: StatusEffectDefinition, padding: int = 2) -> None:
    cprint(Padding(status_effect_sheet(effect), (0, padding)))


def print_combatant_sheet(
    combatant: Combatant, repository: ContentRepository | None = None
) -> None:
    """Prints the summary of a player or a monster."""
    cprint(combatant_sheet(combatant, repository))


def print_content_repository_summary(repository: ContentRepository | None = None) -> None:
    """
    Prints a summary of all available content in the repository.

    Displays counts and one line per entry for each content category.
    """
    repo = get_repository(repository)

    crule("Content Repository Summary", style="bold cyan")
    cprint(f"\n[green]Spells ({len(repo.spells)})[/green]:")
    for spell in repo.spells.values():
        cprint(Padding(castable_sheet(spell), (0, 2)))
    cprint(f"\n[green]Abilities ({len(repo.abilities)})[/green]:")
    for ability in repo.abilities.values():
        cprint(Padding(castable_sheet(ability), (0, 2)))
    cprint(f"\n[green]Items ({len(repo.items)})[/green]:")
    for item in repo.items.values():
        cprint(Padding(item_sheet(item), (0, 2)))
    cprint(f"\n[green]Talents ({len(repo.talents)})[/green]:")
    for talent in repo.talents.values():
        cprint(Padding(f"[blue]{talent.name}[/] (level {talent.level})", (0, 2)))
    cprint(f"\n[green]Monsters ({len(repo.monsters)})[/green]:")
    for monster in repo.monsters.values():
        cprint(
            Padding(
                f"[red]{monster.name}[/] - HP {monster.max_hp}, AC {monster.ac}",
                (0, 2),
            )
        )
