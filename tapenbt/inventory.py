"""Extracting game inventory items from an NBT document."""

from dataclasses import dataclass, field

__all__ = ["ItemDisplay", "Item", "items_from_nbt"]


@dataclass
class ItemDisplay:
    """How an item is shown: name, lore lines, glint and dye colour."""

    name: str = ""
    lore: list = field(default_factory=list)
    has_glint: bool = False
    color: object = None


@dataclass
class Item:
    """One inventory slot's item."""

    id: int
    damage: int
    count: int
    head_texture_id: object = None
    skyblock_id: object = None
    reforge: object = None
    display: ItemDisplay = field(default_factory=ItemDisplay)
    enchantments: dict = field(default_factory=dict)
    timestamp: object = None


def _text(value):
    return None if value is None else str(value)


def _head_texture(item_tag):
    skull_owner = item_tag.compound("SkullOwner")
    properties = skull_owner.compound("Properties") if skull_owner is not None else None
    textures = properties.list("textures") if properties is not None else None
    compounds = textures.compounds() if textures is not None else None
    if not compounds:
        return None
    return _text(compounds[0].string("Value"))


def _display(item_display, extra):
    if item_display is None:
        name, lore, color = "", [], None
    else:
        name = _text(item_display.string("Name")) or ""
        lore_list = item_display.list("Lore")
        strings = lore_list.strings() if lore_list is not None else None
        lore = [str(line) for line in strings] if strings is not None else []
        color = item_display.int("color")
    has_glint = extra.contains("ench") if extra is not None else False
    return ItemDisplay(name=name, lore=lore, has_glint=has_glint, color=color)


def _enchantments(extra):
    enchantments = extra.compound("enchantments") if extra is not None else None
    if enchantments is None:
        return {}
    return {str(name): tag.int() or 0 for name, tag in enchantments}


def _item(item_nbt):
    item_tag = item_nbt.compound("tag")
    if item_tag is None:
        return None
    numbers = (item_nbt.short("id"), item_nbt.short("Damage"), item_nbt.byte("Count"))
    if None in numbers:
        return None
    extra = item_tag.compound("ExtraAttributes")

    def extra_string(name):
        return _text(extra.string(name)) if extra is not None else None

    return Item(
        id=numbers[0],
        damage=numbers[1],
        count=numbers[2],
        head_texture_id=_head_texture(item_tag),
        skyblock_id=extra_string("id"),
        reforge=extra_string("modifier"),
        display=_display(item_tag.compound("display"), extra),
        enchantments=_enchantments(extra),
        timestamp=extra_string("timestamp"),
    )


def items_from_nbt(nbt):
    """Return the items of list ``i``, None for empty slots.

    Returns None altogether if a present item lacks its tag or id, damage or count.
    """
    item_list = nbt.list("i")
    compounds = item_list.compounds() if item_list is not None else None
    items = []
    for item_nbt in compounds or []:
        if not item_nbt.contains("id"):
            items.append(None)
            continue
        item = _item(item_nbt)
        if item is None:
            return None
        items.append(item)
    return items