"""Inventory bookkeeping: picking up and putting back items, and checklist progress."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from dataclasses import dataclass, replace

from jmart.item import Item

COMPACTION_PASSES = 100


@dataclass
class ChecklistStatus:
    """Progress of a shopping checklist against what has been checked out."""

    checked: list[bool]
    items_in_inventory: bool
    complete: bool


def _add_item(inventory: MutableSequence[Item], item: Item) -> None:
    last = len(inventory) - 1
    for index, entry in enumerate(inventory):
        if not entry.name:
            continue
        if entry.name == item.name:
            entry.count += 1
            return
        if index == last:
            if entry.count == 0:
                inventory[index] = replace(item, count=1)
            else:
                # A nameless item is appended but never counted.
                inventory.append(replace(item, count=1 if item.name else 0))
            return


def _remove_item(inventory: MutableSequence[Item], item: Item) -> None:
    for entry in inventory:
        if entry.name == item.name:
            entry.count -= 1
            return


def _compact(inventory: MutableSequence[Item]) -> None:
    """Move counted items forward over slots whose count has dropped to zero."""
    for _ in range(COMPACTION_PASSES):
        moved = False
        for position in range(len(inventory) - 1):
            current, following = inventory[position], inventory[position + 1]
            if current.count == 0 and following.count > 0:
                inventory[position] = replace(following)
                following.count = 0
                moved = True
        if not moved:
            break


def update_inventory(inventory: MutableSequence[Item], item: Item, add: bool) -> None:
    """Add one of ``item`` to the inventory, or take one away, then close the gaps.

    Adding increments the first named slot with the same name. If there is none,
    the item replaces the last slot when that slot is empty, or is appended.
    Removing decrements the first slot with the same name.
    """
    if add:
        _add_item(inventory, item)
    else:
        _remove_item(inventory, item)
    _compact(inventory)


def update_checklist(
    checkout_list: Iterable[Item],
    checklist: Sequence[Item],
    checked: Sequence[bool],
    inventory: Iterable[Item],
) -> ChecklistStatus:
    """Work out which checklist entries the checkout covers.

    ``checked`` holds the previous flags, one per checklist entry; an entry that
    does not appear in the checkout keeps its previous flag. The input is not
    modified.
    """
    flags = list(checked)
    if len(flags) != len(checklist):
        raise ValueError("checked must have one flag per checklist entry")
    bought = list(checkout_list)
    for slot, wanted in enumerate(checklist):
        match = next((entry for entry in bought if entry.name == wanted.name), None)
        if match is not None:
            flags[slot] = match.count >= wanted.count
    holding = any(entry.count > 0 for entry in inventory)
    return ChecklistStatus(
        checked=flags,
        items_in_inventory=holding,
        complete=bool(flags) and all(flags),
    )