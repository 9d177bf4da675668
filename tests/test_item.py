from jmart.item import Item


def test_default_item_is_empty():
    item = Item()
    assert (item.name, item.description, item.count) == ("", "", 0)


def test_constructor_sets_fields():
    item = Item("Pizza", "A box of pizza", 3)
    assert item.name == "Pizza"
    assert item.description == "A box of pizza"
    assert item.count == 3


def test_fields_can_be_updated():
    item = Item("Doritos", "chips", 1)
    item.count += 1
    item.name = "Mountain Dew"
    assert item == Item("Mountain Dew", "chips", 2)


def test_clear_resets_everything():
    item = Item("Macaroni", "cheese", 5)
    item.clear()
    assert item == Item()


def test_equality_by_value():
    assert Item("Toblerone", "", 1) == Item("Toblerone", "", 1)
    assert not Item("Toblerone", "", 1) == Item("Toblerone", "", 2)