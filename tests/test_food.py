import json

import pytest

from velvetbar.food import Food


def test_parameterized_constructor():
    food = Food("1", "Pizza", 20, 8, True)
    assert food.id == "1"
    assert food.name == "Pizza"
    assert food.price == 20
    assert food.bites == 8
    assert food.full_bites == 8
    assert food.is_hot is True
    assert food.is_drink is False


def test_bite_once():
    food = Food("2", "Burger", 15, 5, True)
    assert food.bite() == "You take a bite of your food. tasty"
    assert food.bites == 4


def test_finish_bites():
    food = Food("2", "Burger", 15, 5, True)
    for _ in range(5):
        food.bite()
    assert food.bites == 0
    with pytest.raises(ValueError, match="There's no Burger left!"):
        food.bite()


def test_finishing_food():
    food = Food("3", "Noodles", 12, 10, False)
    assert food.finish() == "You stuff your mouth with the food. In a rush?"
    assert food.bites == 0
    with pytest.raises(ValueError):
        food.bite()
    with pytest.raises(ValueError, match="There's no Noodles left!"):
        food.finish()


def test_reordering_food():
    food = Food("4", "Salad", 10, 3, False)
    food.finish()
    assert food.reorder() == "The bartender brings you another plate of Salad"
    assert food.bites == 3
    with pytest.raises(ValueError, match="You already have fresh Salad !"):
        food.reorder()


def test_is_special_follows_heat():
    assert Food("1", "Pizza", 20, 8, True).is_special() is True
    assert Food("2", "Salad", 10, 3, False).is_special() is False


def test_json_round_trip():
    food = Food("1", "Pizza", 20, 8, True)
    food.bite()
    data = json.loads(json.dumps(food.to_json()))
    assert data["fullBitesAmount"] == 8
    assert data["bitesAmount"] == food.bites
    assert data["isHot"] is True
    assert Food.from_json(data) == food


def test_update_from_json_missing_field():
    food = Food()
    with pytest.raises(KeyError):
        food.update_from_json({"id": "1", "name": "Pizza", "price": 20})