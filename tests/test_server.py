import json
from unittest import mock

import flask
import pytest

from velvetbar.api import ConsumableAPI
from velvetbar.drink import Drink
from velvetbar.food import Food
from velvetbar.persistence import load_from_file
from velvetbar.server import create_app, main

WATER = '{"alcPercentage":0,"name":"Water","id":"101","fullSipsAmount":4,"price":2,"sipsAmount":4,"isAlc":false}'
BEER = '{"isAlc":true,"sipsAmount":9,"price":4,"fullSipsAmount":9,"id":"102","name":"Beer","alcPercentage":5}'
COLA = '{"alcPercentage":0,"name":"Cola","id":"101","fullSipsAmount":4,"price":2,"sipsAmount":4,"isAlc":false}'


@pytest.fixture
def apis():
    drinks = ConsumableAPI(Drink, {"101": Drink.from_json(json.loads(WATER))})
    foods = ConsumableAPI(
        Food,
        {
            "1": Food(id="1", name="Pizza", price=20, bites=8, is_hot=True),
            "2": Food(id="2", name="Salad", price=10, bites=3, is_hot=False),
        },
    )
    return drinks, foods


@pytest.fixture
def client(apis):
    return create_app(*apis).test_client()


def test_post_drink(client, apis):
    response = client.post("/api/bar/drinks", data=BEER)
    assert response.status_code == 201
    assert json.loads(response.get_data(as_text=True)) == json.loads(BEER)
    assert apis[0].consumables["102"].name == "Beer"


def test_post_invalid_json(client):
    response = client.post("/api/bar/drinks", data="nonsense")
    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Invalid JSON"


def test_get_drink(client):
    response = client.get("/api/bar/drinks/101")
    assert response.status_code == 200
    assert json.loads(response.get_data(as_text=True)) == json.loads(WATER)


def test_get_missing_drink(client):
    response = client.get("/api/bar/drinks/999")
    assert response.status_code == 404
    assert response.get_data(as_text=True) == "Consumable Not Found"


def test_put_drink(client, apis):
    response = client.put("/api/bar/drinks/101", data=COLA)
    assert response.status_code == 200
    assert response.headers["Content-Type"] == "application/json"
    assert apis[0].consumables["101"].name == "Cola"


def test_delete_food(client, apis):
    response = client.delete("/api/bar/foods/1")
    assert response.status_code == 204
    assert "1" not in apis[1].consumables


def test_list_hot_foods(client):
    response = client.get("/api/bar/foods?isHot=true")
    assert response.status_code == 200
    names = [entry["name"] for entry in json.loads(response.get_data(as_text=True))]
    assert names == ["Pizza"]


def test_main_serves_then_saves(tmp_path):
    drinks_file = tmp_path / "drinks.json"
    foods_file = tmp_path / "foods.json"
    drinks_file.write_text(f"[{WATER}]", encoding="utf-8")

    with mock.patch.object(flask.Flask, "run") as run:
        status = main(
            [
                "--host", "127.0.0.1",
                "--port", "8080",
                "--drinks-file", str(drinks_file),
                "--foods-file", str(foods_file),
            ]
        )

    assert status == 0
    run.assert_called_once_with(host="127.0.0.1", port=8080)
    assert load_from_file(Drink, str(drinks_file))["101"].name == "Water"
    assert json.loads(foods_file.read_text(encoding="utf-8")) == []