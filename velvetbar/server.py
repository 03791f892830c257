"""The bar's HTTP service."""

from __future__ import annotations

import argparse
from typing import Sequence

import flask

from velvetbar.api import ConsumableAPI, Response
from velvetbar.drink import Drink
from velvetbar.food import Food
from velvetbar.persistence import load_from_file, save_to_file

DRINKS_FILE = "velvetMartiniDrinks.json"
FOODS_FILE = "velvetMartiniFoods.json"
DEFAULT_PORT = 12123


def _to_flask(response: Response) -> flask.Response:
    headers = dict(response.headers)
    headers.setdefault("Content-Type", "text/plain; charset=utf-8")
    return flask.Response(response.body, status=response.status, headers=headers)


def _register(app: flask.Flask, name: str, api: ConsumableAPI) -> None:
    collection = f"/api/bar/{name}"
    member = f"{collection}/<consumable_id>"

    def create() -> flask.Response:
        return _to_flask(api.create(flask.request.get_data(as_text=True)))

    def read_all() -> flask.Response:
        return _to_flask(api.read_all(flask.request.args))

    def read(consumable_id: str) -> flask.Response:
        return _to_flask(api.read(consumable_id))

    def update(consumable_id: str) -> flask.Response:
        return _to_flask(api.update(flask.request.get_data(as_text=True), consumable_id))

    def delete(consumable_id: str) -> flask.Response:
        return _to_flask(api.delete(consumable_id))

    app.add_url_rule(collection, f"{name}_create", create, methods=["POST"])
    app.add_url_rule(collection, f"{name}_read_all", read_all, methods=["GET"])
    app.add_url_rule(member, f"{name}_read", read, methods=["GET"])
    app.add_url_rule(member, f"{name}_update", update, methods=["PUT"])
    app.add_url_rule(member, f"{name}_delete", delete, methods=["DELETE"])


def create_app(drinks_api: ConsumableAPI, foods_api: ConsumableAPI) -> flask.Flask:
    """Build the web application serving drinks and foods."""
    app = flask.Flask(__name__)
    _register(app, "drinks", drinks_api)
    _register(app, "foods", foods_api)
    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Load the menu, serve it until stopped, then save it back."""
    parser = argparse.ArgumentParser(prog="velvetbar", description="Serve the bar's menu.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--drinks-file", default=DRINKS_FILE)
    parser.add_argument("--foods-file", default=FOODS_FILE)
    args = parser.parse_args(argv)

    drinks_api = ConsumableAPI(Drink, load_from_file(Drink, args.drinks_file))
    foods_api = ConsumableAPI(Food, load_from_file(Food, args.foods_file))

    app = create_app(drinks_api, foods_api)
    app.run(host=args.host, port=args.port)

    save_to_file(drinks_api.consumables, args.drinks_file)
    save_to_file(foods_api.consumables, args.foods_file)
    return 0