# velvetbar

A small JSON web service that keeps a bar's menu of drinks and foods. Menu
items can be created, read, listed, updated and deleted over HTTP. The menu
is read from JSON files when the server starts and written back to them when
it stops.

## Installing

    pip install .

## Running the server

    velvetbar

By default the server listens on `0.0.0.0`, port 12123, and uses the files
`velvetMartiniDrinks.json` and `velvetMartiniFoods.json` in the current
directory. A file that cannot be opened is treated as an empty menu. When the
server is stopped (for example with Ctrl+C) the menu is written back to the
same files.

Options:

- `--host HOST`: address to listen on (default `0.0.0.0`)
- `--port PORT`: port to listen on (default `12123`)
- `--drinks-file PATH`: file holding the drinks (default `velvetMartiniDrinks.json`)
- `--foods-file PATH`: file holding the foods (default `velvetMartiniFoods.json`)

## Endpoints

Drinks live under `/api/bar/drinks` and foods under `/api/bar/foods`.

| Method | Path                   | Result                                          |
|--------|------------------------|-------------------------------------------------|
| POST   | `/api/bar/drinks`      | add an item built from the JSON body (201)      |
| GET    | `/api/bar/drinks`      | list items as a JSON array                      |
| GET    | `/api/bar/drinks/<id>` | one item, or 404                                |
| PUT    | `/api/bar/drinks/<id>` | overwrite an item from the JSON body, or 404    |
| DELETE | `/api/bar/drinks/<id>` | remove an item (204), or 404                    |

The same routes exist under `/api/bar/foods`. A body that is not valid JSON
gets a 400 answer with the text `Invalid JSON`. The body must carry every
field of the item; a missing field or a field of the wrong type is not
turned into a client error.

Listing returns items ordered by id and takes optional query parameters; only
the first one present, in this order, is used:

- `search=<text>`: items whose name contains the text (case-sensitive)
- `sort=price`, `sort=alcPercentage` or `sort=alcoholPercentage`: drinks are
  ordered by alcohol percentage and foods by price, whichever of the three
  keys is given; any other value leaves the order by id
- `isAlc=true|false`: drinks that are, or are not, alcoholic
- `isHot=true|false`: foods that are, or are not, hot

Only `true` and `TRUE` count as true for `isAlc` and `isHot`.

A drink looks like this:

    {"id": "101", "name": "Water", "price": 2, "fullSipsAmount": 4,
     "sipsAmount": 4, "isAlc": false, "alcPercentage": 0}

A food looks like this:

    {"id": "1", "name": "Pizza", "price": 20, "fullBitesAmount": 8,
     "bitesAmount": 8, "isHot": true}

## Using it as a library

    from velvetbar.drink import Drink
    from velvetbar.food import Food
    from velvetbar.bartender import Bartender

    cola = Drink("1", "Cola", 10, 5, True, 40)   # id, name, price, sips, is_alc, alc_percentage
    cola.sip()      # one sip fewer; returns a line describing it
    cola.chug()     # empty
    cola.refill()   # back to full_sips

    pizza = Food("1", "Pizza", 20, 8, True)      # id, name, price, bites, is_hot
    pizza.bite()
    pizza.finish()
    pizza.reorder()

    john = Bartender("John Doe")
    john.add_consumable(cola)
    john.consumables    # [cola]

Sipping or chugging an empty drink, refilling a full one, biting or finishing
food that is gone, and reordering food that is untouched all raise
`ValueError`.

`Drink` and `Food` both derive from `velvetbar.consumable.Consumable` and
offer `from_json`, `to_json`, `update_from_json` and `is_special` (alcoholic
for a drink, hot for a food).

`velvetbar.persistence.save_to_file(items, filename)` writes a mapping of
items, ordered by key, as a JSON array and returns `False` if the file cannot
be written. `load_from_file(kind, filename)` reads such a file back into a
dictionary keyed by item id, or an empty dictionary if the file cannot be
opened.

`velvetbar.api.ConsumableAPI(kind, consumables)` holds the request handlers
(`create`, `read`, `read_all`, `update`, `delete`) for one kind of item; each
returns a `velvetbar.api.Response` with a status, a body and headers. The
functions `search_consumables`, `sort_consumables` and `filter_consumables`
behind the listing parameters are in the same module.
`velvetbar.server.create_app(drinks_api, foods_api)` builds the Flask
application around two of them.

## What it does not do

- Bartenders exist only in the library; there are no HTTP routes for them.
- There is no authentication and no locking: anyone who can reach the port
  can change the menu.
- The menu is saved only when the server stops normally; changes are lost if
  the process is killed.

## Running the tests

    pip install .[test]
    pytest