# gophkeeper

Building blocks for a keeper of private data: logins, free text, binary
blobs and bank card details, stored as named data units. The client half
keeps a local file cache so that previously fetched data stays readable
when the server fails; the server half stores accounts and units in a
SQLite database.

## Client: `gophkeeper.client`

### `gophkeeper.client.model`

- `UnitType`: `LOGIN = 1`, `TEXT = 2`, `BINARY = 3`, `CARD = 4`.
- `Unit` (`name`, `body`), `UnitBody` (`meta`, `data` as bytes) and
  `UnitMeta` (`type`, `valid_until`, where `None` means unset).
- `unit_to_json(unit)` writes a unit as one line of JSON, with the data in
  base64 and `valid_until` as an ISO 8601 time (`0001-01-01T00:00:00Z` when
  unset). `unit_from_json(line)` reads it back and raises `ValueError` on
  malformed input.

### `gophkeeper.client.config`

`CacheConfig` (`file_repo`, `valid_period` in days), `ServiceConfig` and
`ClientConfig`, gathered in `Config`. `get_config()` returns the defaults
with `valid_period` set to 1 day.

### `gophkeeper.client.cache`

`Cache(config)` keeps three files in `config.file_repo`, creating them if
missing: `dataList.txt` (unit names, one per line), `dataUnits.json` (one
JSON unit per line; unreadable lines are skipped) and `token.txt`.

- `token`: the session token, readable and assignable.
- `get_list()` / `sync_list(server_list)`: read or replace the list of names.
- `set_unit(unit)`: stores a copy marked valid for `valid_period` days from
  now and appends its name to the list.
- `get_unit(unit_name)`: returns the unit only if its name is listed, its
  data is cached and it has not expired; otherwise raises `NotFoundError`.
- `delete_unit(unit_name)`: removes the name from the list (the cached data
  itself is kept); raises `NotFoundError` if the name is not listed.
- `close()`: writes back only what changed. The cache is also a context
  manager that closes on exit.

### `gophkeeper.client.service`

`Service(config, client, cache)` joins a remote client with the cache. The
remote client is any object with the methods described by the
`RemoteClient` protocol (`register`, `authenticate`, `list`, `read`,
`write`, `delete`, `close`).

- `register(login, password)` and `login(login, password)` store the
  returned token in the cache.
- `list()` returns the server's names and syncs them into the cache. If the
  server call raises, it raises `OfflineError` whose `result` is the cached
  list.
- `read(unit_name)` returns the server's unit and caches it. If the server
  call raises, it raises `OfflineError` whose `result` is the cached unit,
  or returns an empty `Unit()` when the cache has no valid copy.
- `write(unit)` and `delete(unit_name)` go to the server first, then update
  the cache.
- `close()` closes the remote client and saves the cache.

### `gophkeeper.client.cli`

`build_parser()` returns the argument parser; `execute(service, argv)` runs
one command against a `Service` and returns an exit status (1 for a usage
error, 0 otherwise).

| Command | Alias      | Arguments                  |
|---------|------------|----------------------------|
| `rg`    | `register` | `<login> <password>`       |
| `lg`    | `login`    | `<login> <password>`       |
| `ls`    | `list`     |                            |
| `rd`    | `read`     | `<unitname>`               |
| `wr`    | `write`    | `<unitname> <type> <data>` |
| `dl`    | `delete`   | `<unitname>`               |

`<type>` is a `UnitType` number. Successful `rg`, `lg`, `wr` and `dl` print
`OK`; failures are written to standard error. When the service raises
`OfflineError`, `ls` and `rd` print `offline` and then the cached result.

```python
from gophkeeper.client.cache import Cache
from gophkeeper.client.cli import execute
from gophkeeper.client.config import get_config
from gophkeeper.client.service import Service

config = get_config()
service = Service(config.service, remote_client, Cache(config.cache))
execute(service, ["ls"])
service.close()
```

## Server: `gophkeeper.server`

- `gophkeeper.server.model`: `Unit` (`key`, `meta`, `data`), `UnitKey`
  (`user_id`, `unit_name`), `UnitMeta` (`type`, `data_sk`, `uploaded_at`)
  and `UnitType`.
- `gophkeeper.server.config`: `StoreConfig` (`db_dsn`), `LoggerConfig`
  (`log_level`), `ServiceConfig` and `ServerConfig`, gathered in `Config`.
  `get_config(argv, environ)` takes the DSN from the `-d` option, overridden
  by a non-empty `DATABASE_URI`, and otherwise uses a built-in default whose
  `dbname` is `gophkeeper`.
- `gophkeeper.server.logger`: `new_logger(config)` returns a logger writing
  JSON lines to standard error. Levels: `debug`, `info` (also for an empty
  setting), `warn`, `error`, `dpanic`, `panic`, `fatal`; anything else
  raises `ValueError`.
- `gophkeeper.server.store`: `Store(config)` opens a SQLite database. The
  DSN is either a file path or a `key=value` string whose `dbname` names the
  file; with neither, the database is in memory.
  - `auth_register(login, password)` returns a new user id, or raises
    `AlreadyExistsError` for a taken login.
  - `auth_login(login, password)` returns the user id found by login, or
    raises `NoRowsError`. The password is not checked.
  - `list(user_id)` returns the user's unit names in sorted order.
  - `read(user_id, unit_name)` returns a unit or raises `NoRowsError`.
  - `write(unit)` inserts a unit or raises `AlreadyExistsError`.
  - `delete(user_id, unit_name)` removes a unit or raises `NoRowsError`.
  - `close()` closes the database.
- `gophkeeper.server.service`: `Service(config, store, logger)` offers
  `list`, `read`, `write` and `delete` on top of a `Store`.

## What this package does not do

- There is no network layer: no remote client implementing `RemoteClient`
  and no server listening for requests. A `Service` needs a remote client
  supplied by the caller.
- The server side issues no tokens and checks none; accounts are identified
  by user id only.
- No console command is installed; the command line is reached through
  `execute(service, argv)`.
- Stored data and passwords are kept as given, without encryption.

## Tests

The test suite uses pytest, which comes with the `test` extra.