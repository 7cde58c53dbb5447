"""Command-line interface of the password manager."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from typing import Any, Optional, Sequence

from gophkeeper.client.model import Unit, UnitBody, UnitMeta
from gophkeeper.client.service import OfflineError, Service


class _UsageError(Exception):
    pass


class _Exit(Exception):
    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)

    def exit(self, status: int = 0, message: Optional[str] = None) -> None:  # type: ignore[override]
        if message:
            sys.stderr.write(message)
        raise _Exit(status)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all commands and their aliases."""
    parser = _Parser(prog="gophkpr", description="GophKeeper менеджер паролей")
    commands = parser.add_subparsers(dest="command")

    register = commands.add_parser(
        "rg",
        aliases=["register"],
        help="Register: rg <login> <password>",
        description="Register регистрирует нового пользователя. Формат ввода: rg <login> <password>",
    )
    register.add_argument("login")
    register.add_argument("password")
    register.set_defaults(handler=_register)

    login = commands.add_parser(
        "lg",
        aliases=["login"],
        help="Login: lg <login> <password>",
        description="Login производит вход на устройстве. Формат ввода: lg <login> <password>",
    )
    login.add_argument("login")
    login.add_argument("password")
    login.set_defaults(handler=_login)

    listing = commands.add_parser(
        "ls",
        aliases=["list"],
        help="List",
        description="List возвращает список имен доступных данных",
    )
    listing.set_defaults(handler=_list)

    read = commands.add_parser(
        "rd",
        aliases=["read"],
        help="Read: rd <unitname>",
        description="Read возвращает единицу данных по имени. Формат ввода: rd <unitname>",
    )
    read.add_argument("unitname")
    read.set_defaults(handler=_read)

    write = commands.add_parser(
        "wr",
        aliases=["write"],
        help="Write: wr <unitname> <type> <data>",
        description="Write сохраняет единицу данных. Формат ввода: wr <unitname> <type> <data>",
    )
    write.add_argument("unitname")
    write.add_argument("type")
    write.add_argument("data")
    write.set_defaults(handler=_write)

    delete = commands.add_parser(
        "dl",
        aliases=["delete"],
        help="Delete: dl <unitname>",
        description="Delete удаляет единицу данных. Формат ввода: dl <unitname>",
    )
    delete.add_argument("unitname")
    delete.set_defaults(handler=_delete)

    return parser


def execute(service: Service, argv: Optional[Sequence[str]] = None) -> int:
    """Run one command against the service; return the process exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    except _UsageError as exc:
        sys.stderr.write(f"Ошибка выполнения GophKeeper '{exc}'\n")
        return 1
    except _Exit as exc:
        return exc.status
    handler = getattr(args, "handler", None)
    if handler is not None:
        handler(service, args)
    return 0


def _format_time(moment: Optional[datetime]) -> str:
    if moment is None:
        return "0001-01-01 00:00:00 +0000 UTC"
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    if moment.microsecond:
        text += f".{moment.microsecond:06d}".rstrip("0")
    if moment.tzinfo is not None:
        text += moment.strftime(" %z %Z")
    return text


def _format_value(value: Any) -> str:
    if isinstance(value, Unit):
        return "{" + f"{value.name} {_format_value(value.body)}" + "}"
    if isinstance(value, UnitBody):
        return "{" + f"{_format_value(value.meta)} {_format_value(value.data)}" + "}"
    if isinstance(value, UnitMeta):
        return "{" + f"{int(value.type)} {_format_time(value.valid_until)}" + "}"
    if isinstance(value, (bytes, bytearray)):
        return "[" + " ".join(str(byte) for byte in value) + "]"
    if isinstance(value, list):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    return str(value)


def _report(action) -> bool:
    try:
        action()
    except Exception as exc:
        sys.stderr.write(str(exc))
        return False
    return True


def _register(service: Service, args: argparse.Namespace) -> None:
    if _report(lambda: service.register(args.login, args.password)):
        print("OK")


def _login(service: Service, args: argparse.Namespace) -> None:
    if _report(lambda: service.login(args.login, args.password)):
        print("OK")


def _show(fetch) -> None:
    try:
        result = fetch()
    except OfflineError as exc:
        print(exc)
        result = exc.result
    except Exception as exc:
        sys.stderr.write(str(exc))
        return
    sys.stdout.write(_format_value(result))


def _list(service: Service, args: argparse.Namespace) -> None:
    _show(service.list)


def _read(service: Service, args: argparse.Namespace) -> None:
    _show(lambda: service.read(args.unitname))


def _write(service: Service, args: argparse.Namespace) -> None:
    try:
        unit_type = int(args.type)
    except ValueError as exc:
        sys.stderr.write(str(exc))
        return
    unit = Unit(
        name=args.unitname,
        body=UnitBody(meta=UnitMeta(type=unit_type), data=args.data.encode("utf-8")),
    )
    if _report(lambda: service.write(unit)):
        print("OK")


def _delete(service: Service, args: argparse.Namespace) -> None:
    if _report(lambda: service.delete(args.unitname)):
        print("OK")