import argparse
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from proximity.data_types import Point2D
from proximity.exceptions import ConfigurationError, InvalidPointFormat
from proximity.utils.config import AppConfig
from proximity.utils.number_formatting import format_for_editing

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH: Path = Path("./config.toml")
EXIT_USAGE_ERROR: int = 2


def parse_launch_arguments(argv: Sequence[str] | None = None) -> Namespace:
    """
    Получает параметры запуска утилиты.

    :param argv: Аргументы командной строки, по умолчанию sys.argv.
    :return: Пространство имен с полученными переменными.
    """
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="proximity",
        add_help=False,
        description="Операции над точками на плоскости, заданными в виде \"x, y\"",
        epilog="Точки с отрицательной координатой x без пробела после запятой (\"-1,2\") "
               "передаются после разделителя --, например: proximity format -- \"-1,2\""
    )
    parser.add_argument(
        '-h', '--help', action='help', default=argparse.SUPPRESS,
        help='Показывает сообщение с помощью и закрывает программу'
    )
    parser.add_argument(
        "--config", "-c", default=DEFAULT_CONFIG_PATH, type=Path,
        dest="config_path",
        help="Устанавливает путь до файла конфигурации, используется если файл существует"
    )

    commands = parser.add_subparsers(dest="command", required=True)
    distance_parser = commands.add_parser("distance", help="Выводит расстояние между двумя точками")
    distance_parser.add_argument("first", help="Первая точка")
    distance_parser.add_argument("second", help="Вторая точка")

    compare_parser = commands.add_parser("compare", help="Выводит результат сравнения точек: -1, 0 или 1")
    compare_parser.add_argument("first", help="Первая точка")
    compare_parser.add_argument("second", help="Вторая точка")

    format_parser = commands.add_parser("format", help="Выводит точку в каноническом виде")
    format_parser.add_argument("point", help="Точка")

    return parser.parse_args(argv)


def load_config(config_path: Path) -> AppConfig:
    """
    Загружает конфигурацию, если файл существует, иначе использует значения по умолчанию.

    :param config_path: Путь до файла конфигурации.
    :return: Конфигурация приложения.
    """
    if config_path.is_file():
        return AppConfig.from_toml(config_path)

    return AppConfig()


def execute(args: Namespace, config: AppConfig) -> str:
    """
    Выполняет команду и формирует текст вывода.

    :param args: Параметры запуска.
    :param config: Конфигурация приложения.
    :return: Текст результата.
    :raise InvalidPointFormat: Одна из точек задана неверно.
    """
    if args.command == "distance":
        first, second = Point2D.from_string(args.first), Point2D.from_string(args.second)
        return format_for_editing(
            first.distance(second),
            config.formatting.max_fraction_digits
        )

    if args.command == "compare":
        first, second = Point2D.from_string(args.first), Point2D.from_string(args.second)
        return str(first.compare_to(second))

    return str(Point2D.from_string(args.point))


def run(argv: Sequence[str] | None = None) -> int:
    """
    Точка входа утилиты командной строки.

    :param argv: Аргументы командной строки, по умолчанию sys.argv.
    :return: Код завершения.
    """
    args: Namespace = parse_launch_arguments(argv)

    try:
        config: AppConfig = load_config(args.config_path)

    except (ConfigurationError, ValidationError) as err:
        logging.basicConfig()
        logger.error("Failed to load configuration: %s", err)
        return EXIT_USAGE_ERROR

    logging.basicConfig(level=config.log_level)
    logger.debug("Running %s command", args.command)

    try:
        print(execute(args, config))

    except InvalidPointFormat as err:
        logger.error("%s", err)
        return EXIT_USAGE_ERROR

    return 0


def main() -> None:
    sys.exit(run())
