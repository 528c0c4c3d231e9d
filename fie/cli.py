import argparse
import logging
import os
from typing import List, Optional

import yaml

from fie import __version__
from fie.config import COLOR_MODES, ListingConfig
from fie.exceptions import EnumerationDeniedError, PathNotFoundError
from fie.lister import Lister
from fie.local import LocalConnector
from fie.renderer import Renderer, make_console

LOGGER = logging.getLogger(__name__)

MISSING_PATH_MESSAGE = 'No such path in filesystem.'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fie',
        description='List directory content with permissions, size and modification time.'
    )
    parser.add_argument('path', nargs='?', type=str, help='directory to list instead of the current one')
    parser.add_argument('--version', action='version', version=f'fie {__version__}')
    parser.add_argument('--config_path', type=str, help='path to configuration file')
    parser.add_argument('--links', action='store_true', default=None, dest='show_link_targets',
                        help='show symlink targets')
    parser.add_argument('--color', choices=COLOR_MODES, help='color output mode')
    parser.add_argument('--log_level', type=str, help='logging level')
    return parser


def load_config(args: argparse.Namespace) -> ListingConfig:
    config = ListingConfig.from_yaml(args.config_path) if args.config_path else ListingConfig()
    return config.override(
        show_link_targets=args.show_link_targets,
        color=args.color,
        log_level=args.log_level
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args)
    except (OSError, ValueError, yaml.YAMLError) as err:
        parser.error(str(err))

    logging.basicConfig(
        format='%(asctime)s:%(name)s:%(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        level=config.log_level.upper(),
    )

    renderer = Renderer(make_console(config.color), make_console(config.color, stderr=True))
    lister = Lister(LocalConnector(), renderer, show_link_targets=config.show_link_targets)
    path = args.path if args.path is not None else os.getcwd()
    try:
        lister.run(path)
    except PathNotFoundError as err:
        LOGGER.debug(err)
        renderer.print_error(MISSING_PATH_MESSAGE)
        return 1
    except EnumerationDeniedError as err:
        LOGGER.debug(err)
        renderer.print_error(str(err))
        return 1
    return 0
