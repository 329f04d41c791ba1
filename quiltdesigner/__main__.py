"""
Quilt pattern designer.

Usage:
    python -m quiltdesigner [--config PATH] [--log-level LEVEL]
"""

import argparse
import logging
import sys

from PySide6 import QtWidgets

from .config import DEFAULT_CONFIG_PATH, QuiltConfig
from .windows import MainWindow

logger = logging.getLogger("quiltdesigner")


def load_config(path) -> QuiltConfig:
    try:
        config = QuiltConfig.load(path)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Could not read config %s: %s", path, e)
        return QuiltConfig()

    errors = config.validate()
    if errors:
        for error in errors:
            logger.warning("Config %s: %s", path, error)
        logger.warning("Using default configuration")
        return QuiltConfig()
    return config


def main(argv=None):
    parser = argparse.ArgumentParser(description='Design two-color triangle quilt patterns')
    parser.add_argument('--config', default=str(DEFAULT_CONFIG_PATH),
                        help=f'JSON config file (default: {DEFAULT_CONFIG_PATH})')
    parser.add_argument('--log-level', default=None,
                        help='Logging level, overrides the config (e.g. DEBUG)')
    args, qt_args = parser.parse_known_args(argv)

    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    config = load_config(args.config)
    level = (args.log_level or config.log_level).upper()
    logging.getLogger().setLevel(getattr(logging, level, logging.INFO))

    app = QtWidgets.QApplication([sys.argv[0]] + qt_args)
    window = MainWindow(config)
    window.resize(1100, 850)
    window.show()
    if config.show_instructions:
        window.show_instructions()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
