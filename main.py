#!/usr/bin/env python3
"""
talkrow - grouped chat message rows demo

Main entry point for the demo application.
"""

import sys
import os
import argparse


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='talkrow - grouped chat message rows demo'
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Log level (default: INFO)'
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Layout config YAML file (default: $TALKROW_CONFIG or <config dir>/talkrow.yaml)'
    )
    parser.add_argument(
        '--rows',
        type=int,
        default=30,
        help='Number of message rows to show (default: 30)'
    )
    parser.add_argument(
        '--xdg',
        action='store_true',
        help='Use XDG Base Directory paths (~/.config, ~/.local/share)'
    )
    return parser.parse_args()


def main():
    """Main application entry point."""
    args = parse_args()

    # Set path mode BEFORE importing talkrow modules
    # (paths.py reads PATH_MODE at import time, so this must happen first)
    if args.xdg:
        os.environ['TALKROW_PATH_MODE'] = 'xdg'

    from PySide6.QtWidgets import QApplication

    from talkrow.utils import setup_main_logger, get_paths
    from talkrow.core import load_layout_config, install_layout_config, LayoutConfigError, MINIMUM_ROW_HEIGHT
    from talkrow.gui.demo_window import GroupedChatDemoWindow
    from talkrow.version import get_version_string

    paths = get_paths()
    logger = setup_main_logger(args.log_level)

    logger.info("=" * 60)
    logger.info(f"{get_version_string()} starting...")
    logger.info("=" * 60)
    logger.info(f"Config dir: {paths.config_dir}")
    logger.info(f"Log dir: {paths.log_dir}")

    # Layout config must be fixed before the first row exists
    try:
        config = install_layout_config(load_layout_config(args.config, config_dir=paths.config_dir))
    except LayoutConfigError as e:
        logger.error(f"Invalid layout config: {e}")
        print(f"\nERROR: {e}\n")
        return 1

    logger.info(f"Layout: font {config.default_font_size}pt, min row height {MINIMUM_ROW_HEIGHT}, theme {config.theme}")

    app = QApplication(sys.argv)
    app.setApplicationName("talkrow")

    window = GroupedChatDemoWindow(row_count=max(0, args.rows))
    window.show()

    exit_code = app.exec()
    logger.info(f"Exiting with code {exit_code}")
    return exit_code


if __name__ == '__main__':
    sys.exit(main())
