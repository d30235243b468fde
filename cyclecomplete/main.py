"""Entry point for CycleComplete.

Usage:
    python -m cyclecomplete.main [FILE]            # open the editor
    python -m cyclecomplete.main --debug FILE      # with debug logging
    python -m cyclecomplete.main --config PATH     # use another settings file
"""
import sys
import signal
import logging
import argparse


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        description="Plain-text editor with inline cycle autocompletion")
    parser.add_argument("file", nargs="?", help="File to open")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--config", metavar="PATH",
                        help="Settings file (default: ~/.config/cyclecomplete/config.json)")
    return parser


def run_editor(args):
    from PyQt5.QtWidgets import QApplication
    from cyclecomplete.config import Config
    from cyclecomplete.editor import EditorWindow
    from cyclecomplete.plugin import CycleAutocompletePlugin

    app = QApplication(sys.argv)
    app.setApplicationName("CycleComplete")

    logger = logging.getLogger(__name__)
    config = Config(args.config)
    logger.info("Loaded settings from %s", config.path)

    plugin = CycleAutocompletePlugin(config)
    window = EditorWindow(plugin)
    if args.file:
        window.open_file(args.file)
    window.show()

    return app.exec_()


def main(argv=None):
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    args = build_parser().parse_args(argv)
    setup_logging(args.debug)
    sys.exit(run_editor(args))


if __name__ == "__main__":
    main()
