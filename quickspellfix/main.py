"""Entry point for QuickSpellFix.

Usage:
    python -m quickspellfix.main [FILE]      # editor window
    python -m quickspellfix.main --settings  # settings window only
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


def run_editor(path=None, debug=False):
    """Run the editor window with spelling commands."""
    from PyQt5.QtWidgets import QApplication
    from quickspellfix.config import Config
    from quickspellfix.commands import CommandDispatcher
    from quickspellfix.editor import EditorWindow

    app = QApplication(sys.argv)
    app.setApplicationName("QuickSpellFix")

    config = Config()
    setup_logging(debug or config.debug_logging)

    dispatcher = CommandDispatcher.from_config(config)
    window = EditorWindow(config, dispatcher, path=path)
    window.show()

    sys.exit(app.exec_())


def run_settings(debug=False):
    """Run the settings window alone."""
    from PyQt5.QtWidgets import QApplication
    from quickspellfix.config import Config
    from quickspellfix.settings_ui import SettingsWindow

    app = QApplication(sys.argv)
    app.setApplicationName("QuickSpellFix")

    config = Config()
    setup_logging(debug or config.debug_logging)

    window = SettingsWindow(config)
    window.show()

    sys.exit(app.exec_())


def main():
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    parser = argparse.ArgumentParser(description="QuickSpellFix")
    parser.add_argument("file", nargs="?", help="Text file to open")
    parser.add_argument("--settings", action="store_true",
                        help="Open the settings window only")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args()

    if args.settings:
        run_settings(debug=args.debug)
    else:
        run_editor(path=args.file, debug=args.debug)


if __name__ == "__main__":
    main()
