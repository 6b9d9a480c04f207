import argparse
import logging
import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from retype.services.settings_store import SettingsStore
from retype.ui.practice_window import create_practice_window

DEFAULT_TEXT = "동해물과 백두산이 마르고 닳도록\n하느님이 보우하사 우리나라 만세"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Memorise a text by retyping it.")
    src = parser.add_mutually_exclusive_group()
    src.add_argument("--text", help="Answer text to retype (use \\n for line breaks).")
    src.add_argument("--file", help="UTF-8 file holding the answer text.")
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    parser.add_argument("--log-level", default=None, help="Override the log level from settings.")
    return parser.parse_args(argv)


def _target_text(args: argparse.Namespace) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8").rstrip("\n")
    if args.text:
        return args.text.replace("\\n", "\n")
    return DEFAULT_TEXT


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    settings = SettingsStore(settings_path=args.settings).get_practice_settings()
    level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        text = _target_text(args)
    except OSError as e:
        logging.getLogger(__name__).error("Cannot read answer file %s: %s", args.file, e)
        return 2

    app = QApplication.instance() or QApplication(sys.argv[:1])
    window = create_practice_window(text, settings_path=args.settings)
    window.resize(720, 420)
    window.show()
    window.editor.setFocus()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
