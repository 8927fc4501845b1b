"""Entry point for the gobstones-board tool. Load settings, build a board, apply one command."""

import logging
import sys
from pathlib import Path

import yaml

from Gobstones_Core import __version__
from Gobstones_Core.Board import DEFAULT_HEAD, DEFAULT_HEIGHT, DEFAULT_WIDTH, Board
from Gobstones_Core.Color import Color
from Gobstones_Core.Direction import Direction
from Gobstones_Core.errors import BoardError
from Gobstones_Core.translations import bundled_translator
from Gobstones_Core.utils.cli import CLIApp, find_flag_value
from Gobstones_Core.utils.logger import follow_board, log_event

PROJECT_DIR = Path(__file__).resolve().parent
DEFAULT_SETTINGS = "config/settings.yaml"
SETTINGS_FLAGS = ("-s", "--settings")


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Gobstones_Core/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    if not path.is_file():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def board_from_settings(settings):
    board = settings.get("board") or {}
    return Board(
        board.get("width", DEFAULT_WIDTH),
        board.get("height", DEFAULT_HEIGHT),
        board.get("head", DEFAULT_HEAD),
    )


def _fail(builder, exc):
    builder.ensure_or_fail_and_exit(False, builder.t("errors.board", {"message": getattr(exc, "message", str(exc))}))


def load_board(builder, options, settings):
    """Board from the --in YAML description, or from the settings defaults."""
    if options.verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        if options.input_file:
            board = Board.from_definition(yaml.safe_load(builder.read()))
        else:
            board = board_from_settings(settings)
    except (BoardError, yaml.YAMLError) as exc:
        _fail(builder, exc)
    if options.verbose:
        follow_board(board)
        log_event(f"loaded {board.width}x{board.height} board")
    return board


def _board_options(builder):
    builder.input("cli.input", "cli.readError")
    builder.output("cli.output")
    builder.option(*SETTINGS_FLAGS, dest="settings", metavar="<filename>", default=DEFAULT_SETTINGS)
    builder.option("--verbose", description="cli.verbose", action="store_true")


def build_app(argv=None, environ=None):
    """Wire the gobstones-board commands. Language: --language, then the environment, then settings."""
    argv = list(argv or [])
    settings = load_settings(find_flag_value(argv, SETTINGS_FLAGS) or DEFAULT_SETTINGS)
    translator = bundled_translator()
    language = settings.get("language")
    if language and translator.has_locale(language):
        translator.set_locale(language)

    app = CLIApp(
        {
            "name": "gobstones-board",
            "version_number": __version__,
            "description": "cli.description",
            "help": "cli.help",
            "version": "cli.version",
            "language": "cli.language",
            "language_error": "cli.languageError",
        },
        translator=translator,
        argv=argv,
        environ=environ,
    )

    def show(builder, options):
        builder.write(str(load_board(builder, options, settings)))

    def resize(builder, options):
        board = load_board(builder, options, settings)
        try:
            board.change_size_to(options.width, options.height, options.from_origin)
        except BoardError as exc:
            _fail(builder, exc)
        builder.write(str(board))

    def move(builder, options):
        directions = []
        for key in options.directions:
            try:
                directions.append(Direction.from_key(key))
            except ValueError:
                builder.ensure_or_fail_and_exit(False, builder.t("errors.direction", {"direction": key}))
        board = load_board(builder, options, settings)
        try:
            for direction in directions:
                if options.to_edge:
                    board.move_head_to_edge_at(direction)
                else:
                    board.move_head_to(direction)
        except BoardError as exc:
            _fail(builder, exc)
        builder.write(str(board))

    def stats(builder, options):
        board = load_board(builder, options, settings)
        totals = board.fold_cells(
            lambda acc, cell: {color: acc[color] + cell.get_stones_of(color) for color in Color},
            dict.fromkeys(Color, 0),
        )
        lines = [builder.t("stats.head", {"x": board.head_x, "y": board.head_y})]
        Color.foreach(
            lambda color: lines.append(
                builder.t("stats.color", {"color": builder.t(f"colors.{color.name}"), "stones": totals[color]})
            )
        )
        lines.append(translator.pluralize(sum(totals.values()), "stats.stones"))
        builder.write("\n".join(lines))

    def configure_show(builder):
        _board_options(builder)
        builder.action(show)

    def configure_resize(builder):
        builder.argument("width", "commands.resize.width", type=int)
        builder.argument("height", "commands.resize.height", type=int)
        builder.option("--from-origin", description="commands.resize.fromOrigin", action="store_true")
        _board_options(builder)
        builder.action(resize)

    def configure_move(builder):
        builder.argument("directions", "commands.move.directions", nargs="+", metavar="DIR")
        builder.option("--to-edge", description="commands.move.toEdge", action="store_true")
        _board_options(builder)
        builder.action(move)

    def configure_stats(builder):
        _board_options(builder)
        builder.action(stats)

    app.command("show", "commands.show", configure_show)
    app.command("resize", "commands.resize.description", configure_resize)
    app.command("move", "commands.move.description", configure_move)
    app.command("stats", "commands.stats.description", configure_stats)
    return app


def main(argv=None):
    app = build_app(sys.argv[1:] if argv is None else argv)
    app.output_help_on_no_args()
    app.run()


if __name__ == "__main__":
    main()
