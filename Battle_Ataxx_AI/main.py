"""Entry point for Battle Ataxx AI matches. Load config, wire players, start Ataxxgame."""

import yaml
from pathlib import Path

from Battle_Ataxx_AI.utils.cli import parse_args
from Battle_Ataxx_AI.utils.logger import log_event, move_reporter
from Battle_Ataxx_AI.Ataxxgame import Ataxxgame
from Battle_Ataxx_AI.Player import make_player
from Battle_Ataxx_AI.engine.pieces import RED, BLUE


PROJECT_DIR = Path(__file__).resolve().parent

MODES = {
    "ai-vs-ai": ("ai", "ai"),
    "human-vs-ai": ("human", "ai"),
    "ai-vs-human": ("ai", "human"),
    "human-vs-human": ("human", "human"),
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Battle_Ataxx_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def board_printer(legend):
    def render(board):
        print(board.render(legend=legend))

    return render


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    move_timeout = args.timeout or settings.get("move_timeout_seconds", 60)
    depth = args.depth or settings.get("search_depth", 4)
    mode = args.mode or settings.get("mode", "ai-vs-ai")
    blocks = args.block if args.block is not None else settings.get("blocks") or []
    show_board = args.show_board or settings.get("show_board", False)
    legend = args.legend or settings.get("legend", False)

    if mode not in MODES:
        raise ValueError(f"Unsupported mode: {mode}")
    red_kind, blue_kind = MODES[mode]
    reporter = move_reporter(log_event)
    red = make_player(red_kind, RED, depth=depth, reporter=reporter)
    blue = make_player(blue_kind, BLUE, depth=depth, reporter=reporter)

    game = Ataxxgame(
        move_timeout=move_timeout,
        red_player=red,
        blue_player=blue,
        blocks=blocks,
        logger=log_event,
        renderer=board_printer(legend) if show_board else None,
    )
    result = game.play()
    outcome = {RED: "Red wins", BLUE: "Blue wins"}
    print(outcome.get(result, "Draw"))


if __name__ == "__main__":
    main()
