"""Console-driven game loop for Nightfall."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from nightfall.data.errors import DataError
from nightfall.domain.state import GameState
from nightfall.presentation.cli import config
from nightfall.presentation.cli.console import Console, TerminalConsole
from nightfall.presentation.cli.render import (
    TITLE,
    format_prompt,
    render_choices,
    render_events,
    render_hud,
    render_scene,
    render_summary,
)
from nightfall.presentation.cli.save_file import SaveFileStore
from nightfall.services import GameController, SaveService, load_default_registry

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid choice/command."
FAREWELL_MESSAGE = "Quitting…"


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, build the game and run the interactive session."""
    args = _parse_args(argv)
    debug = config.debug_enabled()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose or debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = config.load_config()
    save_path = Path(args.save_file) if args.save_file else settings["save_path"]
    try:
        controller = build_controller(scenes_dir=args.scenes, save_path=save_path)
    except DataError as exc:
        print(f"Unable to load scenes: {exc}", file=sys.stderr)
        return 1
    console = TerminalConsole(clear_screen=settings["clear_screen"] and not args.no_clear)
    return run_game(controller, console, debug=debug)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Nightfall: a short text adventure.")
    parser.add_argument("--scenes", help="Directory containing a custom scenes.json")
    parser.add_argument("--save-file", help="Path of the save file (overrides config and NIGHTFALL_SAVE_PATH)")
    parser.add_argument("--no-clear", action="store_true", help="Never clear the terminal between turns")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_controller(*, scenes_dir: Path | str | None = None, save_path: Path | str) -> GameController:
    """Construct the GameController with a validated registry and file-backed saves."""
    registry = load_default_registry(scenes_dir)
    save_service = SaveService(
        SaveFileStore(save_path),
        registry,
        start_scene_id=registry.start_scene_id,
    )
    logger.debug("Saves will be written to %s", save_path)
    return GameController(registry, save_service)


def run_game(controller: GameController, console: Console, *, debug: bool = False) -> int:
    """Play one session to a terminal scene or an explicit quit."""
    _title_screen(console)
    state = controller.new_game()
    while True:
        console.clear()
        render_hud(console, state)
        view = controller.get_scene_view(state)
        render_scene(console, view, debug=debug)
        if view.is_terminal:
            controller.enter_terminal_if_needed(state)
            break
        render_choices(console, view.choices)
        key = _prompt_input(console, controller, state)
        result = controller.handle_input(state, key)
        if result.quit:
            console.write_line(FAREWELL_MESSAGE)
            return 0
        state = result.state
        if result.events:
            render_events(console, result.events)
            _pause(console)
    render_summary(console, controller.summarize(state))
    return 0


def _title_screen(console: Console) -> None:
    console.write_line(TITLE)
    _pause(console, "Press Enter to begin...")
    console.clear()


def _prompt_input(console: Console, controller: GameController, state: GameState) -> str:
    allowed = controller.allowed_inputs(state)
    while True:
        console.write(format_prompt(allowed))
        key = controller.normalize_input(state, console.read_line())
        if key is not None:
            return key
        console.write_line(INVALID_INPUT_MESSAGE)


def _pause(console: Console, message: str = "Press Enter to continue...") -> None:
    console.write_line(message)
    console.read_line()
