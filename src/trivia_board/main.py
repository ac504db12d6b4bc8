import asyncio
import argparse
import logging
import os
import sys
import threading
from typing import Dict, Any, List, Optional, Tuple

from .catalog.jservice import JServiceCatalog
from .config import load_settings
from .constants import DEFAULT_PATHS, LOG_FORMATS
from .errors import ConfigError
from .game import GameSession
from .loader import BoardLoader
from .rendering import render_board

HELP_TEXT = "Commands: '<column> <row>' to reveal a clue, 'r' to restart, 'q' to quit"


def setup_logging(config: Dict[str, Any]) -> None:
    """Set up logging to a rotating file and the console."""
    log_file = config['logging']['file']
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()

    # Clear any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_level = getattr(logging, config['logging']['level'].upper(), logging.INFO)
    root_logger.setLevel(log_level)

    try:
        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config['logging'].get('max_size', 10485760),
            backupCount=config['logging'].get('backup_count', 5),
            encoding='utf-8'
        )
    except OSError as e:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        print(f"Warning: Could not set up rotating file handler: {e}")
    file_handler.setLevel(log_level)

    # Console only gets warnings so the board stays readable
    console_handler = logging.StreamHandler()
    console_handler.setLevel(max(log_level, logging.WARNING))

    file_handler.setFormatter(logging.Formatter(LOG_FORMATS['file']))
    console_handler.setFormatter(logging.Formatter(
        LOG_FORMATS['console'],
        datefmt=LOG_FORMATS['console_datefmt']
    ))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info(f"Logging initialized - Level: {config['logging']['level']}")
    root_logger.info(f"Log file: {log_file}")


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def validate_board_settings(board_settings: Dict[str, Any]) -> Optional[str]:
    """Return a message for the first board setting that cannot start a game, else None."""
    for key in ('category_count', 'max_offset', 'cell_width'):
        value = board_settings.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            return f"board.{key} must be a positive integer, got {value!r}"
    clues = board_settings.get('clues_per_category')
    if clues is not None and (isinstance(clues, bool) or not isinstance(clues, int) or clues < 1):
        return f"board.clues_per_category must be a positive integer or null, got {clues!r}"
    return None


async def read_line(prompt: str) -> str:
    """
    Read one line of input without blocking the event loop.

    The read happens on a daemon thread so an interrupted game can exit while
    ``input()`` is still waiting.

    Raises:
        EOFError: If input is closed
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def deliver(result: Optional[str], error: Optional[BaseException]) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)

    def worker() -> None:
        try:
            line, error = input(prompt), None
        except EOFError as e:
            line, error = None, e
        try:
            loop.call_soon_threadsafe(deliver, line, error)
        except RuntimeError:
            # Loop already closed; nobody is waiting for this line
            pass

    threading.Thread(target=worker, name='stdin-reader', daemon=True).start()
    return await future


def parse_command(line: str) -> Tuple:
    """
    Parse one line of user input.

    Returns:
        ('quit',), ('restart',), ('help',) or ('pick', column, row) with
        zero-based indices

    Raises:
        ValueError: If the line is not a recognised command
    """
    parts = line.strip().lower().split()
    if not parts:
        raise ValueError("Empty command")
    if parts[0] in ('q', 'quit', 'exit'):
        return ('quit',)
    if parts[0] in ('r', 'restart'):
        return ('restart',)
    if parts[0] in ('h', 'help', '?'):
        return ('help',)
    if len(parts) == 2 and all(part.isdigit() for part in parts):
        column, row = (int(part) for part in parts)
        if column < 1 or row < 1:
            raise ValueError("Columns and rows start at 1")
        return ('pick', column - 1, row - 1)
    raise ValueError(f"Unknown command: {line.strip()}")


async def start_game(session: GameSession, cell_width: int) -> None:
    print("Loading...")
    if await session.restart():
        print(render_board(session.board, cell_width))
    else:
        print(f"Could not load a board: {session.last_error}")
        if session.is_stale:
            print("(showing the previous board)")
            print(render_board(session.board, cell_width))


async def play(session: GameSession, cell_width: int) -> None:
    """Interactive loop: read commands until the player quits or input ends."""
    print(HELP_TEXT)
    while True:
        try:
            line = await read_line("> ")
        except EOFError:
            return

        try:
            command = parse_command(line)
        except ValueError as e:
            print(e)
            continue

        if command[0] == 'quit':
            return
        if command[0] == 'help':
            print(HELP_TEXT)
        elif command[0] == 'restart':
            await start_game(session, cell_width)
        else:
            _, column, row = command
            try:
                text = session.click(column, row)
            except (IndexError, RuntimeError) as e:
                print(e)
                continue
            print(text)
            print(render_board(session.board, cell_width))


async def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Trivia board game backed by the jService catalog')
    parser.add_argument('--config', type=str, default=DEFAULT_PATHS['config_file'],
                        help='Path to configuration file')
    parser.add_argument('--categories', type=positive_int, help='Number of categories on the board (default: 6)')
    parser.add_argument('--log-level', type=str, help='Logging level (overrides config)')
    parser.add_argument('--no-interactive', action='store_true',
                        help='Load and print one board, then exit')
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        print(f"Error loading configuration: {e}")
        return 1

    if args.categories is not None:
        settings['board']['category_count'] = args.categories
    if args.log_level:
        settings['logging']['level'] = args.log_level

    problem = validate_board_settings(settings['board'])
    if problem:
        parser.error(f"{problem} (from {args.config})")

    setup_logging(settings)
    board_settings = settings['board']

    async with JServiceCatalog(settings['catalog']) as catalog:
        loader = BoardLoader(
            catalog,
            clues_per_category=board_settings.get('clues_per_category'),
            concurrency=settings['catalog'].get('concurrency')
        )
        session = GameSession(loader, board_settings['category_count'], board_settings['max_offset'])

        await start_game(session, board_settings['cell_width'])
        if args.no_interactive:
            return 0 if session.board is not None and not session.is_stale else 1
        await play(session, board_settings['cell_width'])

    return 0


def cli() -> None:
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print()
        sys.exit(130)


if __name__ == '__main__':
    cli()
