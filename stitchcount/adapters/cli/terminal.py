"""Interactive terminal session.

Reads short commands from stdin and feeds them to the InputPort as the
same DOM-style raw events the browser page sends, so the terminal uses
the pointer input tier unchanged.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from stitchcount.core.models import Digit
from stitchcount.core.ports import InputPort

logger = logging.getLogger(__name__)

KEY_COMMANDS = {
    "up": "ArrowUp",
    "down": "ArrowDown",
    "right": "ArrowRight",
    "left": "ArrowLeft",
    "r": "r",
}

HELP_TEXT = """
Commands:

  up / down       increment / decrement the left digit
  right / left    increment / decrement the right digit
  r, reset        reset both digits
  tap <digit>     click a digit (increment it)
  press <digit>   press a digit's decrement control; press twice
                  quickly to reset that digit
  state           show the current digits
  help            show this help
  exit            quit

<digit> is "left" or "right".
"""


def parse_command(line: str) -> dict[str, Any] | None:
    """Turn a command line into a raw event.

    Returns:
        The raw event, or None if the line is not an event command.

    Raises:
        ValueError: If the command is unknown or its digit is invalid.
    """
    parts = line.strip().split()
    if not parts:
        return None

    command = parts[0].lower()
    if command in KEY_COMMANDS and len(parts) == 1:
        return {"type": "keydown", "key": KEY_COMMANDS[command]}

    if command == "reset" and len(parts) == 1:
        return {"type": "click", "target": {"id": "reset-all", "action": "reset"}}

    if command in ("tap", "press"):
        if len(parts) != 2:
            raise ValueError(f"Usage: {command} <left|right>")
        try:
            digit = Digit(parts[1].lower())
        except ValueError:
            raise ValueError(f"Unknown digit: {parts[1]}") from None
        if command == "tap":
            target = {"id": f"{digit.value}-digit", "digit": digit.value}
        else:
            target = {"id": f"{digit.value}-down", "digit": digit.value, "action": "down"}
        return {"type": "click", "target": target}

    raise ValueError(f"Unknown command: {line.strip()}. Type 'help' for commands.")


class TerminalSession:
    """REPL-like loop over an InputPort."""

    def __init__(
        self,
        controller: InputPort,
        read_line: Callable[[str], str] | None = None,
        write: Callable[[str], None] = print,
    ):
        """Initialize the session.

        Args:
            controller: InputPort receiving the events.
            read_line: Blocking prompt function, run in a worker thread.
                Defaults to the builtin input().
            write: Output function for help and errors.
        """
        self.controller = controller
        self.read_line = read_line or input
        self.write = write

    async def run(self) -> None:
        """Read and execute commands until `exit` or end of input."""
        logger.info("Starting terminal session. Type 'help' for commands or 'exit' to quit.")

        while True:
            try:
                line = await asyncio.to_thread(self.read_line, "stitches> ")
            except EOFError:
                logger.info("EOF received, exiting")
                break
            except KeyboardInterrupt:
                logger.info("Interrupted by user")
                break

            if not await self.execute(line):
                break

    async def execute(self, line: str) -> bool:
        """Execute one command line.

        Returns:
            False if the session should end, True otherwise.
        """
        command = line.strip().lower()
        if command == "exit":
            return False
        if command == "help":
            self.write(HELP_TEXT)
            return True
        if command == "state":
            state = self.controller.state
            self.write(f"left={state.left} right={state.right}")
            return True

        try:
            raw = parse_command(line)
        except ValueError as e:
            self.write(str(e))
            return True

        if raw is not None:
            await self.controller.handle_input(raw)
        return True
