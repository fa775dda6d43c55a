"""Console presentation adapter."""

from typing import TYPE_CHECKING, Callable, Optional

from docadventure.models.character import Character
from docadventure.presentation.base import Presenter
from docadventure.security.input_sanitizer import InputSanitizer

if TYPE_CHECKING:
    from docadventure.engine.age_signal import AgeUpSignal

AGE_UP_COMMAND = "/age"


class ConsolePresenter(Presenter):
    """Plays the game on a terminal.

    Typing ``/age`` at any prompt queues an age-up and keeps waiting for the
    actual answer.
    """

    def __init__(
        self,
        age_signal: Optional["AgeUpSignal"] = None,
        sanitizer: Optional[InputSanitizer] = None,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.age_signal = age_signal
        self.sanitizer = sanitizer or InputSanitizer()
        self._read = read
        self._write = write

    def display(self, text: str) -> None:
        self._write(f"\n{text}\n")

    def await_input(self) -> str:
        while True:
            line = self.sanitizer.sanitize(self._read(">   "))
            if not line:
                continue
            if line.lower() == AGE_UP_COMMAND and self.age_signal is not None:
                self.age_signal.trigger()
                self._write("(You will age up after this turn.)")
                continue
            return line

    def show_stats(self, character: Character) -> None:
        lines = ["STATS:"]
        for label, value in character.stat_sheet():
            if label == "Achievement":
                continue
            lines.append(f"- {label}: {value}")
        lines.append("ACHIEVEMENTS:")
        lines.extend(f"- {achievement}" for achievement in character.achievements)
        self._write("\n".join(lines))
