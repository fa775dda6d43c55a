"""Main game loop: the turn engine state machine."""

import logging
import random
import threading
from enum import Enum
from typing import Optional

from docadventure.agents.context_builder import TurnContextBuilder
from docadventure.agents.generator import ContentGenerator
from docadventure.config import (
    AFFIRMATIVE_ANSWERS,
    DEFAULT_SITUATION_PROBABILITY,
    GENERATION_FAILURE_MESSAGE,
    SCHEMA_ERROR_MESSAGE,
)
from docadventure.engine.achievements import AchievementTracker
from docadventure.engine.age_signal import AgeUpSignal
from docadventure.engine.stat_applier import StatApplier
from docadventure.engine.turn_draw import TurnDrawer
from docadventure.errors import GenerationFailure, SchemaError
from docadventure.models.character import Character
from docadventure.models.payloads import OutcomePayload, SituationPayload, TurnKind, TurnResult
from docadventure.presentation.base import Presenter
from docadventure.security.input_sanitizer import InputSanitizer
from docadventure.security.response_validator import ResponseValidator

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome to your new life. What should I call you?"

BRIEFING_TEXT = """Welcome to DocAdventure, {name}!

Game Instructions:
- Type your responses to make a choice; you can also answer with an option's number
- Age up at any time to skip ahead a year
- Your life stats update as you go on
- You can unlock achievements as the game progresses

Are you ready to begin your adventure? (Type 'yes' to start)"""


class GamePhase(str, Enum):
    """Phase of the game loop. There is no terminal phase."""

    NAMING = "naming"
    BRIEFING = "briefing"
    PLAYING = "playing"


class GameLoop:
    """Sequences turns for a single character, one step at a time.

    Naming and briefing collect the player's name and confirmation; every
    playing step applies queued age-ups and then runs one situation or event
    turn. Generator failures and malformed payloads never touch the
    character: the message is shown and the same turn kind is retried on the
    next step.
    """

    def __init__(
        self,
        generator: ContentGenerator,
        presenter: Presenter,
        age_signal: Optional[AgeUpSignal] = None,
        rng: Optional[random.Random] = None,
        situation_probability: float = DEFAULT_SITUATION_PROBABILITY,
        context_builder: Optional[TurnContextBuilder] = None,
        validator: Optional[ResponseValidator] = None,
    ) -> None:
        """
        Initialize game loop.

        Args:
            generator: Content generator (opaque, may block or fail)
            presenter: Presentation adapter for output and player input
            age_signal: Queue of age-up requests; a private one is created if omitted
            rng: Random source for personality stats and turn draws (seed it for reproducible games)
            situation_probability: Chance that a turn is a situation rather than an event
            context_builder: Builds generator requests
            validator: Validates generator responses
        """
        self.generator = generator
        self.presenter = presenter
        self.age_signal = age_signal or AgeUpSignal()
        self._rng = rng or random.Random()
        self._drawer = TurnDrawer(self._rng, situation_probability)
        self._context_builder = context_builder or TurnContextBuilder()
        self._validator = validator or ResponseValidator()

        self.phase = GamePhase.NAMING
        self.character: Optional[Character] = None
        self.turns_played = 0
        self._pending_name: Optional[str] = None
        self._retry_kind: Optional[TurnKind] = None
        # A situation the player already answered but whose outcome is still owed
        self._answered_situation: Optional[tuple[SituationPayload, str]] = None
        self._stopped = threading.Event()

    def run(self, max_steps: Optional[int] = None) -> None:
        """
        Run the loop until stopped.

        Args:
            max_steps: Optional bound on the number of steps, for embedders and tests
        """
        steps = 0
        while not self._stopped.is_set():
            if max_steps is not None and steps >= max_steps:
                return
            self.step()
            steps += 1

    def stop(self) -> None:
        """Ask the loop to stop after the current step."""
        self._stopped.set()

    def step(self) -> Optional[TurnResult]:
        """Advance the state machine by one step."""
        match self.phase:
            case GamePhase.NAMING:
                self._ask_name()
            case GamePhase.BRIEFING:
                self._brief()
            case GamePhase.PLAYING:
                return self.play_turn()
        return None

    def _ask_name(self) -> None:
        self.presenter.display(WELCOME_TEXT)
        name = self.presenter.await_input().strip()
        if not name:
            return
        self._pending_name = name
        self.phase = GamePhase.BRIEFING

    def _brief(self) -> None:
        self.character = Character.create(self._pending_name, self._rng)
        self.presenter.show_stats(self.character)
        self.presenter.display(BRIEFING_TEXT.format(name=self.character.name))

        answer = self.presenter.await_input()
        if InputSanitizer.is_affirmative(answer, AFFIRMATIVE_ANSWERS):
            # Age-ups requested before the game started do not count
            self.age_signal.drain()
            self.phase = GamePhase.PLAYING
            logger.info(f"Game started for '{self.character.name}'")
            return

        logger.info("Start not confirmed, restarting character creation")
        self.character = None
        self._pending_name = None
        self.phase = GamePhase.NAMING

    def process_age_ups(self) -> int:
        """Apply every queued age-up signal. Returns how many were applied."""
        count = self.age_signal.drain()
        for _ in range(count):
            self.age_up()
        return count

    def age_up(self) -> int:
        """Age the character by one year and show the age banner. No generator call."""
        if self.character is None:
            raise RuntimeError("Cannot age up before the character exists")
        age = self.character.age_up()
        self.presenter.display(f"--- Age {age} ---")
        self.presenter.show_stats(self.character)
        return age

    def play_turn(self) -> Optional[TurnResult]:
        """
        Play one turn: apply queued age-ups, then a situation or an event.

        Returns:
            TurnResult, or None if the generator failed or returned a malformed payload
        """
        if self.phase != GamePhase.PLAYING or self.character is None:
            raise RuntimeError(f"Cannot play a turn in phase '{self.phase.value}'")

        self.process_age_ups()

        if self._answered_situation is not None:
            kind = TurnKind.SITUATION
        else:
            kind = self._retry_kind or self._drawer.draw()

        try:
            if kind == TurnKind.SITUATION:
                result = self._play_situation()
            else:
                result = self._play_event()
        except GenerationFailure as e:
            logger.warning(f"Generation failed during {kind.value} turn, will retry: {e}")
            self._retry_kind = kind
            self.presenter.display(GENERATION_FAILURE_MESSAGE)
            return None
        except SchemaError as e:
            logger.warning(f"Discarding malformed {kind.value} payload, will retry: {e}")
            self._retry_kind = kind
            self.presenter.display(SCHEMA_ERROR_MESSAGE)
            return None

        self._retry_kind = None
        self.turns_played += 1
        self.presenter.show_stats(self.character)
        return result

    def _play_situation(self) -> TurnResult:
        character = self.character

        if self._answered_situation is None:
            context = self._context_builder.build_situation_context(character)
            situation = self._validator.validate_situation(self.generator.generate(context))
            self.presenter.display(self._format_situation(situation))

            answer = ""
            while not answer:
                answer = self.presenter.await_input().strip()
            character.commit_input(answer)
            self._answered_situation = (situation, answer)

        situation, answer = self._answered_situation
        choice = self.resolve_choice(situation, answer)
        context = self._context_builder.build_outcome_context(character, situation, choice)
        outcome = self._validator.validate_outcome(self.generator.generate(context), current=character.stats)
        self._answered_situation = None
        return self._resolve(TurnKind.SITUATION, outcome, choice)

    def _play_event(self) -> TurnResult:
        character = self.character
        context = self._context_builder.build_event_context(character)
        outcome = self._validator.validate_outcome(self.generator.generate(context), current=character.stats)
        return self._resolve(TurnKind.EVENT, outcome)

    def _resolve(self, kind: TurnKind, outcome: OutcomePayload, choice: Optional[str] = None) -> TurnResult:
        character = self.character
        stats = StatApplier.apply(character.stats, outcome.stats)
        achievements = AchievementTracker.record(character.achievements, outcome.achievement)
        unlocked = outcome.achievement if len(achievements) > len(character.achievements) else None

        character.stats = stats
        character.achievements = achievements

        self.presenter.display(outcome.text)
        if unlocked:
            self.presenter.display(f"Achievement unlocked: {unlocked}")
        logger.info(f"{kind.value} turn applied {outcome.stats} (achievement: {unlocked})")

        return TurnResult(kind=kind, text=outcome.text, delta=outcome.stats, achievement=unlocked, choice=choice)

    @staticmethod
    def resolve_choice(situation: SituationPayload, answer: str) -> str:
        """Map an option number (1-based) to its text; any other answer is used as typed."""
        if answer.isdigit() and 1 <= int(answer) <= len(situation.options):
            return situation.options[int(answer) - 1]
        return answer

    @staticmethod
    def _format_situation(situation: SituationPayload) -> str:
        options = "\n".join(f"{number}. {option}" for number, option in enumerate(situation.options, start=1))
        return f"{situation.text}\n\n{options}"
