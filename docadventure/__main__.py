"""Play DocAdventure in the terminal: ``python -m docadventure``."""

import argparse
import logging
import random

from docadventure.agents.generator import LLMContentGenerator
from docadventure.api.llm_config import LLMConfig, LLMConfigManager
from docadventure.config import DEFAULT_LLM_MODEL, DEFAULT_LLM_PROVIDER, DEFAULT_SITUATION_PROBABILITY
from docadventure.engine.age_signal import AgeUpSignal
from docadventure.engine.game_loop import GameLoop
from docadventure.presentation.console import AGE_UP_COMMAND, ConsolePresenter


def main() -> None:
    parser = argparse.ArgumentParser(description="A generated life simulation, one year at a time.")
    parser.add_argument("--provider", choices=["openai", "ollama"], default=DEFAULT_LLM_PROVIDER)
    parser.add_argument("--model", default=DEFAULT_LLM_MODEL)
    parser.add_argument("--seed", type=int, default=None, help="Seed for stats and turn draws")
    parser.add_argument("--situation-probability", type=float, default=DEFAULT_SITUATION_PROBABILITY)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format='[%(name)-19s - %(levelname)5s] %(message)s')

    config_manager = LLMConfigManager(LLMConfig(provider=args.provider, model=args.model))
    age_signal = AgeUpSignal()
    presenter = ConsolePresenter(age_signal=age_signal)
    loop = GameLoop(
        generator=LLMContentGenerator(llm_getter=config_manager.get_llm),
        presenter=presenter,
        age_signal=age_signal,
        rng=random.Random(args.seed),
        situation_probability=args.situation_probability,
    )

    print(f"(Type {AGE_UP_COMMAND} at any prompt to age up. Ctrl+C quits.)")
    try:
        loop.run()
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye.")


if __name__ == "__main__":
    main()
