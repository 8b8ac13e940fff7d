"""Step-through terminal driver for a game of War."""

from random import Random

import click

from config import AppConfig
from naipe.game import TickResult, WarGame
from naipe.logging_utils import get_logger, setup_logging

logger = get_logger(__name__)


@click.command()
def main() -> None:
    """Play a game of War, one trick per line of input.

    Press Enter to play the next trick. When input runs out the game plays
    itself to the end.
    """
    app_config = AppConfig()
    setup_logging(app_config.logging.level)

    rng = Random(app_config.game.seed)
    game = WarGame(rng=rng, face_down_cards=app_config.game.face_down_cards)
    logger.info("Starting War (seed=%s)", app_config.game.seed)

    stdin = click.get_text_stream("stdin")
    while game.tick() is TickResult.CONTINUE:
        stdin.readline()

    click.echo(f"{game.winner} Won!")


if __name__ == "__main__":
    main()
