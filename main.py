import argparse

from tile_merge.config.game_config import GameConfig
from tile_merge.env.session import GameSession

HELP = "Keys: w/a/s/d, h/j/k/l or up/down/left/right to shift; n new game; e end game; q quit"


def run_session(session: GameSession) -> None:
    """Read commands from stdin until the player quits."""
    print(f"[main] {HELP}")
    session.render()
    while True:
        try:
            command = input("> ").strip().lower()
        except EOFError:
            break
        if command in ("q", "quit"):
            break
        if command in ("n", "new"):
            session.new_game()
            print("[main] new game")
            session.render()
            continue
        if command in ("e", "end"):
            session.end_game()
            print("[main] game ended")
            session.render()
            continue

        tick = session.handle_key(command)
        if tick is None:
            print(f"[main] unknown command {command!r}")
            continue
        if tick.ignored:
            print("[main] game is over - press n for a new game")
            continue
        session.render()
        if tick.game_over:
            print(f"[main] no moves left, final score={tick.score}")
    print(f"[main] exiting: score={session.score} best={session.score_best}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Play the tile merge game in a terminal")
    parser.add_argument("--size", type=int, default=4, help="Board side length")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--spawn-on-noop",
        action="store_true",
        help="Spawn a tile even when a shift moves nothing",
    )
    args = parser.parse_args()

    config = GameConfig(size=args.size, spawn_on_noop=args.spawn_on_noop)
    print(f"[main] starting: size={config.size} seed={args.seed}")
    run_session(GameSession(config, seed=args.seed))


if __name__ == "__main__":
    main()
