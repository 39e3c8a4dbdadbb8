import argparse
import logging
from typing import List, Optional

from term2048.config import GameRules, ManagerRules, Objective, SimulationConfig
from term2048.controllers import available_controllers, build_controller
from term2048.errors import ExitSignal, GridFull
from term2048.manager import GameManager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term2048",
        description="Game of 2048 in the terminal, played by a human, at random or by Monte-Carlo rollouts",
    )
    parser.add_argument("-s", "--size", type=int, default=4, help="size of the grid on which the game is played")
    parser.add_argument("--spawn", type=int, default=1, help="number of tiles that spawn on the grid each turn")
    parser.add_argument("--no-clear", action="store_true", help="do not clear the terminal between displays")
    parser.add_argument("--display-skips", type=int, default=0,
                        help="skip the refresh of that many turns, lets the AIs play faster")
    parser.add_argument("--no-display", action="store_true", help="do not display the game while it is played")
    parser.add_argument("--delay", type=int, default=0, help="delay in ms between turns")
    parser.add_argument("--controller", choices=available_controllers(), default="player",
                        help="who plays the game")
    parser.add_argument("--simulations", type=int, default=100, help="playouts per candidate move (simulated)")
    parser.add_argument("--simulation-length", type=int, default=10, help="moves per playout (simulated)")
    parser.add_argument("--workers", type=int, default=1, help="threads running the playouts (simulated)")
    parser.add_argument("--objective", choices=[o.value for o in Objective], default=Objective.SCORE.value,
                        help="what the playouts try to maximise (simulated)")
    parser.add_argument("--seed", type=int, default=None, help="seed of the spawns and of the AI controllers")
    parser.add_argument("--max-turns", type=int, default=None, help="stop after that many turns")
    parser.add_argument("--color-seed", type=int, default=35, help="seed for the coloration of tiles")
    parser.add_argument("--gui", action="store_true", help="play in a pygame window instead of the terminal")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s | %(name)s | %(message)s")

    try:
        game_rules = GameRules(size=args.size, spawn_per_turn=args.spawn)
        manager_rules = ManagerRules(
            display=not args.no_display,
            display_skips=args.display_skips,
            clear_term=not args.no_clear,
            color_seed=args.color_seed,
            turn_duration=args.delay / 1000.0,
            max_turns=args.max_turns,
        )
        simulation = SimulationConfig(
            simulations_per_move=args.simulations,
            length_of_simulation=args.simulation_length,
            workers=args.workers,
            objective=Objective(args.objective),
        )
    except ValueError as e:
        parser.error(str(e))

    display = None
    keys = None
    if args.gui and not args.no_display:
        from term2048.gui_pygame import PygameDisplay, pygame_keys
        display = PygameDisplay(size=args.size, color_seed=args.color_seed, keep_keys=args.controller == "player")
        keys = pygame_keys()

    # distinct streams for the spawns and the controller
    controller_seed = None if args.seed is None else args.seed + 1
    controller = build_controller(args.controller, simulation=simulation, seed=controller_seed, keys=keys)
    manager = GameManager(controller, game_rules, manager_rules, display=display, seed=args.seed)

    try:
        manager.play_all()
        manager.print_display()
        print(f"[Info] stopped after {manager.game.turn_index} turns, score: {manager.game.score}")
        return 0
    except ExitSignal as e:
        print(f"[Info] {e}, score: {manager.game.score}, turns: {manager.game.turn_index}")
        return 0
    except GridFull as e:
        manager.print_display()
        print(f"[Game Over] {e}, score: {manager.game.score}, turns: {manager.game.turn_index}")
        return 1
    finally:
        controller.close()
        if display is not None:
            display.close()


if __name__ == "__main__":
    raise SystemExit(main())
