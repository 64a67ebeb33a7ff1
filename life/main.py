"""
Sparse Game of Life - command line entry point.

Interactive mode asks for a world size and a population percentage, prints
generation zero, then asks before computing each following generation.
Batch mode (--generations N) runs N generations without asking.
"""

from __future__ import annotations
import argparse
import logging
from typing import Callable, List, Optional, Sequence

from life.config import LifeConfig, RenderParams, Strategy, WORLD_SIZES
from life.core import EvolutionEngine, World
from life.storage import load_world, save_world
from life.visualization import render_with


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CUSTOM_CHOICE = "Custom"
EMPTY_WORLD_NOTICE = "(empty world)"

Ask = Callable[[str], str]


def format_world(world: World, params: RenderParams) -> str:
    """Rendered world, or a notice when there is nothing to render."""
    if len(world) == 0:
        return EMPTY_WORLD_NOTICE
    return render_with(world, params)


# ----- prompts -----

def ask_grid_size(ask: Ask = input) -> int:
    """
    Ask for the size of the initial world.

    Accepts the menu number or label; an empty answer picks the first entry.
    """
    choices = list(WORLD_SIZES) + [CUSTOM_CHOICE]
    print("Choose the initial size of the world")
    for i, label in enumerate(choices, start=1):
        print(f"  {i}. {label}")

    while True:
        answer = ask(f"World size [1-{len(choices)}] (default: 1): ").strip()
        if not answer:
            choice = choices[0]
        elif answer.isdigit() and 1 <= int(answer) <= len(choices):
            choice = choices[int(answer) - 1]
        elif answer in choices:
            choice = answer
        else:
            print(f"Please pick one of 1-{len(choices)}")
            continue
        break

    if choice != CUSTOM_CHOICE:
        return WORLD_SIZES[choice]

    while True:
        answer = ask("Enter the custom size (as the number of cells on each side of the grid): ").strip()
        try:
            size = int(answer)
        except ValueError:
            size = 0
        if size >= 1:
            return size
        print("The size must be a positive integer")


def ask_population(ask: Ask = input, default: float = 25.0) -> float:
    """Ask for the population size as a percentage in (0, 100]."""
    while True:
        answer = ask(f"Choose the population size (as % of total cells) (default: {default:g}): ").strip()
        if not answer:
            return default
        try:
            population = float(answer)
        except ValueError:
            population = -1.0
        if 0 < population <= 100:
            return population
        print("The population must be a number greater than 0 and at most 100")


def confirm(message: str, ask: Ask = input) -> bool:
    """Yes/no question; an empty answer means yes, end of input means no."""
    while True:
        try:
            answer = ask(f"{message} [Y/n]: ").strip().lower()
        except EOFError:
            return False
        if answer in ("", "y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("Please answer 'y' or 'n'")


# ----- runs -----

def setup_world(config: LifeConfig, ask: Optional[Ask] = None, preset: Sequence[str] = ()) -> World:
    """
    Generate the random generation-zero World.

    When `ask` is given the grid size and population are asked for and
    stored in config.setup first, except those listed in `preset`.
    """
    if ask is not None:
        if "grid_size" not in preset:
            config.setup.grid_size = ask_grid_size(ask)
        if "population" not in preset:
            config.setup.population = ask_population(ask, default=config.setup.population)

    setup = config.setup
    world = World.random(setup.grid_size, setup.population, seed=setup.random_seed)
    print(f"Generated random {setup.grid_size}x{setup.grid_size} world "
          f"with {setup.population:g}% of populated cells!")
    return world


def run_interactive(world: World, engine: EvolutionEngine, config: LifeConfig, ask: Ask = input) -> World:
    """Print `world`, then one generation per confirmation."""
    print(format_world(world, config.render))

    current = world
    while confirm("Continue to next generation?", ask):
        current = engine.step(current)
        print(format_world(current, config.render))
        if config.stop.stop_when_extinct and current.population == 0:
            logger.info(f"World extinct at generation {engine.generation}")
            break
    return current


def run_batch(world: World, engine: EvolutionEngine, config: LifeConfig) -> World:
    """Print `world` and the next config.stop.max_generations generations."""
    print("Generation 0:")
    print(format_world(world, config.render))

    def show(next_world: World, generation: int) -> None:
        print(f"Generation {generation}:")
        print(format_world(next_world, config.render))

    engine.add_step_callback(show)
    result = engine.run(
        world,
        max_generations=config.stop.max_generations,
        store_history=config.evolution.store_history,
        history_stride=config.evolution.history_stride,
        stop_when_extinct=config.stop.stop_when_extinct,
    )

    logger.info(
        f"Stopped after {result.stats.generations} generations ({result.stop_reason}), "
        f"final population {result.final_world.population}"
    )
    return result.final_world


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Conway's Game of Life on an unbounded sparse grid")

    parser.add_argument('--config', type=str, default=None,
                       help='JSON configuration file')
    parser.add_argument('--size', type=int, default=None,
                       help='Grid size of the random initial world (skips the size prompt)')
    parser.add_argument('--population', type=float, default=None,
                       help='Percentage of populated cells (skips the population prompt)')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed (default: None)')
    parser.add_argument('--load', type=str, default=None,
                       help='Load the initial world from a coordinate file')
    parser.add_argument('--save', type=str, default=None,
                       help='Save the final world to a coordinate file')
    parser.add_argument('--delimiter', type=str, default=None,
                       help="Coordinate file delimiter (default: ',')")
    parser.add_argument('--generations', type=int, default=None,
                       help='Run N generations without asking (batch mode)')
    parser.add_argument('--strategy', choices=[s.value for s in Strategy], default=None,
                       help='Traversal strategy (default: stack)')
    parser.add_argument('--verbose', action='store_true',
                       help='Debug logging')
    return parser


def apply_args(config: LifeConfig, args: argparse.Namespace) -> LifeConfig:
    """Override config values with the ones given on the command line."""
    if args.size is not None:
        config.setup.grid_size = args.size
    if args.population is not None:
        config.setup.population = args.population
    if args.seed is not None:
        config.setup.random_seed = args.seed
    if args.delimiter is not None:
        config.storage.delimiter = args.delimiter
    if args.generations is not None:
        config.stop.max_generations = args.generations
    if args.strategy is not None:
        config.evolution.strategy = Strategy(args.strategy)
    return config


def main(argv: Optional[List[str]] = None, ask: Ask = input) -> int:
    """Command-line interface. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = LifeConfig.load(args.config) if args.config else LifeConfig()
        apply_args(config, args)

        issues = config.validate()
        if issues:
            for issue in issues:
                logger.error(f"Invalid configuration: {issue}")
            return 1

        engine = EvolutionEngine(strategy=config.evolution.strategy.value)
        storage = config.storage

        if args.load:
            world = load_world(args.load, delimiter=storage.delimiter, encoding=storage.encoding)
            logger.info(f"Loaded {world.population} cells from {args.load}")
        elif args.generations is None and (args.size is None or args.population is None):
            print("=== Conway's Game of Life ===")
            print("Please answer a couple of questions so I can generate a random world and start the game.")
            preset = [name for name, value in (('grid_size', args.size), ('population', args.population))
                      if value is not None]
            world = setup_world(config, ask, preset=preset)
        else:
            world = setup_world(config)

        if args.generations is None:
            final = run_interactive(world, engine, config, ask)
        else:
            final = run_batch(world, engine, config)

        if args.save:
            path = save_world(final, args.save, delimiter=storage.delimiter, encoding=storage.encoding)
            logger.info(f"Final world saved to: {path}")

    except EOFError:
        logger.error("No input: setup cancelled")
        return 1
    except (ValueError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1

    print("Goodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
