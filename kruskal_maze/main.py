import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'kruskal_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kruskal_maze.builder import MazeBuilder
from kruskal_maze.core.complexity import MazePostProcessor
from kruskal_maze.core.grid import InvalidConfigurationError

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Kruskal Maze: perfect maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=10, help="Maze Width (cells)")
    gen_parser.add_argument("--height", type=int, default=10, help="Maze Height (cells)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--rebuilds", type=int, default=1, help="Number of times to (re)build the maze")
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("kruskal_maze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        if args.rebuilds < 1:
            parser.error("--rebuilds must be at least 1")
        try:
            builder = MazeBuilder(args.width, args.height, seed=args.seed)
        except InvalidConfigurationError as e:
            parser.error(str(e))

        logger.info(f"Generating {args.width}x{args.height} maze with Kruskal...")
        for _ in range(args.rebuilds):
            t0 = time.time()
            builder.request_build()
            logger.debug(f"Generation complete in {time.time()-t0:.4f}s")

        grid = builder.grid
        stats = MazePostProcessor.calculate_stats(grid)
        logger.info(f"Stats: {stats}")
        logger.info(f"Perfect: {MazePostProcessor.is_perfect(grid)}")

        path = MazePostProcessor.solve(grid, (0, 0), (grid.width - 1, grid.height - 1))
        print(f"Done. Entrance-to-exit path length: {len(path)}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
