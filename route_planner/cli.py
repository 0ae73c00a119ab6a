"""
Route Planner - Command Line Entry Point
========================================
Loads a road graph and a list of routes, resolves every route with
Dijkstra's algorithm and writes the results.

Usage:
    route-planner --roads roads.txt --routes routes.txt --output result.txt
    route-planner --prompt                  # ask for the file names
    route-planner --format csv --output result.csv --plot-dir plots
"""

import argparse
import logging
import sys

from route_planner import config
from route_planner.errors import GraphConsistencyError, InputFileError
from route_planner.loader import load_graph, load_queries
from route_planner.report import display_graph, write_results
from route_planner.resolver import resolve

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INCONSISTENT_GRAPH = 2


def build_parser():
    parser = argparse.ArgumentParser(
        description="Shortest road routes between cities (Dijkstra)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input formats:
  roads   one edge per line:  <source> <destination> <km>
  routes  one route per line: <origin> <destination>
Malformed lines are skipped.
        """
    )
    parser.add_argument('--roads', '-r', help=f'Road connections file (default: {config.ROADS_FILE})')
    parser.add_argument('--routes', '-q', help=f'Routes to resolve (default: {config.ROUTES_FILE})')
    parser.add_argument('--output', '-o', help=f'Result file (default: {config.RESULT_FILE})')
    parser.add_argument('--format', '-f', choices=config.OUTPUT_FORMATS, default='text',
                        help='Result file format')
    parser.add_argument('--show-graph', dest='show_graph', action=argparse.BooleanOptionalAction,
                        default=True, help='Print the loaded graph to the console')
    parser.add_argument('--plot-dir', help='Save a PNG for every resolved route into this directory')
    parser.add_argument('--log-level', default=config.DEFAULT_LOG_LEVEL,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    parser.add_argument('--prompt', action='store_true',
                        help='Ask for the file names interactively')
    return parser


def _ask(prompt, default):
    answer = input(prompt).strip()
    return answer or default


def config_from_args(args, interactive=None):
    """Resolve CLI arguments (and prompts, if needed) into a PlannerConfig."""
    if interactive is None:
        interactive = args.prompt or (
            sys.stdin.isatty() and None in (args.roads, args.routes, args.output)
        )

    roads, routes, output = args.roads, args.routes, args.output
    if interactive:
        roads = roads or _ask(config.PROMPT_ROADS, config.ROADS_FILE)
        routes = routes or _ask(config.PROMPT_ROUTES, config.ROUTES_FILE)
        output = output or _ask(config.PROMPT_OUTPUT, config.RESULT_FILE)

    return config.PlannerConfig(
        roads_path=roads or config.ROADS_FILE,
        routes_path=routes or config.ROUTES_FILE,
        output_path=output or config.RESULT_FILE,
        output_format=args.format,
        show_graph=args.show_graph,
        plot_dir=args.plot_dir,
        log_level=args.log_level,
    )


def run(cfg):
    """Load, resolve, write. Returns the list of RouteResult."""
    logger.info("Resolving routes from %s against %s", cfg.routes_path, cfg.roads_path)
    graph = load_graph(cfg.roads_path)
    queries = load_queries(cfg.routes_path)

    if cfg.show_graph:
        display_graph(graph)

    results = resolve(graph, queries)
    write_results(results, cfg.output_path, cfg.output_format)

    if cfg.plot_dir is not None:
        # matplotlib is only needed here
        from route_planner.visualize_network import plot_results
        plot_results(graph, results, cfg.plot_dir)

    return results


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    config.configure_logging(args.log_level)

    cfg = config_from_args(args)
    try:
        run(cfg)
    except InputFileError as e:
        logger.error("%s", e)
        print(str(e), file=sys.stderr)
        return EXIT_IO_ERROR
    except OSError as e:
        logger.error("Cannot write results to %s: %s", cfg.output_path, e)
        print(f"Cannot write results to {cfg.output_path}: {e}", file=sys.stderr)
        return EXIT_IO_ERROR
    except GraphConsistencyError as e:
        logger.error("Route resolution aborted: %s", e)
        print(f"Route resolution aborted: {e}", file=sys.stderr)
        return EXIT_INCONSISTENT_GRAPH
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
