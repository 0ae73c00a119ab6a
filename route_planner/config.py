"""
Route Planner - Configuration
=============================
Default file names, output labels and logging setup.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# ============================================================================
# DEFAULT FILES
# ============================================================================
ROADS_FILE = "roads.txt"      # edge list: <source> <destination> <km>
ROUTES_FILE = "routes.txt"    # queries: <origin> <destination>
RESULT_FILE = "result.txt"

OUTPUT_FORMATS = ("text", "csv", "json")

# ============================================================================
# OUTPUT LABELS
# ============================================================================
# Kept verbatim, downstream consumers parse these lines.
ROUTE_HEADER = "Trasa: {origin} --> {destination}"
LABEL_UNKNOWN_NODE = "Brak informacji o polaczeniu"
LABEL_UNREACHABLE = "Trasa niemozliwa do wyznaczenia"
DISTANCE_UNIT = "km"

GRAPH_NODE_LINE = "Wezel: {node}"
GRAPH_EDGE_LINE = "Polaczenie {index}: {destination} (Odleglosc: {weight})"

PROMPT_ROADS = "Podaj nazwe pliku z polaczeniami drogowymi (graf): "
PROMPT_ROUTES = "Podaj nazwe pliku z trasami do wyznaczenia: "
PROMPT_OUTPUT = "Podaj nazwe pliku wyjsciowego: "

# ============================================================================
# LOGGING
# ============================================================================
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class PlannerConfig:
    """Options for a single planner run, filled in by the CLI."""
    roads_path: Path = Path(ROADS_FILE)
    routes_path: Path = Path(ROUTES_FILE)
    output_path: Path = Path(RESULT_FILE)
    output_format: str = "text"
    show_graph: bool = True
    plot_dir: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        self.roads_path = Path(self.roads_path)
        self.routes_path = Path(self.routes_path)
        self.output_path = Path(self.output_path)
        if self.plot_dir is not None:
            self.plot_dir = Path(self.plot_dir)
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {self.output_format!r}, "
                f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )


def configure_logging(level=DEFAULT_LOG_LEVEL):
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.WARNING),
                        format=LOG_FORMAT)
