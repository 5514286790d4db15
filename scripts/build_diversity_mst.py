"""
Command line interface to regenerate the diversity MST index.html file.

This script runs the full pipeline (table loading, record merging, node
construction, complete graph, Kruskal MST, stats, Plotly figure build) and
writes a standalone HTML file containing the visualization.

Usage examples (from project_root):

  python scripts/build_diversity_mst.py
  python scripts/build_diversity_mst.py --output web/index.html
  python scripts/build_diversity_mst.py --gender data/gender.xlsx --race data/race.csv
  python scripts/build_diversity_mst.py --log-level DEBUG --dry-run
  python scripts/build_diversity_mst.py --career-path "Administrative occupations" "Chief executives"

In dry run mode, the generated HTML is written to standard output instead
of a file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# ---------------------------------------------------------------------------
# Path setup so "diversitygraph" can be imported when running this file directly
# ---------------------------------------------------------------------------

CURRENT_FILE_PATH: Path = Path(__file__).resolve()
PROJECT_ROOT_DIRECTORY: Path = CURRENT_FILE_PATH.parents[1]
SOURCE_DIRECTORY: Path = PROJECT_ROOT_DIRECTORY / "src"

if str(SOURCE_DIRECTORY) not in sys.path:
  sys.path.insert(0, str(SOURCE_DIRECTORY))

from diversitygraph.career_path import (  # type: ignore  # noqa: E402
    build_career_graph,
    career_path_cost,
    shortest_career_path,
)
from diversitygraph.config import DiversityGraphConfig  # type: ignore  # noqa: E402
from diversitygraph.data_io import load_occupation_records  # type: ignore  # noqa: E402
from diversitygraph.html_builder import build_diversity_html  # type: ignore  # noqa: E402


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def parse_command_line_arguments(argv=None) -> argparse.Namespace:
  """
  Parse command line arguments for the build_diversity_mst script.

  Returns
  -------
  argparse.Namespace
      An object with attributes:
        - output_path: str, where to write the generated HTML file
        - gender_path / race_path: optional table overrides
        - log_level: str, logging level name
        - dry_run: bool, whether to write HTML to stdout instead of a file
        - career_path: optional [start, end] pair of occupations
  """
  argument_parser = argparse.ArgumentParser(
      description="Regenerate the diversity MST index.html visualization file."
  )

  default_output_path = PROJECT_ROOT_DIRECTORY / "index.html"

  argument_parser.add_argument(
      "-o",
      "--output",
      dest="output_path",
      default=str(default_output_path),
      help=(
          "Path to write the generated HTML file. "
          f"Defaults to {default_output_path}"
      ),
  )

  argument_parser.add_argument(
      "--gender",
      dest="gender_path",
      default=None,
      help="Gender table (.csv or .xlsx). Defaults to the configured path.",
  )

  argument_parser.add_argument(
      "--race",
      dest="race_path",
      default=None,
      help="Race table (.csv or .xlsx). Defaults to the configured path.",
  )

  argument_parser.add_argument(
      "--log-level",
      dest="log_level",
      default="INFO",
      choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
      help="Logging verbosity. Defaults to INFO.",
  )

  argument_parser.add_argument(
      "--dry-run",
      dest="dry_run",
      action="store_true",
      help="If provided, write the generated HTML to standard output instead of a file.",
  )

  argument_parser.add_argument(
      "--career-path",
      dest="career_path",
      nargs=2,
      metavar=("START", "END"),
      default=None,
      help="Print the lowest pay gap path between two occupations and exit.",
  )

  return argument_parser.parse_args(argv)


# ---------------------------------------------------------------------------
# Main build routine
# ---------------------------------------------------------------------------


def configure_logging(log_level_name: str) -> None:
  """
  Send diversitygraph log records to standard error.

  Standard output is kept free for the HTML document in dry run mode and
  for career path listings. An unrecognised level name falls back to INFO,
  which shows the pipeline milestones (tables loaded, records merged, MST
  selected).
  """
  log_level = logging.getLevelName(log_level_name.upper())
  if not isinstance(log_level, int):
    log_level = logging.INFO

  logging.basicConfig(
      level=log_level,
      stream=sys.stderr,
      format="[%(asctime)s] %(levelname)s in %(name)s: %(message)s",
  )


def build_configuration(arguments: argparse.Namespace) -> DiversityGraphConfig:
  """Create the default configuration with any table paths from the command line."""
  configuration = DiversityGraphConfig()
  if arguments.gender_path:
    configuration.gender_data_path = Path(arguments.gender_path)
  if arguments.race_path:
    configuration.race_data_path = Path(arguments.race_path)
  return configuration


def write_output(document: str, destination: str, to_stdout: bool) -> Optional[Path]:
  """
  Save the rendered diversity MST page.

  The page goes to `destination` (missing parent folders are created) and
  the resolved path is returned. With `to_stdout` the page is printed
  instead, always ending in a newline, and None is returned.
  """
  logger = logging.getLogger(__name__)

  if to_stdout:
    logger.info("Printing the diversity MST page (%d characters)", len(document))
    sys.stdout.write(document if document.endswith("\n") else document + "\n")
    return None

  page_path = Path(destination).resolve()
  page_path.parent.mkdir(parents=True, exist_ok=True)
  page_path.write_text(document, encoding="utf-8")

  logger.info("Wrote diversity MST page to %s", page_path)
  return page_path


def print_career_path(configuration: DiversityGraphConfig, start: str, end: str) -> None:
  """Print the lowest pay gap path between two occupations."""
  graph = build_career_graph(load_occupation_records(configuration))
  path = shortest_career_path(graph, start, end)

  if not path:
    sys.stdout.write(f"No career path from {start!r} to {end!r}\n")
    return

  sys.stdout.write(" > ".join(path) + "\n")
  sys.stdout.write(f"Total pay gap crossed: {career_path_cost(graph, path):.2f}\n")


def main(argv=None) -> int:
  """
  Entrypoint for the build_diversity_mst command line script.

  Returns
  -------
  int
      Process exit code. Zero indicates success.
  """
  arguments = parse_command_line_arguments(argv)
  configure_logging(arguments.log_level)

  logger = logging.getLogger(__name__)
  logger.debug("Command line arguments: %s", arguments)

  configuration = build_configuration(arguments)

  try:
    if arguments.career_path:
      print_career_path(configuration, *arguments.career_path)
      return 0

    html_string = build_diversity_html(configuration)
    write_output(
        document=html_string,
        destination=arguments.output_path,
        to_stdout=arguments.dry_run,
    )
  except Exception as exception:
    logger.exception("Failed to build diversity MST HTML document: %s", exception)
    return 1

  return 0


if __name__ == "__main__":
  sys.exit(main())
