import argparse
import sys
import logging

from candicolor.config import apply_user_config, get_config
from candicolor.version import __version__ as VERSION

config = get_config()

REQUIRED_PYTHON_PACKAGES = config['required_python_packages']
DEFICIENCY_MODES = sorted(config['color_shift'])


def setup_logging(log_level=logging.INFO, log_file=None):
    """Set up logging configuration."""
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        filename=log_file,
        filemode='a'  # Append mode for logging to a file
    )
    if not log_file:  # If no log file, also log to stdout
        logging.getLogger().addHandler(logging.StreamHandler(sys.stdout))
    logging.getLogger('matplotlib').setLevel(logging.ERROR)
    logging.getLogger('fontTools').setLevel(logging.ERROR)


def check_python_packages():
    missing_packages = []
    for package in REQUIRED_PYTHON_PACKAGES:
        try:
            __import__(package)
        except ImportError:
            missing_packages.append(package)
    return missing_packages


def check_requirements():
    missing_packages = check_python_packages()
    if missing_packages:
        logging.error("The following requirements are not satisfied:")
        logging.error("Missing Python packages: %s", ", ".join(missing_packages))
        sys.exit(1)


def add_common_arguments(subparser):
    subparser.add_argument("--log-level", help="Set the logging level", default="INFO")
    subparser.add_argument("--log-file", help="Set the log output file", default=None)
    subparser.add_argument("--config", help="JSON file overriding the bundled configuration", default=None)


def build_parser():
    parser = argparse.ArgumentParser(prog="candicolor", description="candicolor: Assign distinct hues to candidates that co-occur on a timeline")
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {VERSION}')
    add_common_arguments(parser)
    subparsers = parser.add_subparsers(dest="command")

    # Color Command
    parser_color = subparsers.add_parser("color", help="Color candidates from a co-occurrence edge table")
    parser_color.add_argument("-e", "--edges_files", nargs='+', help="Edge TSV(s) with columns Candidate1, Candidate2, Occurrences; counts are summed across files", required=True)
    parser_color.add_argument("-c", "--candidates_file", help="Newline-separated candidates (default: every candidate in the inputs)", default=None)
    parser_color.add_argument("-r", "--releases_file", help="Release TSV with columns Candidate, Release", default=None)
    parser_color.add_argument("-d", "--color_deficiency", choices=DEFICIENCY_MODES, help="Color-vision-deficiency mode", default=None)
    parser_color.add_argument("-o", "--output_file", help="Output colors TSV", required=True)
    parser_color.add_argument("-p", "--plot_file", help="Also draw a hue wheel PNG", default=None)
    add_common_arguments(parser_color)

    # Repaint Command
    parser_repaint = subparsers.add_parser("repaint", help="Recompute hues from the indices of an existing colors TSV")
    parser_repaint.add_argument("-i", "--input_file", help="Colors TSV written by the color command", required=True)
    parser_repaint.add_argument("-d", "--color_deficiency", choices=DEFICIENCY_MODES, help="Color-vision-deficiency mode", default=None)
    parser_repaint.add_argument("-o", "--output_file", help="Output colors TSV", required=True)
    parser_repaint.add_argument("-p", "--plot_file", help="Also draw a hue wheel PNG", default=None)
    add_common_arguments(parser_repaint)

    # Plot Command
    parser_plot = subparsers.add_parser("plot", help="Draw a hue wheel PNG from a colors TSV")
    parser_plot.add_argument("-i", "--input_file", help="Colors TSV", required=True)
    parser_plot.add_argument("-o", "--output_file", help="Output PNG file", required=True)
    parser_plot.add_argument("--title", help="Plot title", default="Candidate hues")
    add_common_arguments(parser_plot)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging based on command-line arguments
    log_level = getattr(logging, args.log_level.upper(), logging.INFO)
    setup_logging(log_level=log_level, log_file=args.log_file)

    if args.config:
        apply_user_config(args.config)

    check_requirements()

    if args.command == "color":
        from .scripts.run_coloring import run_coloring
        run_coloring(args.edges_files, args.output_file, args.candidates_file, args.releases_file, args.color_deficiency, args.plot_file)
    elif args.command == "repaint":
        from .scripts.run_coloring import run_repaint
        run_repaint(args.input_file, args.output_file, args.color_deficiency, args.plot_file)
    elif args.command == "plot":
        from .scripts.run_coloring import run_plot
        run_plot(args.input_file, args.output_file, args.title)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
