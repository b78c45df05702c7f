"""Command-line entry for the uploader."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from ..core.config_loader import load_uploader_config
from ..core.exceptions import ConfigError, NoInputError
from .pipeline import process_upload


CONFIG_HELP = """\
path/to/config.json (default: config.json beside the executable)

config file content example:
{
	"repo": "owner/projectName",
	"branch": "main",
	"token": "access token",
	"path": "image/2023"
}
"""


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="ghupload",
		description="Upload local files or URLs to a GitHub repository and print their download URLs",
		formatter_class=argparse.RawTextHelpFormatter,
	)
	parser.add_argument("-f", dest="config", default=None, help=CONFIG_HELP)
	parser.add_argument("-m", "--message", default=None, help="Commit message (default: config 'message' or 'upload file')")
	parser.add_argument("--debug", "-d", action="store_true", help="Verbose logging")
	parser.add_argument("sources", nargs="*", metavar="FILE_OR_URL", help="Local files or http(s) URLs to upload")
	return parser


def configure_logging(debug: bool = False) -> None:
	logger.remove()
	logger.add(sys.stderr, level="DEBUG" if debug else "INFO")


def main(argv: list[str] | None = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	configure_logging(args.debug)

	try:
		config = load_uploader_config(args.config)
	except ConfigError as e:
		print(e)
		return 1

	try:
		report = process_upload(args.sources, config, message=args.message)
	except NoInputError as e:
		print(e)
		return 1

	print(report.summary())
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
