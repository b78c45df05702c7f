"""Entry point for ``python -m ghupload``."""

from .workflow.cli import main as _main


def main() -> int:
	"""Invoke the workflow CLI."""

	return _main()


if __name__ == "__main__":
	raise SystemExit(main())
