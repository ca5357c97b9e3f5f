"""Allow running as python -m sentry_docs_ls."""

from sentry_docs_ls.cli.main import cli

if __name__ == "__main__":
    cli()
