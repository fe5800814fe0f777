# SitemapSift — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import os
import sys
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich import print

from .config import Settings
from .core.extract import FirecrawlClient, extract_urls
from .core.harvest import Harvester, HarvestOptions
from .core.robots import DiscoveryError
from .logging_config import configure_logging
from .storage.writers import MarkdownWriter
from .utils.io import read_lines
from .utils.net import build_session

app = typer.Typer(add_completion=False, no_args_is_help=True)
# single-command app so `sitemapsift [--days N] <url>` runs a harvest directly
harvest_app = typer.Typer(add_completion=False, no_args_is_help=True)

COMMANDS = ("harvest", "extract", "print-config")


def load_settings() -> Settings:
	try:
		return Settings()
	except ValidationError as e:
		raise typer.BadParameter(str(e), param_hint="SITEMAPSIFT_* environment")


@app.command()
def harvest(
	target: str = typer.Argument(..., help="Base site URL (https://example.com) or a direct sitemap URL (.xml / .xml.gz)"),
	days: Optional[int] = typer.Option(None, "--days", "-d", min=0, help="Keep URLs modified in the last N days (default 1)"),
	output_dir: Optional[str] = typer.Option(None, help="Directory for <host>_urls.txt"),
	workers: Optional[int] = typer.Option(None, min=1, help="Concurrent sitemap fetches"),
	max_depth: Optional[int] = typer.Option(None, min=0, help="Max sitemap index nesting (0 = unlimited)"),
	max_sitemaps: Optional[int] = typer.Option(None, min=0, help="Max sitemap documents fetched (0 = unlimited)"),
	timeout: Optional[float] = typer.Option(None, min=0.1, help="Per-request timeout (seconds)"),
	user_agent: Optional[str] = typer.Option(None, help="Override User-Agent"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Collect URLs modified in the last N days from a site's sitemaps."""
	cfg = load_settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=cfg.log_dir)
	harvester = Harvester(
		user_agent=user_agent or cfg.user_agent,
		output_dir=output_dir or cfg.output_dir,
		timeout=timeout or cfg.timeout,
		retries=cfg.retries,
		backoff=cfg.backoff,
		output_suffix=cfg.output_suffix,
	)
	opt = HarvestOptions(
		days=days if days is not None else cfg.days,
		workers=workers or cfg.workers,
		max_depth=max_depth if max_depth is not None else cfg.max_depth,
		max_sitemaps=max_sitemaps if max_sitemaps is not None else cfg.max_sitemaps,
	)
	try:
		res = harvester.harvest(target, opt)
	except ValueError as e:
		raise typer.BadParameter(str(e), param_hint="TARGET")
	except DiscoveryError as e:
		print(f"[bold red]No sitemaps found:[/bold red] {e}")
		raise typer.Exit(code=1)
	print(f"[bold]Found {res.count} unique URLs[/bold] modified on or after {res.cutoff}")
	print({
		"entry_points": len(res.entry_points),
		**res.stats.as_dict(),
		"output": res.output_path,
	})


harvest_app.command()(harvest)


@app.command()
def extract(
	input_file: str = typer.Option(..., "--input", "-i", help="Text file with one URL per line"),
	output_dir: str = typer.Option(..., "--output", "-o", help="Directory for the Markdown files"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Scrape every URL in a list through Firecrawl and save the Markdown."""
	cfg = load_settings()
	if not os.path.isfile(input_file):
		raise typer.BadParameter(f"Input file not found at: {input_file}", param_hint="--input")
	if not cfg.firecrawl_api_key:
		print("[bold red]FIRECRAWL_API_KEY environment variable is not set.[/bold red] Please export your API key.")
		raise typer.Exit(code=2)
	configure_logging(level=log_level or cfg.log_level, log_dir=cfg.log_dir)
	session = build_session(user_agent=cfg.user_agent, retries=cfg.retries, backoff=cfg.backoff)
	client = FirecrawlClient(session, cfg.firecrawl_api_key, endpoint=cfg.firecrawl_endpoint)
	summary = extract_urls(client, read_lines(input_file), MarkdownWriter(output_dir))
	print({"saved": len(summary.saved), "failed": len(summary.failed), "output": output_dir})


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	print(load_settings().public_dump())


def pick_app(args: List[str]) -> typer.Typer:
	"""Subcommand form when the first argument names a command or asks for help, else a bare harvest."""
	if not args or args[0] in COMMANDS or args[0] == "--help":
		return app
	return harvest_app


def main(args: Optional[List[str]] = None):
	args = sys.argv[1:] if args is None else list(args)
	pick_app(args)(args=args, prog_name="sitemapsift")


if __name__ == "__main__":
	main()
