"""CLI entry point for lead-gen asset generation."""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.status import Status
from rich.table import Table

from .backends import select_backend
from .config import load_settings
from .errors import LeadGenError
from .export import write_outreach_csv
from .main import build_assets
from .models import AssetBundle


def _print_bundle(console: Console, bundle: AssetBundle):
    console.print(Panel(bundle.icp, title="Ideal Customer Profile"))
    console.print(Panel(bundle.value_prop, title="Value Proposition"))
    for i, email in enumerate(bundle.emails, 1):
        console.print(Panel(email, title=f"Cold Email {i}"))

    console.print("\n[bold]Ad headlines[/]")
    for h in bundle.ad_headlines:
        console.print(f"  • {h}")

    console.print(Panel(bundle.landing.hero, title="Landing Hero"))
    for s in bundle.landing.sections:
        console.print(f"[bold]{s.title}[/]\n{s.body}\n")

    console.print("[bold]Discovery questions[/]")
    for i, q in enumerate(bundle.discovery_questions, 1):
        console.print(f"  {i}. {q}")

    console.print("\n[bold]Call script[/]")
    for b in bundle.call_script_bullets:
        console.print(f"  • {b}")

    table = Table(title="Personalized outreach")
    for col in ("Company", "Name", "Title", "Email", "CTA"):
        table.add_column(col)
    for r in bundle.personalized:
        table.add_row(r.company, r.contact_name, r.title, r.email, r.cta)
    console.print(table)


def _generate(args: argparse.Namespace, console: Console):
    payload = {
        "businessName": args.business_name,
        "industry": args.industry,
        "targetAudience": args.target_audience,
        "offer": args.offer,
        "tone": args.tone,
        "website": args.website,
    }
    backend = select_backend(load_settings())

    status = Status("", console=console)
    status.start()

    def on_progress(msg: str):
        status.update(f"[bold cyan]{msg}[/]")

    try:
        bundle = build_assets(payload, backend, on_progress=on_progress)
    finally:
        status.stop()

    if args.json:
        args.json.write_text(json.dumps(bundle.to_dict(), indent=2), encoding="utf-8")
        console.print(f"[bold green]Saved[/] bundle JSON to [bold]{args.json}[/]")
    if args.csv:
        write_outreach_csv(bundle.personalized, args.csv)
        console.print(f"[bold green]Saved[/] outreach CSV to [bold]{args.csv}[/]")
    if not args.quiet:
        _print_bundle(console, bundle)


def _serve(args: argparse.Namespace, console: Console):
    import uvicorn

    console.print(f"Serving on [bold]http://{args.host}:{args.port}[/]")
    uvicorn.run("leadgen_assets.web:app", host=args.host, port=args.port)


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="leadgen-assets",
        description="Generate ICP, cold emails, ads, landing copy and outreach rows for a business.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate an asset bundle")
    gen.add_argument("--business-name", required=True)
    gen.add_argument("--industry", required=True)
    gen.add_argument("--target-audience", required=True)
    gen.add_argument("--offer", required=True)
    gen.add_argument(
        "--tone",
        default="professional",
        help="professional, friendly, bold or technical (default: professional)",
    )
    gen.add_argument("--website", default="", help="Optional website URL")
    gen.add_argument("--json", type=Path, default=None, help="Write the bundle as JSON")
    gen.add_argument("--csv", type=Path, default=None, help="Write the outreach rows as CSV")
    gen.add_argument("-q", "--quiet", action="store_true", help="Don't print the bundle")

    serve = sub.add_parser("serve", help="Run the web app")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    args = parser.parse_args()

    console = Console()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        if args.command == "generate":
            _generate(args, console)
        else:
            _serve(args, console)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/]")
        sys.exit(1)
    except (LeadGenError, ValueError) as e:
        console.print(f"\n[bold red]Error:[/] {e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
