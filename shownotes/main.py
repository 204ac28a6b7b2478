"""
Main entry point for the episode show-notes generator.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from shownotes.config import config
from shownotes.core.brands import get_brand, merge_links, resolve_hosts
from shownotes.core.generator import EpisodeGenerator
from shownotes.core.prompts import prompt_for_seo_details
from shownotes.models.schemas import EpisodeRequest, OutputFormat, RenderedDocument, SEODetails, split_names
from shownotes.utils.error_handling import ShowNotesError, UserInputError, handle_unexpected_error, report_user_error
from shownotes.utils.helpers import STDIN_MARKER, build_output_path, read_text_source, write_text
from shownotes.utils.logger import logging

LINK_OPTIONS = ["youtube", "spotify", "apple", "anchor", "tiktok", "facebook", "instagram", "patreon", "misc"]
SEO_OPTIONS = ["main_keyword", "guest_expertise", "target_audience", "key_takeaways"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="searchers-episode",
        description="Generate SEO-ready episode show notes from a timestamps file.",
    )
    parser.add_argument("-t", "--title", help="Episode title (auto-suggested if omitted)")
    parser.add_argument("-g", "--guest", action="append", default=[],
                        help="Guest name(s); repeatable or comma-separated")
    parser.add_argument("--hosts", help="Comma-separated hosts (defaults to the brand's hosts)")
    parser.add_argument("-s", "--summary", help="1-3 sentence episode blurb (required)")
    parser.add_argument("-f", "--timestamps-file",
                        help="Plaintext timestamps file, or '-' for stdin (required)")
    parser.add_argument("-o", "--out", type=Path, help="Output file path (defaults to stdout)")
    parser.add_argument("--out-dir", type=Path, nargs="?", const=config.OUTPUT_DIR,
                        help="Write into this directory (default: $SHOWNOTES_OUTPUT_DIR) using a name derived from the title")
    parser.add_argument("--format", dest="output_format", choices=[f.value for f in OutputFormat],
                        default=OutputFormat.MARKDOWN.value, help="Output format")
    parser.add_argument("--keep-emoji", action="store_true", help="Keep emojis in labels")
    parser.add_argument("--no-dedupe", action="store_true",
                        help="Keep consecutive chapters with identical labels")

    parser.add_argument("--brand", default=config.DEFAULT_BRAND, help="Brand identifier")
    parser.add_argument("--brand-name", help="Override the brand display name")
    parser.add_argument("--brands-file", type=Path, default=None, help="Brand configuration JSON")

    for platform in LINK_OPTIONS:
        flags = [f"--{platform}"] + (["--mbk"] if platform == "misc" else [])
        parser.add_argument(*flags, dest=platform, help=f"Override the {platform} link")

    for field in SEO_OPTIONS:
        parser.add_argument(f"--{field.replace('_', '-')}", dest=field, help=f"SEO {field.replace('_', ' ')}")
    parser.add_argument("--no-seo", action="store_true", help="Skip the interactive SEO prompts")
    return parser


def collect_seo_details(args: argparse.Namespace) -> SEODetails:
    """SEO flags win; otherwise prompt unless prompting is disabled or stdin is taken."""
    flags = {field: getattr(args, field) for field in SEO_OPTIONS}
    if any(flags.values()):
        return SEODetails(**flags)
    if args.no_seo:
        return SEODetails()
    if args.timestamps_file == STDIN_MARKER or not sys.stdin.isatty():
        logging.info("Skipping SEO prompts: stdin is not interactive")
        return SEODetails()
    return prompt_for_seo_details()


def build_request(args: argparse.Namespace, timestamps_raw: str, seo: SEODetails, brand) -> EpisodeRequest:
    links = merge_links(brand.links, {p: getattr(args, p) for p in LINK_OPTIONS})
    hosts = resolve_hosts(split_names(args.hosts), brand)
    try:
        return EpisodeRequest(
            title=args.title,
            guests=args.guest,
            hosts=hosts,
            brand_name=args.brand_name or brand.name,
            summary=args.summary,
            timestamps_raw=timestamps_raw,
            links=links,
            seo=seo,
            keep_emoji=args.keep_emoji,
            dedupe_labels=not args.no_dedupe,
        )
    except ValidationError as e:
        raise UserInputError(f"invalid episode details: {e}") from e


def resolve_out_path(out: Path, extension: str, output_format: OutputFormat) -> Path:
    """
    Pick the --out destination for one rendered format.

    With both formats the JSON sits next to the Markdown, and an --out that
    already ends in .json keeps the Markdown under the .md suffix instead.
    """
    if output_format != OutputFormat.BOTH:
        return out
    if extension == "json":
        return out.with_suffix(".json")
    return out.with_suffix(".md") if out.suffix.lower() == ".json" else out


def write_document(document: RenderedDocument, args: argparse.Namespace) -> List[Path]:
    """
    Write the rendered document(s) to --out, --out-dir or stdout.

    Returns:
        Paths written (empty when printing to stdout)
    """
    output_format = OutputFormat(args.output_format)
    outputs = []
    if output_format in (OutputFormat.MARKDOWN, OutputFormat.BOTH):
        outputs.append(("md", document.markdown_text))
    if output_format in (OutputFormat.JSON, OutputFormat.BOTH):
        outputs.append(("json", document.json_text))

    if args.out is None and args.out_dir is None:
        for _, text in outputs:
            sys.stdout.write(text if text.endswith("\n") else text + "\n")
        return []

    written = []
    for extension, text in outputs:
        if args.out is not None:
            path = resolve_out_path(args.out, extension, output_format)
        else:
            path = build_output_path(args.out_dir, document.slug, extension)
        written.append(write_text(text, path))
        print(f"✅ Wrote {written[-1]}", file=sys.stderr)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the application from command line."""
    # Load environment variables
    load_dotenv()

    args = build_parser().parse_args(argv)

    try:
        if not args.summary or not args.summary.strip():
            raise UserInputError("--summary is required.")
        if not args.timestamps_file:
            raise UserInputError("--timestamps-file is required.")

        brand = get_brand(args.brand, args.brands_file)
        timestamps_raw = read_text_source(args.timestamps_file)
        seo = collect_seo_details(args)

        request = build_request(args, timestamps_raw, seo, brand)
        document = EpisodeGenerator(brand).generate(request, OutputFormat(args.output_format))
        write_document(document, args)
    except ShowNotesError as e:
        return report_user_error(e)
    except Exception as e:
        return handle_unexpected_error(
            e, {"brand": args.brand, "timestamps_file": args.timestamps_file, **config.get_paths()}
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
