"""Main entry point for dyntable."""

import argparse
import logging
import sys
from pathlib import Path

from .controller import DEFAULT_WIDTH, TableController
from .schema.decoder import DecodingError
from .schema.loader import DocumentLoader
from .theme.loader import ThemeLoader

logger = logging.getLogger(__name__)


def _document_factories(loader: DocumentLoader) -> dict:
    """Map each bundled document name to a function that loads it."""
    return {name: (lambda name=name: loader.load_named(name)) for name in loader.available()}


def parse_args(document_names: list[str]) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Dyntable - Schema-driven dynamic table renderer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-d", "--document",
        choices=document_names or None,
        default="product" if "product" in document_names else None,
        help="Bundled document to display (default: product)",
    )
    source.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="Table document to load (JSON, or YAML by extension)",
    )
    parser.add_argument(
        "-t", "--theme",
        default="default",
        help="Theme name from assets/themes (default: default)",
    )
    parser.add_argument(
        "-w", "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Table width in pixels (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Render the table to an image file and quit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def main() -> None:
    """Run dyntable."""
    loader = DocumentLoader()
    documents = _document_factories(loader)
    args = parse_args(sorted(documents))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        theme = ThemeLoader().load(args.theme)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Could not load theme: %s", e)
        sys.exit(1)

    if args.file:
        path = Path(args.file)
        documents = {path.stem: lambda: loader.load(path)}
        selected = path.stem
    else:
        selected = args.document

    if args.render:
        if selected is None:
            logger.error("No document to render")
            sys.exit(1)

        controller = TableController(theme=theme, width=args.width)
        try:
            controller.set_collection(documents[selected]())
        except (FileNotFoundError, DecodingError) as e:
            logger.error("Could not load document '%s': %s", selected, e)
            sys.exit(1)

        print("Dyntable - Schema-driven dynamic table renderer")
        print("=" * 40)
        print(f"Document contains {controller.number_of_items()} rows:")
        for cell in controller.cells:
            marker = "" if cell.supported else " (unsupported)"
            print(f"  - {cell.element.kind.value}: {cell.element.data}{marker}")

        output_path = Path(args.render)
        print(f"\nRendering to {output_path} ({args.width}px wide)...")
        controller.snapshot().save(str(output_path))
        print(f"Saved render to {output_path}")
    else:
        from .viewer import run_viewer

        print("\nOpening viewer...")
        run_viewer(documents=documents, default_document=selected, theme=theme, width=args.width)


if __name__ == "__main__":
    main()
