"""Main CLI entry point for mailwright."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from mailwright.config.config_loader import ConfigError, ConfigLoader
from mailwright.models import RenderError
from mailwright.services.composer import DocumentError, MessageBuilder, load_document
from mailwright.services.rendering import MessageRenderer
from mailwright.storage.audit_log import AuditLog


def render_document(
    document_path: Path,
    output_path: Optional[Path] = None,
    config_path: Optional[Path] = None,
) -> bytes:
    """
    Build and render a message document.

    Args:
        document_path: JSON message document
        output_path: Optional file to write the rendered message to
        config_path: Optional custom config file path

    Returns:
        Rendered message bytes

    Raises:
        ConfigError: If the configuration is invalid
        FileNotFoundError: If the document doesn't exist
        DocumentError: If the document is invalid
        RenderError: If the message fails to render
    """
    # Load configuration
    config_loader = ConfigLoader(config_path)
    config = config_loader.load_app_config()

    audit_log = AuditLog(config.storage.get_audit_log_path())
    renderer = MessageRenderer(audit_log)

    document = load_document(document_path)
    builder = MessageBuilder(config.rendering, base_dir=document_path.parent)
    message = builder.build(document)

    label = document_path.name
    if output_path is None:
        return renderer.render(message, label)

    renderer.render_to_file(message, output_path, label)
    return output_path.read_bytes()


def cmd_render(args) -> int:
    """Render command."""
    try:
        data = render_document(args.document, args.output, args.config)
    except (ConfigError, FileNotFoundError, DocumentError, RenderError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        print(f"Rendered {len(data)} bytes to: {args.output}")
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.flush()

    return 0


def cmd_export_history(args) -> int:
    """Export render history command."""
    try:
        config = ConfigLoader(args.config).load_app_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    audit_log = AuditLog(config.storage.get_audit_log_path())

    output_path = Path(args.output) if args.output else Path("render_history.json")

    count = audit_log.export_render_history(output_path)

    print(f"Exported {count} render events to: {output_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="mailwright - MIME message renderer")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Render a JSON message document")
    render_parser.add_argument("document", type=Path, help="Message document (JSON)")
    render_parser.add_argument("--output", type=Path, help="Write the message to this file instead of stdout")
    render_parser.add_argument("--config", type=Path, help="Custom config file path")
    render_parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    export_parser = subparsers.add_parser("export", help="Export render history")
    export_parser.add_argument("--config", type=Path, help="Custom config file path")
    export_parser.add_argument("--output", type=Path, help="Output file path")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "render":
        return cmd_render(args)
    elif args.command == "export":
        return cmd_export_history(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
