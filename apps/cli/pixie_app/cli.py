"""CLI entrypoint that turns a word into terminal block art or a PNG image."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from importlib import metadata

from pixie_core import (
    AppConfig,
    PixieError,
    configure_logging,
    get_logger,
    is_seekable,
    load_config,
    open_output,
    reset_logging,
)
from pixie_generator import Canvas, Seed
from pixie_renderer import PngRenderer, TerminalRenderer


class OutputFormat(str, Enum):
    TERMINAL = "term"
    PNG = "png"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        for item in cls:
            if item.value == value:
                return item
        raise ValueError(f"unsupported output format '{value}'")


def _installed_version() -> str:
    try:
        return metadata.version("pixie")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _output_format(value: str) -> OutputFormat:
    try:
        return OutputFormat.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _grid_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid size '{value}'") from exc
    if size < 0:
        raise argparse.ArgumentTypeError(f"size must not be negative, got {size}")
    return size


def execute(args: argparse.Namespace) -> int:
    logger = get_logger("cli")
    seed = Seed.from_word(args.word)
    canvas = Canvas.generate(args.size, seed)
    logger.info(
        "canvas generated",
        extra={
            "event": "canvas_generated",
            "word_len": len(args.word),
            "size": canvas.size,
            "color": canvas.color.value,
        },
    )

    with open_output(args.filename) as sink:
        if args.output is OutputFormat.TERMINAL:
            text = TerminalRenderer().render_text(canvas)
            try:
                sink.write(text.encode("utf-8"))
            except OSError as exc:
                raise PixieError.from_os_error(exc).with_context(f'cannot write to "{args.filename}"') from exc
        else:
            renderer = PngRenderer()
            try:
                if is_seekable(sink):
                    renderer.render(canvas, sink)
                else:
                    sink.write(renderer.render_bytes(canvas))
            except (OSError, ValueError) as exc:
                raise PixieError.from_image_error(exc).with_context(
                    f'cannot generate PNG to "{args.filename}"'
                ) from exc

    logger.info(
        "render finished",
        extra={"event": "render_finished", "output": str(args.output), "destination": args.filename},
    )
    return 0


def build_parser(cfg: AppConfig | None = None) -> argparse.ArgumentParser:
    cfg = cfg or AppConfig()
    parser = argparse.ArgumentParser(
        prog="pixie",
        description="Generate a symmetric pixel avatar from a word",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_installed_version()}")
    parser.add_argument(
        "-o",
        "--output",
        type=_output_format,
        default=OutputFormat.parse(cfg.render.output),
        help="format of the generated image (term=ascii characters, png=png file)",
    )
    parser.add_argument(
        "-s",
        "--size",
        type=_grid_size,
        default=cfg.render.size,
        help="size of the pixel grid",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="filename",
        default=cfg.render.filename,
        help="file where the image should be written. '-' is used to mean stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=cfg.logging.console,
        help="also log to stderr",
    )
    parser.add_argument("word", help="word used as a base value to generate the image")
    parser.set_defaults(func=execute)
    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    parser = build_parser(cfg)
    args = parser.parse_args(argv)
    logger = configure_logging(keep_files=cfg.logging.keep_log_files, console=args.verbose)
    try:
        return int(args.func(args))
    except PixieError as exc:
        logger.error(str(exc), extra={"event": "invocation_failed", "destination": args.filename})
        print(exc, file=sys.stderr)
        return 1
    finally:
        reset_logging()


if __name__ == "__main__":
    raise SystemExit(main())
