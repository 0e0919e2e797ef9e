"""CLI entrypoints for the ASCII clock server, one-off renders, and diagnostics."""

from __future__ import annotations

import argparse
import json
import time
from dataclasses import asdict
from pathlib import Path

from asciiclock_core import (
    AppConfig,
    PerformanceController,
    PerformanceTargets,
    build_doctor_payload,
    coerce_timestamp,
    load_config,
    render_clock,
)
from asciiclock_core.dispatch import geometry_from_config, render_scene, resolve_timezone
from asciiclock_core.logging_setup import configure_logging, install_crash_hooks
from asciiclock_renderer import ClipPolicy, buffer_to_image, preview_data_url


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _apply_overrides(cfg: AppConfig, args: argparse.Namespace) -> AppConfig:
    if getattr(args, "width", None) is not None:
        cfg.grid.width = args.width
    if getattr(args, "height", None) is not None:
        cfg.grid.height = args.height
    if getattr(args, "tz", None):
        cfg.clock.timezone = args.tz
    return cfg


def cmd_serve(args: argparse.Namespace) -> int:
    from .server import serve

    install_crash_hooks()
    cfg = load_config()
    return serve(cfg, host=args.host, port=args.port)


def cmd_render(args: argparse.Namespace) -> int:
    cfg = _apply_overrides(load_config(), args)
    frame = render_clock(
        coerce_timestamp(args.time),
        width=cfg.grid.width,
        height=cfg.grid.height,
        tz=resolve_timezone(cfg.clock.timezone),
        geometry=geometry_from_config(cfg),
        clip=ClipPolicy(cfg.render.clip),
    )
    print(frame.text)
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    cfg = _apply_overrides(load_config(), args)
    renderer = render_scene(
        coerce_timestamp(args.time),
        width=cfg.grid.width,
        height=cfg.grid.height,
        tz=resolve_timezone(cfg.clock.timezone),
        geometry=geometry_from_config(cfg),
        clip=ClipPolicy(cfg.render.clip),
    )
    if args.data_url:
        _print_json({"success": True, "data_url": preview_data_url(renderer.buffer, scale=args.scale)})
        return 0
    out = Path(args.out).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    buffer_to_image(renderer.buffer, scale=args.scale).save(out, format="PNG")
    _print_json({"success": True, "out": str(out)})
    return 0


def cmd_benchmark(args: argparse.Namespace) -> int:
    cfg = load_config()
    perf = PerformanceController(
        PerformanceTargets(
            cpu_percent_max=cfg.performance.cpu_percent_max,
            rss_mb_max=cfg.performance.rss_mb_max,
            fps_min=cfg.performance.fps_min,
        )
    )
    tz = resolve_timezone(cfg.clock.timezone)
    geometry = geometry_from_config(cfg)
    base = int(time.time())

    start = time.perf_counter()
    for i in range(args.frames):
        render_clock(base + i, width=cfg.grid.width, height=cfg.grid.height, tz=tz, geometry=geometry)
    elapsed = max(time.perf_counter() - start, 1e-9)

    # Unpaced render loop pins a core; pass/fail rests on fps and RSS.
    budget = perf.sample(args.frames / elapsed, check_cpu=False)
    _print_json(
        {
            "frames": args.frames,
            "seconds": elapsed,
            "budget": asdict(budget),
            "pass": budget.passed,
        }
    )
    return 0 if budget.passed else 2


def cmd_doctor(_args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(load_config()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciiclock", description="ASCII art analog clock server and tools")
    sub = parser.add_subparsers(dest="command", required=True)

    serve_cmd = sub.add_parser("serve", help="Serve the polling page and clock ticks over HTTP")
    serve_cmd.add_argument("--host", default=None, help="Bind address (default from config)")
    serve_cmd.add_argument("--port", type=int, default=None, help="Bind port (default from config)")
    serve_cmd.set_defaults(func=cmd_serve)

    render_cmd = sub.add_parser("render", help="Print one clock frame")
    render_cmd.add_argument("--time", default=None, help="UNIX timestamp in seconds (default now)")
    render_cmd.add_argument("--width", type=int, default=None)
    render_cmd.add_argument("--height", type=int, default=None)
    render_cmd.add_argument("--tz", default=None, help="Timezone name, 'UTC' or 'local'")
    render_cmd.set_defaults(func=cmd_render)

    preview_cmd = sub.add_parser("preview", help="Write a grayscale PNG of one frame")
    target = preview_cmd.add_mutually_exclusive_group(required=True)
    target.add_argument("--out", default=None, help="Output PNG path")
    target.add_argument("--data-url", action="store_true", help="Print the PNG as a data URL instead of writing a file")
    preview_cmd.add_argument("--time", default=None, help="UNIX timestamp in seconds (default now)")
    preview_cmd.add_argument("--scale", type=int, default=4)
    preview_cmd.add_argument("--tz", default=None, help="Timezone name, 'UTC' or 'local'")
    preview_cmd.set_defaults(func=cmd_preview)

    bench_cmd = sub.add_parser("benchmark", help="Render repeatedly and check the performance budget")
    bench_cmd.add_argument("--frames", type=int, default=200)
    bench_cmd.set_defaults(func=cmd_benchmark)

    doctor_cmd = sub.add_parser("doctor", help="Print environment and config diagnostics")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=args.command == "serve")
    try:
        return int(args.func(args))
    except ValueError as exc:
        parser.exit(2, f"asciiclock: error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())
