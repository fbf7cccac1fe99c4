from __future__ import annotations

import argparse
import logging
from pathlib import Path

from cinequote_core.core import QuizRuntime, TickClock, load_config, parse_script
from cinequote_core.quiz import QUOTES, QuizController
from cinequote_core.render import HtmlSceneRenderer, SceneRasterizer, save_png


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="cinequote")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="Run a scripted headless quiz session.")
    play.add_argument("--config", type=Path, default=None, help="Path to quiz.toml.")
    play.add_argument("--ticks", type=int, default=10)
    play.add_argument("--tick-ms", type=int, default=None, help="Override the configured tick period.")
    play.add_argument("--seed", type=int, default=None, help="Override the configured shuffle seed.")
    play.add_argument(
        "--script",
        default="",
        help="Comma-separated `tick:message` entries, e.g. `1:reveal_hint,3:show_answer`.",
    )
    play.add_argument("--realtime", action="store_true", help="Sleep one tick period per tick.")
    play.add_argument("--html-out", type=Path, default=None, help="Write the last frame as an HTML page.")
    play.add_argument("--png-out", type=Path, default=None, help="Write the last frame as a PNG preview.")
    play.add_argument("--width", type=int, default=1024)
    play.add_argument("--height", type=int, default=640)

    quotes = sub.add_parser("quotes", help="List the bundled quote table.")
    quotes.add_argument("--limit", type=int, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        config = load_config(args.config)
        tick_ms = args.tick_ms if args.tick_ms is not None else config.tick_ms
        seed = args.seed if args.seed is not None else config.seed
        controller = QuizController(theme=config.theme, timings=config.timings, seed=seed)
        html = HtmlSceneRenderer(output_path=args.html_out, theme=config.theme)
        runtime = QuizRuntime(controller=controller, clock=TickClock(period_ms=tick_ms), renderer=html)
        script = parse_script(args.script.split(","))
        result = runtime.run(script, max_ticks=args.ticks, realtime=args.realtime)
        if args.png_out is not None:
            rasterizer = SceneRasterizer(width=args.width, height=args.height, theme=config.theme)
            rasterizer.draw_scene_batch(runtime.scene.render_batch(result.last_timestamp))
            if rasterizer.last_frame is not None:
                save_png(rasterizer.last_frame, args.png_out)
        print(
            f"run complete: ticks={result.ticks_run} updates={result.updates_applied} "
            f"messages={result.messages_dispatched} stage={result.final_stage} rounds={result.rounds}"
        )
        return

    if args.command == "quotes":
        limit = len(QUOTES) if args.limit is None else max(0, args.limit)
        for idx, record in enumerate(QUOTES[:limit]):
            print(f"{idx:3d}. \"{record.quote}\" - {record.character}, {record.movie} ({record.year})")
        return

    raise RuntimeError(f"unsupported command: {args.command}")


if __name__ == "__main__":
    main()
