# snakegame/main.py
import argparse

from .config import AppConfig, CANVAS_W, CANVAS_H, CELL_SIZE


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="snakegame")
    p.add_argument("mode", nargs="?", default="play", choices=["play", "headless"])
    p.add_argument("--width-px", type=int, default=CANVAS_W)
    p.add_argument("--height-px", type=int, default=CANVAS_H)
    p.add_argument("--cell", type=int, default=CELL_SIZE)
    p.add_argument("--tick-ms", type=int, default=150)
    p.add_argument("--start-len", type=int, default=5)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--mute", action="store_true")
    p.add_argument("--sound-dir", default=None)
    p.add_argument("--record-dir", default=None)
    p.add_argument("--log-csv", default=None)
    p.add_argument("--games", type=int, default=10, help="headless mode only")
    return p.parse_args(argv)


def build_config(args) -> AppConfig:
    return AppConfig.from_canvas(
        args.width_px, args.height_px, args.cell,
        tick_interval_ms=args.tick_ms,
        initial_snake_length=args.start_len,
        seed=args.seed,
        sound_enabled=not args.mute,
        sound_dir=args.sound_dir,
        render_record_dir=args.record_dir,
        log_csv=args.log_csv,
    )


def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    if args.mode == "play":
        from .runners.run_snake import main as play
        play(cfg)
    elif args.mode == "headless":
        from .runners.run_headless import main as headless
        headless(cfg, games=args.games)

if __name__ == "__main__":
    main()
