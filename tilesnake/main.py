# tilesnake/main.py
import argparse
import logging

from tilesnake.config import AppConfig


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="tilesnake")
    p.add_argument("mode", nargs="?", default="play", choices=["play", "headless"])
    p.add_argument("--board", type=int, default=None, help="square board size in px")
    p.add_argument("--tile", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--games", type=int, default=None)
    p.add_argument("--max-ticks", type=int, default=None)
    p.add_argument("--record-dir", default=None, help="save every frame as PNG here")
    p.add_argument("--log-csv", default=None, help="append one row per finished game")
    p.add_argument("--log-level", default="WARNING")
    return p.parse_args(argv)


def build_config(args) -> AppConfig:
    overrides = {
        "board_w": args.board, "board_h": args.board,
        "tile": args.tile, "seed": args.seed,
        "games": args.games, "max_ticks": args.max_ticks,
        "render_record_dir": args.record_dir, "log_path": args.log_csv,
    }
    return AppConfig().with_(**{k: v for k, v in overrides.items() if v is not None})


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = build_config(args)
    if args.mode == "play":
        from tilesnake.runners.run_snake import main as play
        play(cfg)
    elif args.mode == "headless":
        from tilesnake.runners.run_headless import main as headless
        headless(cfg)


if __name__ == "__main__":
    main()
