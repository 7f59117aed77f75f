import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'snake_engine' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Snake Engine: fills a grid with hand-drawn random walks")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Fill Command
    fill_parser = subparsers.add_parser("fill", help="Fill a grid headlessly and print path stats")
    fill_parser.add_argument("--width", type=int, default=40, help="Grid width in cells")
    fill_parser.add_argument("--height", type=int, default=30, help="Grid height in cells")
    fill_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    fill_parser.add_argument("--paths", type=int, default=None, help="Stop after this many paths (partial fill)")

    # View Command
    view_parser = subparsers.add_parser("view", help="Open a window and draw snakes")
    view_parser.add_argument("--width", type=int, default=1280, help="Window width in pixels")
    view_parser.add_argument("--height", type=int, default=720, help="Window height in pixels")
    view_parser.add_argument("--cell-size", type=int, default=None, help="Cell size in pixels (random if omitted)")
    view_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    view_parser.add_argument("--record", action="store_true", help="Record drawing video")

    # Render Command
    render_parser = subparsers.add_parser("render", help="Draw a full board to an image file")
    render_parser.add_argument("--width", type=int, default=1280, help="Image width in pixels")
    render_parser.add_argument("--height", type=int, default=720, help="Image height in pixels")
    render_parser.add_argument("--cell-size", type=int, default=None, help="Cell size in pixels (random if omitted)")
    render_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    render_parser.add_argument("--out", type=str, default="snakes.png", help="Output image path")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time full fills")
    bench_parser.add_argument("--size", type=int, default=500, help="Benchmark grid size")

    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("snake_engine")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    from snake_engine.core.errors import InvalidDimensions

    if args.command == "fill":
        from snake_engine.core.session import GridSession
        from snake_engine.core.stats import PathStats

        if args.paths is not None and args.paths < 1:
            parser.error("--paths must be at least 1")

        try:
            session = GridSession(args.width, args.height, seed=args.seed)
        except InvalidDimensions as e:
            parser.error(str(e))

        logger.info(f"Filling {args.width}x{args.height} grid (seed={session.seed})...")
        paths = []
        for path in session.fill_all():
            paths.append(path)
            if args.paths is not None and len(paths) >= args.paths:
                logger.info(f"Stopping after {len(paths)} paths")
                break

        stats = PathStats.calculate(paths, session.width, session.height)
        print(f"\nSeed: {session.seed}  Steps walked: {session.steps_taken}")
        print(f"\n{'STAT':<18} | VALUE")
        print("-" * 32)
        for key, value in stats.items():
            if isinstance(value, float):
                value = f"{value:.2f}"
            print(f"{key:<18} | {value}")

    elif args.command in ("view", "render"):
        if args.cell_size is not None and args.cell_size < 1:
            parser.error("--cell-size must be positive")
        if args.width < 1 or args.height < 1:
            parser.error("--width and --height must be positive")

        if args.command == "render":
            # Off-screen drawing, no window needed
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

        import pygame
        from snake_engine.viz.renderer import Renderer

        if args.command == "view":
            renderer = Renderer(args.width, args.height, seed=args.seed,
                                cell_size=args.cell_size, record=args.record)

            # Auto-Name Recording
            if args.record:
                import datetime
                if not os.path.exists("recordings"):
                    os.makedirs("recordings")

                ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
                fname = f"view_{args.width}x{args.height}_{ts}.mp4"

                renderer.recorder.output_file = os.path.join("recordings", fname)
                logger.info(f"Recording video to {renderer.recorder.output_file}")

            renderer.init_window()
            renderer.run_loop()
        else:
            renderer = Renderer(args.width, args.height, seed=args.seed, cell_size=args.cell_size)
            logger.info(f"Rendering {renderer.session.width}x{renderer.session.height} board...")
            canvas = renderer.render_all()
            pygame.image.save(canvas, args.out)
            logger.info(f"Saved {args.out} ({renderer.session.paths_generated} paths)")

    elif args.command == "benchmark":
        import time
        from snake_engine.core.session import GridSession

        try:
            session = GridSession(args.size, args.size, seed=123)
        except InvalidDimensions as e:
            parser.error(str(e))

        logger.info(f"Running fill benchmark ({args.size}x{args.size})...")
        t0 = time.time()
        path_count = 0
        for _ in session.fill_all():
            path_count += 1
        duration = time.time() - t0

        cells = args.size * args.size
        print(f"\n{'CELLS':<12} | {'PATHS':<10} | {'TIME (s)':<10} | {'CELLS/SEC':<12}")
        print("-" * 52)
        print(f"{cells:<12,} | {path_count:<10} | {duration:<10.4f} | {cells / max(duration, 1e-9):<12,.0f}")

if __name__ == "__main__":
    main()
