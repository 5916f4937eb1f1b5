import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_tracer' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_tracer import config

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def add_maze_args(parser):
    parser.add_argument("--side", type=int, default=config.SIDE, help="Cells per side")
    parser.add_argument("--start", type=int, default=config.START, help="Start cell id")
    parser.add_argument("--end", type=int, default=config.END, help="End cell id (default: last cell)")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")

def add_pacing_args(parser, step, settle, path):
    parser.add_argument("--step-delay", type=float, default=step, help="Seconds between explored cells")
    parser.add_argument("--settle-delay", type=float, default=settle, help="Pause before the solution pass")
    parser.add_argument("--path-delay", type=float, default=path, help="Seconds between solution cells")

def build_maze(cfg, logger):
    from maze_tracer.core.graph import new_maze, VertexLabel
    from maze_tracer.algo.dfs import generate

    logger.info(f"Generating {cfg.side}x{cfg.side} maze (seed={cfg.seed})...")
    graph = new_maze(cfg.side)
    graph.push_vertex(cfg.start, VertexLabel.START)
    graph.push_vertex(cfg.end, VertexLabel.END)
    gen = generate(graph, seed_cell=cfg.start, seed=cfg.seed)
    logger.debug(f"Carved {gen.step_count} passages over {len(gen.visited)} cells")
    return graph

def main(argv=None):
    parser = argparse.ArgumentParser(description="Maze Tracer: generate a maze and animate a depth-first search")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run Command
    run_parser = subparsers.add_parser("run", help="Open a window; SPACE starts the search")
    add_maze_args(run_parser)
    add_pacing_args(run_parser, config.STEP_DELAY, config.SETTLE_DELAY, config.PATH_DELAY)
    run_parser.add_argument("--width", type=int, default=config.WINDOW_WIDTH, help="Window width")
    run_parser.add_argument("--height", type=int, default=config.WINDOW_HEIGHT, help="Window height")
    run_parser.add_argument("--record", action="store_true", help="Record the animation to mp4")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Generate and solve without a window")
    add_maze_args(solve_parser)
    add_pacing_args(solve_parser, 0.0, 0.0, 0.0)
    solve_parser.add_argument("--events", action="store_true", help="Print every trace event")
    solve_parser.add_argument("--no-draw", action="store_true", help="Skip the text drawing")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it")
    add_maze_args(gen_parser)

    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_tracer")

    if args.command is None:
        parser.print_help()
        return 0

    try:
        cfg = config.TraceConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"Running command: {args.command}")
    graph = build_maze(cfg, logger)

    if args.command == "generate":
        from maze_tracer.core.analysis import MazeAnalyzer
        from maze_tracer.viz.text import render_text

        stats = MazeAnalyzer.calculate_stats(graph)
        logger.info(f"Stats: {stats}")
        print(render_text(graph))

    elif args.command == "solve":
        from maze_tracer.core.channel import TraceChannel
        from maze_tracer.algo.worker import PathWorker
        from maze_tracer.viz.text import render_text

        channel = TraceChannel()
        worker = PathWorker(graph, cfg.start, cfg.end, channel,
                            step_delay=cfg.step_delay, settle_delay=cfg.settle_delay,
                            path_delay=cfg.path_delay)
        logger.info(f"Solving from {cfg.start} to {cfg.end}...")
        worker.start()

        explored, path, failed = set(), [], []

        def consume(event):
            if args.events:
                print(event)
            if event.is_final_path:
                path.append(event.cell)
            elif event.is_terminal:
                failed.append(event.cell)
            else:
                explored.add(event.cell)

        while True:
            event = channel.recv(timeout=0.1)
            if event is not None:
                consume(event)
            elif not worker.is_alive():
                break

        # Anything sent between the last recv and the thread exiting
        for event in channel.drain():
            consume(event)
        worker.join()
        channel.close()

        if not args.no_draw:
            print(render_text(graph, explored=explored, path=path))
        if not failed:
            print(f"Done. Explored: {len(explored)} Path Length: {len(path)}")
        else:
            print(f"Done. Explored: {len(explored)} End {cfg.end} unreachable")
            return 1

    elif args.command == "run":
        from maze_tracer.viz.renderer import Renderer

        logger.info("Visual mode enabled - Opening window...")
        renderer = Renderer(graph, cfg.start, cfg.end, width=args.width, height=args.height,
                            step_delay=cfg.step_delay, settle_delay=cfg.settle_delay,
                            path_delay=cfg.path_delay, record=args.record)
        renderer.init_window()
        renderer.run_loop()

        if renderer.path:
            logger.info(f"Solution length: {len(renderer.path)}")
        elif renderer.unreachable:
            logger.info("No solution: end unreachable.")
        else:
            logger.info("No solution shown (search not started or window closed early).")

    return 0

if __name__ == "__main__":
    sys.exit(main())
