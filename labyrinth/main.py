import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'labyrinth' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

ALGO_CHOICES = ["dfs", "kruskal", "prim", "division"]


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def add_maze_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--width", type=int, default=15, help="Maze Width")
    parser.add_argument("--height", type=int, default=15, help="Maze Height")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    parser.add_argument("--algo", type=str, default="dfs", choices=ALGO_CHOICES, help="Generation Algorithm")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Labyrinth: maze generator and navigation server")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it")
    add_maze_arguments(gen_parser)
    gen_parser.add_argument("--visual", action="store_true", help="Animate generation in a window")

    play_parser = subparsers.add_parser("play", help="Walk through a maze yourself")
    add_maze_arguments(play_parser)
    play_parser.add_argument("--visual", action="store_true", help="Play in a window instead of the terminal")

    serve_parser = subparsers.add_parser("serve", aliases=["daedalus"], help="Run the maze HTTP server")
    add_maze_arguments(serve_parser)
    serve_parser.add_argument("--host", type=str, default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8001, help="Port to listen on")

    return parser


def play_console(session, logger):
    from labyrinth.core.errors import MazeError
    from labyrinth.core.grid import parse_direction
    from labyrinth.viz.ascii import render

    survey = session.awake()
    while not survey.victory:
        print(render(session.grid, session.navigator.position))
        try:
            line = input("move (up/down/left/right, q to quit)> ")
        except EOFError:
            break
        if line.strip().lower() in ("q", "quit"):
            break
        try:
            survey = session.move(parse_direction(line))
        except (MazeError, ValueError) as e:
            print(e)

    if survey.victory:
        print(f"Victory achieved in {session.navigator.steps_taken} steps")
    logger.info(f"Results: {session.results()}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("labyrinth")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        logger.info(f"Generating {args.width}x{args.height} maze with {args.algo.upper()}...")
        from labyrinth.algo.factory import get_generator
        from labyrinth.core.errors import MazeError
        try:
            generator = get_generator(args.algo, args.width, args.height, seed=args.seed)
        except MazeError as e:
            logger.error(f"Cannot generate maze: {e}")
            return 1

        if args.visual:
            from labyrinth.viz.renderer import Renderer
            renderer = Renderer(generator=generator)
            renderer.init_window()
            renderer.run_loop()
        else:
            generator.run_all()
            from labyrinth.viz.ascii import render
            print(render(generator.grid))
        logger.info(f"Open passages: {generator.grid.count_open_passages()}")

    elif args.command == "play":
        from labyrinth.core.session import Session
        from labyrinth.core.errors import MazeError
        session = Session(args.algo, args.width, args.height, seed=args.seed)
        try:
            if args.visual:
                from labyrinth.viz.renderer import Renderer
                renderer = Renderer(session=session)
                renderer.init_window()
                renderer.run_loop()
            else:
                play_console(session, logger)
        except MazeError as e:
            logger.error(f"Cannot start maze: {e}")
            return 1

    elif args.command in ("serve", "daedalus"):
        from labyrinth.core.session import Session
        from labyrinth.server.app import create_app
        session = Session(args.algo, args.width, args.height, seed=args.seed)
        app = create_app(session)
        logger.info(f"Serving {args.width}x{args.height} {args.algo} mazes on {args.host}:{args.port}")
        try:
            app.run(host=args.host, port=args.port)
        finally:
            session.results()


if __name__ == "__main__":
    main()
