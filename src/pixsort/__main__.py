import argparse

from pixsort import __version__


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="pixsort",
        description="Sort the images of a folder into destination folders, one key press at a time.",
    )
    parser.add_argument(
        "folder",
        nargs="?",
        default="",
        help="folder to sort; becomes the saved source folder",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="destinations JSON file to read and write",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args()

    # importing the app loads config.toml, keep --help fast
    from pixsort.app import Application

    Application(startup_path=args.folder, config_path=args.config_path).run()


if __name__ == "__main__":
    main()
