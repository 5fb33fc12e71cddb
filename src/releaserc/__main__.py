import os
from pathlib import Path

from releaserc.application import Application


def main() -> None:
    cwd = os.getenv("RELEASERC_DIR")
    if cwd:
        os.chdir(cwd)
    Application(Path.cwd()).run()


if __name__ == "__main__":
    main()
