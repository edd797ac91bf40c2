"""SkinPack command-line entry point (``python -m skinpack``)."""

from skinpack.cli import main

if __name__ == "__main__":
    main()
