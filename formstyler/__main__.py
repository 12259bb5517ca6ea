"""Entry point for `python -m formstyler`."""

from formstyler.cli import main

if __name__ == "__main__":
    main()
