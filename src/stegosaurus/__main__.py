"""Allow running Stegosaurus with `python -m stegosaurus`."""

from stegosaurus.cli import main

main()
