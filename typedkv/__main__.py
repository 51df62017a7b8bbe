"""Allow ``python -m typedkv``."""

from .shell import main

main()
