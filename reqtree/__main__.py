"""Entry point for ``python -m reqtree <command>``.

Commands:
    classify – resolve the requirement type of one file
    scan     – walk a requirements tree and list its narratives
    types    – show the effective requirement types
"""
from reqtree.cli import main

if __name__ == "__main__":
    main()
