"""`python -m elm_build` runs the same build as the `elm-build` script.

Run it from the project root so the default tmp/ and docs/ paths resolve.
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
