"""Module entrypoint for `python -m gui`.

Delegates to `gui.launcher.main` to launch the dashboard.
"""

from __future__ import annotations

from . import launcher as _launcher


def main():  # pragma: no cover - runtime delegation
    _launcher.main()


if __name__ == "__main__":  # pragma: no cover
    main()
