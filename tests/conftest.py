# Headless Qt for the whole suite; widgets and signals go through
# pytest-qt's ``qtbot`` fixture.

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
