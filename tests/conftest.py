import os
import sys

# Modules live under repository/ without a package; make them importable without an install.
REPO = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'repository'))
if REPO not in sys.path:
	sys.path.insert(0, REPO)
