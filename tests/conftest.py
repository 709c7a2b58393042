import os
import sys

# make the shared hypothesis strategies importable from the test modules
sys.path.insert(0, os.path.dirname(__file__))
