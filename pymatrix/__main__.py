import sys

from pymatrix.cli import main

sys.exit(main())
