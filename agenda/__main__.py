import sys

from .menu import main

sys.exit(main())
